import os
import sys

from ..cli_logger import logger
from ..errors import ConfigurationReadError
from .module_registry import SERVICES_PREFIX


class LegacyRegistry:
    """Deprecated lookup of `provider-services/<id>` files across the import search path."""

    def __init__(self, search_path=None):
        self.search_path = search_path

    def locate(self, deprecated_id):
        search_path = sys.path if self.search_path is None else self.search_path
        for entry in search_path:
            candidate = os.path.join(entry or os.curdir, SERVICES_PREFIX, deprecated_id)
            if os.path.isfile(candidate):
                return candidate
        return None

    def read(self, deprecated_id):
        logger.debug(f"Checking deprecated {SERVICES_PREFIX}/{deprecated_id} resource")
        resource_path = self.locate(deprecated_id)
        if resource_path is None:
            logger.found(None)
            return None
        try:
            type_name = self._read_first_line(resource_path)
        except ConfigurationReadError as e:
            logger.error(str(e))
            return None
        logger.found(type_name or None)
        return type_name or None

    @staticmethod
    def _read_first_line(resource_path):
        try:
            with open(resource_path, "r", encoding="utf-8") as f:
                return f.readline().strip()
        except (IOError, UnicodeDecodeError) as e:
            raise ConfigurationReadError(f"Error reading provider resource {resource_path}", e)

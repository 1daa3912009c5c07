import os
from ..cli_logger import logger


class PropertyLookup:
    """Reads provider names from a process-wide key/value store (the environment by default)."""

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def get(self, key):
        logger.debug(f"Checking system property {key}")
        value = self.environ.get(key)
        logger.found(value)
        return value

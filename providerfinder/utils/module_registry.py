import importlib
import importlib.resources

from ..cli_logger import logger
from .instantiator import ImportLoader

PLATFORM_MODULE = "providerfinder_platform"
SERVICES_PREFIX = "provider-services"


def _read_first_line(resource):
    with resource.open("r", encoding="utf-8") as f:
        return f.readline().strip()


class ModuleRegistry:
    """
    Best-effort discovery through a single, well-known platform package.

    Hosts that bundle their providers ship a `providerfinder_platform` package
    carrying `provider-services/<id>` resources. When the package is absent, or
    reading it fails in any way, this source simply yields nothing.
    """

    def __init__(self, module_name=PLATFORM_MODULE, importer=None):
        self.module_name = module_name
        self.importer = importer or importlib.import_module

    def read(self, factory_id, deprecated_id=None):
        """Returns (type_name, loader) for the first named provider, or None."""
        try:
            module = self.importer(self.module_name)
        except ImportError:
            logger.debug(f"Platform module {self.module_name} is not available")
            return None
        except Exception as e:
            logger.debug(f"Platform module {self.module_name} could not be loaded: {e}")
            return None

        keys = [deprecated_id, factory_id] if deprecated_id else [factory_id]
        try:
            root = importlib.resources.files(module).joinpath(SERVICES_PREFIX)
            for key in keys:
                resource = root.joinpath(key)
                logger.debug(f"Checking {self.module_name} resource {SERVICES_PREFIX}/{key}")
                if not resource.is_file():
                    logger.found(None)
                    continue
                type_name = _read_first_line(resource)
                logger.found(type_name or None)
                # The first resource present decides, even when it is blank.
                if type_name:
                    return type_name, ImportLoader(anchor=module.__name__)
                return None
        except Exception as e:
            logger.debug(f"Could not read provider resources from {self.module_name}: {e}")
        return None

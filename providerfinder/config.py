import toml
import os
import sys
from .cli_logger import logger
from .errors import ConfigurationReadError

CONFIG_FILE = "providerfinder.toml"

def config_home(home=None):
    """Return the directory holding the conf/ and lib/ configuration folders."""
    if home:
        return home
    return os.environ.get("PROVIDERFINDER_HOME", sys.prefix)

def config_paths(home=None):
    """Return the primary and the legacy location of the configuration file."""
    home = config_home(home)
    return [
        os.path.join(home, "conf", CONFIG_FILE),
        # to ensure backwards compatibility
        os.path.join(home, "lib", CONFIG_FILE),
    ]

def find_config_file(home=None):
    for config_path in config_paths(home):
        logger.debug(f"Checking configuration in {config_path}")
        if os.path.exists(config_path):
            return config_path
    return None

def read_config(config_path):
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        raise ConfigurationReadError(f"Error decoding TOML file at {config_path}", e)
    except (IOError, UnicodeDecodeError) as e:
        raise ConfigurationReadError(f"Error reading configuration file at {config_path}", e)

def load_config(config_path):
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            return read_config(config_path)
        except ConfigurationReadError as e:
            logger.error(str(e))
            logger.info("Please check the file's format and permissions.")
    return {}

def save_config(config, config_path):
    logger.info(f"Saving configuration to {config_path}")
    try:
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_value(conf, key):
    """
    Looks a key up in a loaded configuration.

    A quoted key such as "pkg.contracts.Factory" is matched verbatim first;
    otherwise the dotted parts are walked through nested tables. Tables are
    never returned as values.
    """
    value = conf.get(key)
    if value is None:
        value = conf
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return None
            value = value[part]
    if isinstance(value, dict):
        return None
    return str(value)


class FileConfigLookup:
    """Reads provider names from the well-known providerfinder.toml file."""

    def __init__(self, home=None):
        self.home = home

    def read(self):
        """
        Returns the loaded configuration, or None if there is no usable file.

        A file that exists but cannot be read is reported and treated as absent.
        """
        config_path = find_config_file(self.home)
        if config_path is None:
            return None
        try:
            return read_config(config_path)
        except ConfigurationReadError as e:
            logger.error(f"Error reading provider configuration from [{config_path}] file. "
                         f"Check it is accessible and has correct format. ({e})")
            return None

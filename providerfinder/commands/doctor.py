import click
import importlib.util
import os
import sys
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..errors import ConfigurationReadError
from ..utils.module_registry import PLATFORM_MODULE, SERVICES_PREFIX


def check_sources(home=None, search_path=None):
    """
    Reports which provider sources are available in this environment.

    Returns True when the configuration file, if present, can be read.
    """
    healthy = True

    config_file_path = config_module.find_config_file(home)
    if config_file_path is None:
        searched = ", ".join(config_module.config_paths(home))
        logger.info(f"Configuration file: not present (searched {searched})")
    else:
        try:
            conf = config_module.read_config(config_file_path)
            logger.success(f"Configuration file: {config_file_path} ({len(conf)} entries)")
        except ConfigurationReadError as e:
            logger.error(f"Configuration file: {e}")
            healthy = False

    if importlib.util.find_spec(PLATFORM_MODULE) is not None:
        logger.success(f"Platform module: {PLATFORM_MODULE} is importable")
    else:
        logger.info(f"Platform module: {PLATFORM_MODULE} is not installed")

    search_path = sys.path if search_path is None else search_path
    legacy_dirs = [
        os.path.join(entry or os.curdir, SERVICES_PREFIX)
        for entry in search_path
        if os.path.isdir(os.path.join(entry or os.curdir, SERVICES_PREFIX))
    ]
    if legacy_dirs:
        for legacy_dir in legacy_dirs:
            logger.warning(f"Deprecated {SERVICES_PREFIX} directory: {legacy_dir}")
    else:
        logger.info(f"No deprecated {SERVICES_PREFIX} directories on the search path")

    return healthy


@click.command()
@click.pass_context
@handle_exceptions
def doctor(ctx):
    """Check which provider sources are available in this environment."""
    logger.info("Running environment check...")
    if check_sources(home=ctx.obj.get("home")):
        logger.success("Environment check completed successfully.")
    else:
        logger.error("Environment check found issues. Please review the errors above.")

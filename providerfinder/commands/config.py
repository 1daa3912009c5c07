import click
import os
import sys
import json
from .. import config as config_module
from ..cli_logger import logger


def _existing_config(ctx):
    config_file_path = config_module.find_config_file(ctx.obj.get("home"))
    if config_file_path is None:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found. Run 'providerfinder config path' to see where it is searched for.")
    return config_file_path


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the providerfinder.toml configuration file."""
    pass

@config.command()
@click.pass_context
def path(ctx):
    """Show where the providerfinder.toml file is searched for."""
    for config_file_path in config_module.config_paths(ctx.obj.get("home")):
        state = "found" if os.path.exists(config_file_path) else "missing"
        click.echo(f"{config_file_path} ({state})")

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the providerfinder.toml file."""
    config_file_path = _existing_config(ctx)
    if config_file_path is None:
        return
    try:
        with open(config_file_path, 'r', encoding="utf-8") as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_module.CONFIG_FILE} at {config_file_path}: {e}")
        logger.info("Please check file permissions.")
    except Exception as e:
        logger.error(f"An unexpected error occurred while viewing {config_module.CONFIG_FILE}: {e}")
        logger.exception(*sys.exc_info())

@config.command()
@click.pass_context
def list(ctx):
    """List all configured keys and provider names."""
    config_file_path = _existing_config(ctx)
    if config_file_path is None:
        return
    conf = config_module.load_config(config_file_path)
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get the provider name configured for KEY."""
    config_file_path = _existing_config(ctx)
    if config_file_path is None:
        return
    conf = config_module.load_config(config_file_path)
    value = config_module.get_value(conf, key)
    if value is None:
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        return
    click.echo(value)

@config.command()
@click.argument('key')
@click.argument('value')
@click.pass_context
def set(ctx, key, value):
    """Set the provider name for KEY, creating the file if needed."""
    config_file_path = config_module.find_config_file(ctx.obj.get("home"))
    if config_file_path is None:
        config_file_path = config_module.config_paths(ctx.obj.get("home"))[0]
        conf = {}
    else:
        conf = config_module.load_config(config_file_path)

    # Contract ids contain dots, so keys are stored quoted rather than as nested tables.
    conf[key] = value

    if config_module.save_config(conf, config_file_path):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove KEY from the providerfinder.toml file."""
    config_file_path = _existing_config(ctx)
    if config_file_path is None:
        return
    conf = config_module.load_config(config_file_path)

    if key in conf:
        del conf[key]
    else:
        keys = key.split('.')
        d = conf
        try:
            for k in keys[:-1]:
                d = d[k]
            del d[keys[-1]]
        except (KeyError, TypeError):
            logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
            return
    if config_module.save_config(conf, config_file_path):
        logger.info(f"Unset '{key}'")

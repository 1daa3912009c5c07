import click
import importlib.metadata
import platform
from ..cli_logger import logger

DISTRIBUTION = "providerfinder"


@click.command()
@click.option("--short", is_flag=True, help="Print only the version number.")
def version(short):
    """Print the version of the ProviderFinder tool."""
    try:
        ver = importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of ProviderFinder. Is it installed correctly?")
        return
    if short:
        click.echo(ver)
    else:
        click.echo(f"ProviderFinder {ver} (Python {platform.python_version()})")

import click
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--home", default=None, envvar="PROVIDERFINDER_HOME",
              help="Directory holding the conf/ and lib/ configuration folders.")
@click.option("--verbose", "-v", is_flag=True, help="Show every lookup on the console.")
@click.pass_context
def cli(ctx, home, verbose):
    """ProviderFinder CLI tool."""
    if verbose:
        logger.verbose = True
    ctx.obj = {"home": home}

cli.add_command(resolve)
cli.add_command(config)
cli.add_command(doctor)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    try:
        cli()
    except Exception as e:
        click.echo(f"An unexpected error occurred: {e}", err=True)
        click.echo("Please report this issue to the ProviderFinder developers.", err=True)

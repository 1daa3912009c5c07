import click
from ..cli_logger import logger
from ..config import FileConfigLookup
from ..decorators import handle_exceptions
from ..finder import Finder
from ..utils.instantiator import contract_id, load_type


def _type_name(obj):
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


@click.command()
@click.argument("contract")
@click.option("--deprecated-id", default=None, help="Deprecated identifier of the contract.")
@click.option("--default", "default_name", default=None, help="Type name of the built-in implementation.")
@click.option("--no-fallback", is_flag=True, help="Do not fall back to the default implementation.")
@click.pass_context
@handle_exceptions
def resolve(ctx, contract, deprecated_id, default_name, no_fallback):
    """Resolve the provider of CONTRACT (a fully-qualified class name)."""
    contract_type = load_type(contract)
    if not isinstance(contract_type, type):
        raise click.BadParameter(f"{contract} is not a class", param_hint="CONTRACT")

    logger.info(f"Resolving provider for {contract_id(contract_type)}...")
    finder = Finder(config_file=FileConfigLookup(home=ctx.obj.get("home")))
    provider = finder.find(contract_type, deprecated_id, default_name, not no_fallback)
    if provider is None:
        logger.warning(f"No provider found for {contract_id(contract_type)}.")
        ctx.exit(1)

    logger.success(f"Resolved {contract_id(contract_type)}")
    click.echo(_type_name(provider))

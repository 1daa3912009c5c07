import importlib
from typing import Optional

from ..cli_logger import logger
from ..errors import InstantiationError


def contract_id(contract: type) -> str:
    """Returns the fully-qualified name identifying a contract class."""
    return f"{contract.__module__}.{contract.__qualname__}"


class ImportLoader:
    """
    Imports types named as 'package.module.Attr' or 'package.module:Attr'.

    With an anchor package, names starting with '.' are resolved relative to it.
    """

    def __init__(self, anchor: Optional[str] = None):
        self.anchor = anchor

    def load(self, type_name: str):
        if ":" in type_name:
            module_name, _, attr_path = type_name.partition(":")
        else:
            module_name, _, attr_path = type_name.rpartition(".")
            # rpartition leaves a bare '.' for names like '.Impl'
            if module_name == "" and type_name.startswith("."):
                module_name = "."
        if not module_name or not attr_path:
            raise ValueError(f"'{type_name}' is not a fully-qualified type name")

        obj = importlib.import_module(module_name, package=self.anchor)
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
        return obj

    def __repr__(self):
        return f"ImportLoader(anchor={self.anchor!r})"


DEFAULT_LOADER = ImportLoader()


def load_type(type_name: str, loader: Optional[ImportLoader] = None):
    loader = loader or DEFAULT_LOADER
    try:
        return loader.load(type_name)
    except Exception as e:
        # Module-level code of the named module may raise anything.
        raise InstantiationError(f"Provider {type_name} not found", e)


def new_instance(contract: type, type_name: str, default_name: Optional[str] = None,
                 loader: Optional[ImportLoader] = None):
    """
    Imports type_name and constructs it as a provider of the contract.

    The default implementation is always imported with the package's own loader,
    so that a source-specific loader cannot shadow it.

    Raises:
        InstantiationError: if the type cannot be imported, does not implement
            the contract, or its constructor fails.
    """
    if type_name == default_name:
        loader = DEFAULT_LOADER
    cls = load_type(type_name, loader)

    if not isinstance(cls, type) or not issubclass(cls, contract):
        raise InstantiationError(
            f"Provider {type_name} is not a subclass of {contract_id(contract)}")

    logger.debug(f"Creating instance of {type_name}")
    try:
        return cls()
    except Exception as e:
        raise InstantiationError(f"Provider {type_name} could not be instantiated", e)

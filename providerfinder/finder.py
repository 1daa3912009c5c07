"""
Runtime resolution of the provider implementing an abstract factory contract.

A library declares a contract class and asks `find` for an implementation. The
embedding application, the platform or a packaged default supplies the actual
class through one of the sources below, consulted in order:

    1. a process-wide property (environment variable) named after the contract
    2. the well-known providerfinder.toml configuration file
    3. the first package entry point registered for the contract
    4. the optional platform module (best-effort)
    5. the deprecated provider-services resource, keyed by the deprecated id
    6. the default implementation, if fallback is requested

The first source naming a type that instantiates wins. A type that fails to
instantiate is reported and the search moves on to the next source.
"""
from .cli_logger import logger
from .config import FileConfigLookup, get_value
from .errors import InstantiationError, NoProviderFound
from .utils.instantiator import contract_id, new_instance
from .utils.legacy_registry import LegacyRegistry
from .utils.module_registry import ModuleRegistry, SERVICES_PREFIX
from .utils.property_lookup import PropertyLookup
from .utils.service_registry import ServiceRegistry


class Finder:

    def __init__(self, properties=None, config_file=None, services=None, modules=None,
                 legacy=None, instantiate=new_instance):
        self.properties = properties or PropertyLookup()
        self.config_file = config_file or FileConfigLookup()
        self.services = services or ServiceRegistry()
        self.modules = modules or ModuleRegistry()
        self.legacy = legacy or LegacyRegistry()
        self.instantiate = instantiate

    def find(self, contract, deprecated_id=None, default_name=None, try_fallback=True):
        """
        Finds and instantiates the provider of the given contract.

        Args:
            contract: The abstract factory class to resolve.
            deprecated_id: Deprecated identifier still honoured for older configuration.
            default_name: Type name of the built-in implementation, or None.
            try_fallback: Whether to use the default when no source names a provider.

        Returns:
            An instance of the contract, or None if nothing was found and
            try_fallback is False.

        Raises:
            NoProviderFound: if try_fallback is True and there is no default.
            InstantiationError: if the default implementation cannot be created.
        """
        factory_id = contract_id(contract)

        # Use the system property first
        type_name = self._two_tier(self.properties.get, factory_id, deprecated_id)
        provider = self._try_instantiate(contract, type_name, default_name, "system property")
        if provider is not None:
            return provider

        conf = self.config_file.read()
        if conf:
            type_name = self._two_tier(lambda key: self._config_value(conf, key),
                                       factory_id, deprecated_id)
            provider = self._try_instantiate(contract, type_name, default_name, "configuration file")
            if provider is not None:
                return provider

        provider = self.services.first(contract, factory_id)
        if provider is not None:
            return provider

        discovered = self.modules.read(factory_id, deprecated_id)
        if discovered is not None:
            type_name, loader = discovered
            provider = self._try_instantiate(contract, type_name, default_name,
                                             "platform module", loader=loader)
            if provider is not None:
                return provider

        if deprecated_id is not None:
            type_name = self.legacy.read(deprecated_id)
            if type_name is not None:
                logger.warning(
                    f"Using deprecated {SERVICES_PREFIX} mechanism with non-standard property: "
                    f"{deprecated_id}. Property {factory_id} should be used instead.")
                provider = self._try_instantiate(contract, type_name, default_name,
                                                 f"{SERVICES_PREFIX} resource")
                if provider is not None:
                    return provider

        # Not found and no fallback wanted: no result rather than an error.
        if not try_fallback:
            return None

        if default_name is None:
            raise NoProviderFound(f"Provider for {factory_id} cannot be found")
        logger.debug(f"Using default provider {default_name} for {factory_id}")
        try:
            return self.instantiate(contract, default_name, default_name)
        except InstantiationError as e:
            raise InstantiationError(
                f"Default provider {default_name} for {factory_id} cannot be used", e)

    @staticmethod
    def _config_value(conf, key):
        logger.debug(f"Checking property {key}")
        value = get_value(conf, key)
        logger.found(value)
        return value

    @staticmethod
    def _two_tier(lookup, factory_id, deprecated_id):
        """Looks up the contract key, then the deprecated key with a warning."""
        value = lookup(factory_id)
        if value is not None:
            return value
        if deprecated_id is not None:
            value = lookup(deprecated_id)
            if value is not None:
                logger.warning(f"Using non-standard property: {deprecated_id}. "
                               f"Property {factory_id} should be used instead.")
                return value
        return None

    def _try_instantiate(self, contract, type_name, default_name, source, loader=None):
        if not type_name:
            return None
        try:
            return self.instantiate(contract, type_name, default_name, loader)
        except InstantiationError as e:
            logger.warning(f"Ignoring provider from {source}: {e}")
            return None


def find(contract, deprecated_id=None, default_name=None, try_fallback=True):
    """Resolves a provider of the contract using the default sources."""
    return Finder().find(contract, deprecated_id, default_name, try_fallback)

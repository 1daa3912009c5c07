class ResolutionError(Exception):
    """Base class for every failure raised while resolving a provider."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    def __str__(self):
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class InstantiationError(ResolutionError):
    """A named type could not be imported, checked against the contract, or constructed."""


class NoProviderFound(ResolutionError):
    pass


class ConfigurationReadError(ResolutionError):
    """The well-known configuration file or a provider resource could not be read."""

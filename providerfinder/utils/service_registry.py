import importlib.metadata

from ..cli_logger import logger
from ..errors import ResolutionError


def _entry_points(group):
    return importlib.metadata.entry_points(group=group)


class ServiceRegistry:
    """
    Providers registered as package entry points.

    A distribution registers an implementation of a contract under an entry
    point group named after the contract, e.g. in its pyproject.toml:

        [project.entry-points."mylib.factories.MessageFactory"]
        fast = "fastmsg.factory:FastMessageFactory"

    Only the first registered entry point is used.
    """

    def __init__(self, entry_points=None):
        self.entry_points = entry_points or _entry_points

    def first(self, contract, factory_id):
        logger.debug(f"Checking service entry points for {factory_id}")
        for entry_point in self.entry_points(factory_id):
            try:
                provider = entry_point.load()
                if isinstance(provider, type):
                    provider = provider()
            except Exception as e:
                raise ResolutionError(f"Cannot find service for {factory_id} or load it", e)

            if not isinstance(provider, contract):
                raise ResolutionError(
                    f"Cannot find service for {factory_id} or load it",
                    f"{entry_point.value} does not provide {factory_id}")
            logger.found(entry_point.value)
            return provider
        logger.found(None)
        return None

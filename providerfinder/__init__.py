from .errors import ConfigurationReadError, InstantiationError, NoProviderFound, ResolutionError
from .finder import Finder, find
from .utils.instantiator import contract_id

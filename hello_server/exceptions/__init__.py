from .configuration_error import ConfigurationError
from .listen_error import ListenError

__all__ = (
    "ConfigurationError",
    "ListenError",
)

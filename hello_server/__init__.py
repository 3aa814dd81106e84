from hello_server.hello_server import HelloServer
from hello_server.utils.config import AppConfig

__version__ = "1.0.0"

__all__ = (
    "AppConfig",
    "HelloServer",
)

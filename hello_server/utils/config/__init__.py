from .app_config import AppConfig
from .config_loader import load_config, read_environment
from .environment_mode import EnvironmentMode
from .security_headers_config import SecurityHeadersConfig

__all__ = (
    "AppConfig",
    "EnvironmentMode",
    "SecurityHeadersConfig",
    "load_config",
    "read_environment",
)

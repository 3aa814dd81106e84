from enum import StrEnum


class EnvironmentMode(StrEnum):
    """
    Режим окружения, в котором запущен сервер.
    """
    production = "production"
    development = "development"

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from hello_server.exceptions import ConfigurationError
from hello_server.utils.config.app_config import AppConfig


def read_environment(env_file: Path | None = None) -> dict[str, str]:
    """
    Читает переменные окружения процесса, при необходимости дополняя их из .env файла.
    Уже заданные переменные окружения файлом не перезаписываются.

    :param env_file: Путь до файла с переменными окружения.
    :return: Копия переменных окружения процесса.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)

    return dict(os.environ)


def load_config(environ: Mapping[str, str]) -> AppConfig | ConfigurationError:
    """
    Проверяет переменные окружения и собирает из них конфигурацию приложения.

    :param environ: Переменные окружения.
    :return: Конфигурация или ошибка с описанием неверных переменных.
    """
    try:
        return AppConfig.model_validate(dict(environ))

    except ValidationError as err:
        problems: dict[str, str] = {}
        for error in err.errors():
            variable: str = ".".join(str(part) for part in error["loc"]) or "environment"
            problems.setdefault(variable, error["msg"])

        return ConfigurationError(problems)

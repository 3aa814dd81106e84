import pytest

from hello_server.utils.config import AppConfig


@pytest.fixture()
def valid_environ() -> dict[str, str]:
    return {
        "PORT": "4000",
        "FRONTEND_URL": "http://localhost:5173",
        "NODE_ENV": "development",
    }


@pytest.fixture()
def app_config(valid_environ: dict[str, str]) -> AppConfig:
    return AppConfig.model_validate(valid_environ)

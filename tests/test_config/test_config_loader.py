from pathlib import Path

import pytest
from pydantic import ValidationError

from hello_server.exceptions import ConfigurationError
from hello_server.utils.config import (
    AppConfig,
    EnvironmentMode,
    load_config,
    read_environment,
)


def test_valid_environment(valid_environ: dict[str, str]):
    config = load_config(valid_environ)

    assert isinstance(config, AppConfig)
    assert config.port == "4000"
    assert config.frontend_url == "http://localhost:5173"
    assert config.environment_mode is EnvironmentMode.development
    assert config.is_development


def test_unrelated_variables_ignored(valid_environ: dict[str, str]):
    valid_environ["HOME"] = "/root"
    config = load_config(valid_environ)

    assert isinstance(config, AppConfig)
    assert not hasattr(config, "HOME")


def test_port_is_not_parsed_as_number(valid_environ: dict[str, str]):
    valid_environ["PORT"] = "not-a-port"
    config = load_config(valid_environ)

    assert isinstance(config, AppConfig)
    assert config.port == "not-a-port"


@pytest.mark.parametrize("variable", ["PORT", "FRONTEND_URL", "NODE_ENV"])
def test_missing_variable(valid_environ: dict[str, str], variable: str):
    del valid_environ[variable]
    result = load_config(valid_environ)

    assert isinstance(result, ConfigurationError)
    assert list(result.problems) == [variable]
    assert variable in str(result)


def test_empty_port():
    result = load_config({"PORT": "", "FRONTEND_URL": "http://x", "NODE_ENV": "production"})

    assert isinstance(result, ConfigurationError)
    assert "PORT" in result.problems


def test_empty_frontend_url(valid_environ: dict[str, str]):
    valid_environ["FRONTEND_URL"] = ""
    result = load_config(valid_environ)

    assert isinstance(result, ConfigurationError)
    assert "FRONTEND_URL" in result.problems


@pytest.mark.parametrize("mode", ["test", "Production", "", "dev"])
def test_invalid_environment_mode(valid_environ: dict[str, str], mode: str):
    valid_environ["NODE_ENV"] = mode
    result = load_config(valid_environ)

    assert isinstance(result, ConfigurationError)
    assert list(result.problems) == ["NODE_ENV"]


def test_every_failed_variable_reported():
    result = load_config({"NODE_ENV": "staging"})

    assert isinstance(result, ConfigurationError)
    assert set(result.problems) == {"PORT", "FRONTEND_URL", "NODE_ENV"}


def test_config_is_immutable(app_config: AppConfig):
    with pytest.raises(ValidationError):
        app_config.port = "5000"  # type: ignore[misc]


def test_read_environment_from_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # Recorded first so values loaded from the file are removed after the test
    for variable in ("PORT", "NODE_ENV"):
        monkeypatch.setenv(variable, "")
        monkeypatch.delenv(variable)

    monkeypatch.setenv("FRONTEND_URL", "http://already.set")
    env_file: Path = tmp_path / ".env"
    env_file.write_text(
        "PORT=4000\nFRONTEND_URL=http://from.file\nNODE_ENV=production\n",
        encoding="utf8"
    )

    environ = read_environment(env_file)

    assert environ["PORT"] == "4000"
    assert environ["NODE_ENV"] == "production"
    assert environ["FRONTEND_URL"] == "http://already.set"


def test_read_environment_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORT", "4000")

    environ = read_environment(tmp_path / "does-not-exist.env")

    assert environ["PORT"] == "4000"


def test_field_names_not_accepted_as_variables():
    result = load_config({
        "port": "4000",
        "frontend_url": "http://evil.example",
        "environment_mode": "production",
    })

    assert isinstance(result, ConfigurationError)
    assert set(result.problems) == {"PORT", "FRONTEND_URL", "NODE_ENV"}


def test_field_name_does_not_replace_missing_variable(valid_environ: dict[str, str]):
    del valid_environ["FRONTEND_URL"]
    valid_environ["frontend_url"] = "http://evil.example"
    result = load_config(valid_environ)

    assert isinstance(result, ConfigurationError)
    assert list(result.problems) == ["FRONTEND_URL"]

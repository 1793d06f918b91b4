from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from easymeta.config import Settings, get_settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.default_driver == "PostgreSql"
    assert settings.database_url is None
    assert settings.default_schema is None
    assert settings.log_level == "INFO"
    assert settings.log_rotation == "10 MB"
    assert settings.log_retention == "7 days"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EASYMETA_DEFAULT_DRIVER", "MySql")
    monkeypatch.setenv("EASYMETA_LOG_LEVEL", "debug")
    monkeypatch.setenv("EASYMETA_LOG_ROTATION", "1 day")

    settings = Settings()

    assert settings.default_driver == "MySql"
    assert settings.log_level == "DEBUG"
    assert settings.log_rotation == "1 day"


def test_invalid_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="verbose")


def test_load_settings_from_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text(
        "EASYMETA_DEFAULT_DRIVER=Oracle\nEASYMETA_DATABASE_URL=sqlite:///x.db\n",
        encoding="utf-8",
    )

    settings = load_settings(env_file)

    assert settings.default_driver == "Oracle"
    assert settings.database_url == "sqlite:///x.db"


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()

    assert get_settings() is get_settings()

"""Tests for environment-driven settings."""

import os
from pathlib import Path

from emotionmap.config import Settings, load_env_file_fallback


def test_from_env_defaults(monkeypatch):
    for key in ("APP_DEBUG", "DATABASE_URL", "DB_CREATE_ALL", "ADMIN_TOKEN", "CORS_ORIGINS", "CLIENT_DIR", "PORT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("emotionmap.config.ENV_FILE_PATHS", [])

    settings = Settings.from_env()
    assert settings.debug is False
    assert settings.database_url == "sqlite+aiosqlite:///./emotions.db"
    assert settings.create_all is True
    assert settings.admin_token is None
    assert settings.cors_origins == ["*"]
    assert settings.port == 5000


def test_from_env_overrides(monkeypatch):
    monkeypatch.setattr("emotionmap.config.ENV_FILE_PATHS", [])
    monkeypatch.setenv("APP_DEBUG", "true")
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://emo:pw@db:5432/emotions")
    monkeypatch.setenv("DB_CREATE_ALL", "false")
    monkeypatch.setenv("ADMIN_TOKEN", "s3cret")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("PORT", "not-a-port")

    settings = Settings.from_env()
    assert settings.debug is True
    assert settings.create_all is False
    assert settings.admin_token == "s3cret"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.port == 5000
    assert settings.masked_database_url == "postgresql+asyncpg://emo:***@db:5432/emotions"


def test_masked_url_without_password():
    assert Settings(database_url="sqlite+aiosqlite:///./emotions.db").masked_database_url == (
        "sqlite+aiosqlite:///./emotions.db"
    )


def test_env_file_does_not_override(tmp_path: Path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "ADMIN_TOKEN='from-file'\n"
        "DATABASE_URL=\"sqlite+aiosqlite:///file.db\"\n"
        "EMPTY=\n"
    )
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///already-set.db")

    loaded = load_env_file_fallback([tmp_path / "missing.env", env_file])
    assert loaded == 1
    assert os.environ["ADMIN_TOKEN"] == "from-file"
    assert os.environ["DATABASE_URL"] == "sqlite+aiosqlite:///already-set.db"

"""
Tests for service configuration.
"""

import pytest
from app.config import Settings
from pydantic import ValidationError


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test defaults when no environment overrides are present."""
    for name in ("SERVICE_NAME", "PORT", "LOG_LEVEL", "CORS_ORIGINS", "ENABLE_TRACING"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.SERVICE_NAME == "coins-api"
    assert settings.PORT == 3000
    assert settings.LOG_LEVEL == "INFO"
    assert settings.ENABLE_TRACING is False
    assert settings.cors_origins_list == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test environment variables override defaults."""
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8081
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_invalid_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test out-of-range ports are rejected."""
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test unknown log levels are rejected."""
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_package_version_matches_settings() -> None:
    """Test the package exports only defined names and its version matches settings."""
    import app

    assert app.__version__ == Settings(_env_file=None).VERSION
    for name in app.__all__:
        assert hasattr(app, name)

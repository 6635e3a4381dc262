"""Tests for settings parsing."""

import pytest
from pydantic import ValidationError

from app.settings import Settings


def test_cors_origins_comma_separated():
    settings = Settings(CORS_ORIGINS="https://a.com, http://localhost:3000")
    assert settings.cors_origins == ["https://a.com", "http://localhost:3000"]


def test_cors_origins_json_list():
    settings = Settings(CORS_ORIGINS='["https://a.com"]')
    assert settings.cors_origins == ["https://a.com"]


def test_cors_origins_from_client_url(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    monkeypatch.setenv("CLIENT_URL", "https://app.example.com")
    assert Settings().cors_origins == ["https://app.example.com"]


def test_async_database_url_rewrites_driver():
    settings = Settings(database_url="postgresql://u:p@db:5432/hub")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/hub"
    assert settings.asyncpg_connect_args == {}


def test_railway_internal_host_disables_ssl():
    settings = Settings(database_url="postgresql://u:p@postgres.railway.internal:5432/hub")
    assert settings.asyncpg_connect_args == {"ssl": False, "timeout": 20}


def test_jwt_secret_alias(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.setenv("SECRET_KEY", "from-secret-key")
    assert Settings().jwt_secret == "from-secret-key"


def test_rate_limit_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RATE_LIMIT_BACKEND", raising=False)
    settings = Settings()
    assert settings.rate_limit_max_requests == 100
    assert settings.rate_limit_window_seconds == 900
    assert settings.rate_limit_backend == "memory"


def test_rate_limit_backend_must_be_known():
    with pytest.raises(ValidationError):
        Settings(rate_limit_backend="memcached")

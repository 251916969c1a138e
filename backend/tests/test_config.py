from pydantic import ValidationError
import pytest

from spotbnb.config import Settings


def test_production_rejects_default_jwt_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError, match="JWT_SECRET must be set in production"):
        Settings(environment="production", database_url="sqlite://")


def test_production_accepts_configured_secret():
    settings = Settings(environment="production", database_url="sqlite://", jwt_secret="a-real-secret")
    assert settings.is_production


def test_development_allows_default_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    assert not Settings(environment="development", database_url="sqlite://").is_production

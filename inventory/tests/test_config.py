"""
Tests for configuration validation
"""
import pytest
from pydantic import ValidationError
from inventory.core.config import Settings


def test_prod_settings_rejects_wildcard_origins():
    """Production must name its CORS origins explicitly"""
    settings = Settings(
        DATABASE_URL="postgresql://test",
        APP_ENV="prod",
        ALLOWED_ORIGINS="*"
    )

    with pytest.raises(ValueError, match="ALLOWED_ORIGINS"):
        settings.validate_production()


def test_prod_settings_rejects_sqlite():
    settings = Settings(
        DATABASE_URL="sqlite:///./inventory.db",
        APP_ENV="prod",
        ALLOWED_ORIGINS="https://assets.example.com"
    )

    with pytest.raises(ValueError, match="DATABASE_URL"):
        settings.validate_production()


def test_prod_settings_accepts_explicit_origins_and_server_db():
    settings = Settings(
        DATABASE_URL="postgresql://user:pw@db/inventory",
        APP_ENV="prod",
        ALLOWED_ORIGINS="https://assets.example.com"
    )
    settings.validate_production()


def test_local_settings_allows_wildcard_origins():
    """Local settings allow wildcard origins"""
    settings = Settings(
        DATABASE_URL="postgresql://test",
        APP_ENV="local",
        ALLOWED_ORIGINS="*"
    )

    settings.validate_production()
    assert settings.get_allowed_origins_list() == ["*"]


def test_get_allowed_origins_list():
    """Test parsing of ALLOWED_ORIGINS"""
    settings = Settings(
        DATABASE_URL="postgresql://test",
        ALLOWED_ORIGINS="https://example.com, https://app.example.com,"
    )
    assert settings.get_allowed_origins_list() == ["https://example.com", "https://app.example.com"]


def test_invalid_app_env_rejected():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="postgresql://test", APP_ENV="production")


def test_log_level_normalized_to_upper():
    settings = Settings(DATABASE_URL="postgresql://test", LOG_LEVEL="debug")
    assert settings.LOG_LEVEL == "DEBUG"


def test_defaults():
    settings = Settings(DATABASE_URL="postgresql://test")
    assert settings.DEFAULT_ACTOR == "Admin"
    assert settings.DEFAULT_PAGE_SIZE == 10
    assert settings.MAX_PAGE_SIZE == 100
    assert settings.EXPIRY_ALERT_DAYS == 30


def test_default_page_size_cannot_exceed_max():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="postgresql://test", DEFAULT_PAGE_SIZE=200, MAX_PAGE_SIZE=100)


def test_is_sqlite():
    assert Settings(DATABASE_URL="sqlite:///./inventory.db").is_sqlite
    assert not Settings(DATABASE_URL="postgresql://test").is_sqlite

"""
Configuration management for the IT Asset Inventory backend
"""
from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

APP_ENVS = ("local", "staging", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env"""

    DATABASE_URL: str = Field(..., description="SQLAlchemy database URL")
    APP_ENV: str = Field(default="local", description="Deployment environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO")
    VERSION: Optional[str] = Field(default=None, description="Build identifier (git SHA or semver)")

    # Comma-separated; '*' is only acceptable outside prod
    ALLOWED_ORIGINS: str = Field(default="*")

    # Storage is UTC; responses render datetimes in this zone
    TZ: str = Field(default="Asia/Kolkata")

    # Recorded as performed_by when a write carries no X-Actor header
    DEFAULT_ACTOR: str = Field(default="Admin", min_length=1)

    # Asset list paging
    DEFAULT_PAGE_SIZE: int = Field(default=10, ge=1)
    MAX_PAGE_SIZE: int = Field(default=100, ge=1)

    # Dashboard look-ahead for warranty and license expiries
    EXPIRY_ALERT_DAYS: int = Field(default=30, ge=1)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        if v not in APP_ENVS:
            raise ValueError(f"APP_ENV must be one of {list(APP_ENVS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")
        return v.upper()

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        if self.DEFAULT_PAGE_SIZE > self.MAX_PAGE_SIZE:
            raise ValueError("DEFAULT_PAGE_SIZE cannot exceed MAX_PAGE_SIZE")
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def validate_production(self) -> None:
        """
        Reject settings that are only safe for local development

        Raises:
            ValueError: If APP_ENV is prod and CORS is open or the database is SQLite
        """
        if self.APP_ENV != "prod":
            return
        if self.ALLOWED_ORIGINS.strip() in ("", "*"):
            raise ValueError("ALLOWED_ORIGINS must list explicit origins (not '*') in production")
        if self.is_sqlite:
            raise ValueError("DATABASE_URL must point to a server database (not SQLite) in production")

    def get_allowed_origins_list(self) -> List[str]:
        """CORS origins as a list; ['*'] when unrestricted"""
        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

if settings.APP_ENV == "prod":
    settings.validate_production()

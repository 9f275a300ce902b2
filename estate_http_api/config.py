# estate_http_api/config.py

"""
Configuration for the Estate back-office HTTP API.

All tunables live on a single pydantic-settings model. Every field can be
overridden through an environment variable carrying the ``ESTATE_`` prefix,
or through a local ``.env`` file:

- ESTATE_DATABASE_URL
    SQLAlchemy URL of the record store.
    Default: "sqlite:///./estate_backoffice.db"

- ESTATE_API_PREFIX
    Path prefix under which every router is mounted.
    Default: "/api"

- ESTATE_CORS_ORIGINS
    Comma-separated list of allowed CORS origins, or "*".
    Default: "*"

- ESTATE_LOG_LEVEL / ESTATE_LOG_FORMAT
    Log level name and renderer ("json" or "console").

- ESTATE_SIGNATURE_VALIDITY_YEARS / ESTATE_TIMESTAMP_VALIDITY_YEARS /
  ESTATE_BIOMETRIC_VALIDITY_YEARS
    Lifetimes applied to new integrity records.

Typical usage
=============

    from estate_http_api.config import get_settings

    cfg = get_settings()
    engine = create_engine(cfg.DATABASE_URL)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry, validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "estate-backoffice"
    APP_VERSION: str = "0.1.0"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./estate_backoffice.db"
    SEED_SAMPLE_DATA: bool = False

    # --- Integrity record lifetimes ---
    SIGNATURE_VALIDITY_YEARS: int = 10
    TIMESTAMP_VALIDITY_YEARS: int = 10
    BIOMETRIC_VALIDITY_YEARS: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ESTATE_",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        """
        Parse CORS_ORIGINS into a list; "*" or empty means allow all.
        """
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]

    @property
    def api_root(self) -> str:
        """
        Normalized router prefix: "" or "/something" without trailing slash.
        """
        prefix = (self.API_PREFIX or "").strip()
        if not prefix or prefix == "/":
            return ""
        if not prefix.startswith("/"):
            prefix = "/" + prefix
        return prefix.rstrip("/")


# Singleton configuration instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the global Settings instance, creating it from the environment
    on first use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Settings) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where you may want to override configuration
    without touching environment variables.
    """
    global _SETTINGS
    _SETTINGS = settings


__all__ = ["AppEnv", "Settings", "get_settings", "set_settings"]

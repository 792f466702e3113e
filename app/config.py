# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.ALLOWED_HOST)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings are read once at process start and never re-read per request.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Instances are frozen: the secret and the environment mode stay
    fixed for the lifetime of the process.
    """

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    APP_SECRET: str = Field(
        default="",
        description="Shared secret expected in the X-Auth-Key header"
    )

    ALLOWED_HOST: str = Field(
        default="rsshub.app",
        min_length=1,
        description="Substring every target feed URL must contain"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_ENV: Literal["development", "staging", "production"] = Field(
        default="production",
        description="Current environment (development disables auth)"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level outside development mode"
    )

    USER_AGENT: str = Field(
        default="feed-gateway/1.0",
        description="User-Agent sent with outbound feed requests"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.APP_ENV == "development"

    @property
    def log_level(self) -> str:
        """Effective log level; development mode is always verbose."""
        return "DEBUG" if self.is_development else self.LOG_LEVEL.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()

"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.

Every field can be overridden with a ``FOOD_DONATION_``-prefixed
environment variable or from a local ``.env`` file.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    database_url: str = Field(default="sqlite:///./food_donation.db")
    log_level: str = Field(default="INFO")

    # SQLite connection pragmas
    sqlite_foreign_keys: bool = Field(default=True)
    sqlite_wal: bool = Field(default=True)

    # Write-path behaviour of the donation repository
    atomic_donations: bool = Field(default=False)
    strict_generated_keys: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="FOOD_DONATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def configure_logging(level: str = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Level name to apply. Defaults to ``settings.log_level``.
    """
    logging.basicConfig(
        level=level or settings.log_level,
        format=LOG_FORMAT,
    )


def print_settings() -> None:
    """Print the active settings (used by the init script)."""
    print("⚙️  Settings")
    for name, value in settings.model_dump().items():
        print(f"  {name:<22} {value}")

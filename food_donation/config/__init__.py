"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from food_donation.config import settings

    print(settings.database_url)
"""

from food_donation.config.settings import (
    settings,
    Settings,
    get_settings,
    configure_logging,
    print_settings,
)

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "configure_logging",
    "print_settings",
]

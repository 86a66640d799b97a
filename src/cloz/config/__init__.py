"""
Configuration module for cloz.

Uses pydantic-settings for environment variable loading.
"""

from cloz.config.settings import (
    ClozSettings,
    get_settings,
    reset_settings,
)

__all__ = ["ClozSettings", "get_settings", "reset_settings"]

"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    find_env_file,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "find_env_file",
    "get_settings",
]

"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    decode_jwt_secret,
    get_config_dir,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "decode_jwt_secret",
    "get_config_dir",
    "get_settings",
]

"""Core utilities and configuration."""

from folioview.core.config import (
    get_settings,
    load_settings_file,
    load_toml,
    reset_settings,
)

__all__ = [
    "load_toml",
    "load_settings_file",
    "get_settings",
    "reset_settings",
]

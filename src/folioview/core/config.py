"""Configuration loading utilities."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

# tomllib is available in Python 3.11+, use tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from folioview.models.config import DashboardSettings


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Args:
        path: Path to the TOML file

    Returns:
        Dictionary with TOML contents

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If file is invalid TOML
    """
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_settings_file(path: Path) -> DashboardSettings:
    """Load dashboard settings from a TOML file.

    Keys in the file override environment values and defaults.

    Example TOML format:
        data_base = "https://example.com/portfolio/data/"
        output_path = "site/index.html"
        chart_max_ticks = 6
    """
    data = load_toml(path)
    # The [dashboard] table is optional
    data = data.get("dashboard", data)
    return DashboardSettings(**data)


# Singleton settings instance
_settings: DashboardSettings | None = None


def get_settings() -> DashboardSettings:
    """Get or create the settings singleton.

    This ensures we only load settings once and reuse them.
    """
    global _settings
    if _settings is None:
        from dotenv import load_dotenv
        load_dotenv()  # Ensure .env is loaded
        _settings = DashboardSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None

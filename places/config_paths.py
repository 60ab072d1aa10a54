"""Per-application directories and file paths from the default ``Places``."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from . import selector


def get_config_dir(app_name: str) -> Path:
    """Return the writable config directory for *app_name*.
    Creates the directory if it does not exist.
    - Linux/BSD: $XDG_CONFIG_HOME/<app> (first entry of the XDG search path)
    - macOS: ~/Library/Preferences/<app>
    - Windows: %APPDATA%\\<app>
    """
    return selector.get().get_config_write(app_name)


def get_data_dir(app_name: str) -> Path:
    """Writable data directory for *app_name* (created)."""
    return selector.get().get_data_write(app_name)


def get_cache_dir(app_name: str) -> Optional[Path]:
    return selector.get().get_cache_dir(app_name)


def get_runtime_dir(app_name: str, strict: bool = False) -> Optional[Path]:
    return selector.get().get_runtime_dir(app_name, strict=strict)


def get_config_file_path(app_name: str, filename: Optional[str] = None) -> Path:
    """Path to a config file in the writable config dir (default ``config.json``)."""
    if filename is None:
        filename = "config.json"
    return get_config_dir(app_name) / filename


def find_config_file(app_name: str, filename: str) -> Optional[Path]:
    """First existing *filename* along the config read path, most relevant first."""
    for d in selector.get().get_config_read(app_name):
        candidate = d / filename
        if candidate.is_file():
            return candidate
    return None

"""
Centralized path management for TUI Bricks.

Portable runs (source checkout, frozen build, or BRICKS_ROOT set) keep app
data in a .bricks/ folder next to the app. A regular pip install has no
writable app folder, so it uses a per-user data dir instead.

Directory structure:
    path/to/bricks.py (or bricks.exe)
    path/to/.bricks/
        settings.json   - User preferences
        logs/           - Session logs, one file per day
"""

import os
import sys
from pathlib import Path


# Directory name for app data next to the app (hidden on Unix)
DATA_DIR_NAME = ".bricks"

# Directory name for app data under the per-user data home
USER_DATA_DIR_NAME = "tui-bricks"

# Repo root when running from a checkout (parent of tui_bricks/core/)
SOURCE_ROOT = Path(__file__).parent.parent.parent


def is_source_checkout() -> bool:
    """True when running from a clone of the repo (including editable installs)."""
    return (SOURCE_ROOT / "pyproject.toml").exists() and (SOURCE_ROOT / "tui_bricks").is_dir()


def get_app_dir() -> Path | None:
    """
    Get the directory where the app is located.

    BRICKS_ROOT env var wins, then the executable's directory for frozen
    (PyInstaller) builds, then the repo root in development. Returns None
    for a regular install, which lives in site-packages.
    """
    root = os.environ.get("BRICKS_ROOT")
    if root:
        return Path(root)
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if is_source_checkout():
        return SOURCE_ROOT
    return None


def get_user_data_home() -> Path:
    """Per-user data home: %LOCALAPPDATA% on Windows, else $XDG_DATA_HOME or ~/.local/share."""
    if os.name == 'nt':
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"
    xdg_data = os.environ.get("XDG_DATA_HOME")
    return Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"


def get_data_dir() -> Path:
    """Get the app data directory, creating it if needed."""
    app_dir = get_app_dir()
    if app_dir is not None:
        data_dir = app_dir / DATA_DIR_NAME
    else:
        data_dir = get_user_data_home() / USER_DATA_DIR_NAME
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_settings_path() -> Path:
    return get_data_dir() / "settings.json"


def get_logs_dir() -> Path:
    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir

"""
Core utilities for TUI Bricks.

Paths and session logging.
"""

from .paths import (
    DATA_DIR_NAME,
    USER_DATA_DIR_NAME,
    is_source_checkout,
    get_app_dir,
    get_data_dir,
    get_settings_path,
    get_logs_dir,
    get_user_data_home,
)
from .logging import TeeOutput, debug_log

__all__ = [
    # Paths
    "DATA_DIR_NAME",
    "USER_DATA_DIR_NAME",
    "is_source_checkout",
    "get_app_dir",
    "get_data_dir",
    "get_settings_path",
    "get_logs_dir",
    "get_user_data_home",
    # Logging
    "TeeOutput",
    "debug_log",
]

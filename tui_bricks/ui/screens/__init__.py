"""
Full-page views.

Each renderer paints one complete frame from a screen mode.
"""

from .mode_view import EDIT_HINT, emit_mode

__all__ = [
    "EDIT_HINT",
    "emit_mode",
]

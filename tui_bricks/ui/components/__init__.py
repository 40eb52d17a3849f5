"""
Reusable visual building blocks.

Non-interactive components for rendering lines and headers.
"""

from .lines import (
    emit_line,
    emit_dash,
    emit_iter,
)
from .header import (
    DEFAULT_TITLE,
    header,
    default_header,
)

__all__ = [
    # Lines
    "emit_line",
    "emit_dash",
    "emit_iter",
    # Header
    "DEFAULT_TITLE",
    "header",
    "default_header",
]

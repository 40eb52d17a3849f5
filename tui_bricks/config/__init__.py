"""
Configuration management for TUI Bricks.

Config files:
- .bricks/settings.json: User preferences (logging, prompt cancellation)
"""

from .settings import UserSettings

__all__ = [
    "UserSettings",
]

"""
User settings management for TUI Bricks.

Manages .bricks/settings.json - user preferences that persist across runs.
"""

import json
from pathlib import Path


class UserSettings:
    """
    Manages .bricks/settings.json - user preferences that persist across runs.

    Stores:
    - Whether the session is mirrored to a log file
    - Whether ESC backs out of single-key prompts
    """

    def __init__(self, path: Path):
        self.path = path
        # Mirror terminal output to .bricks/logs/
        self.log_to_file: bool = True
        # ESC cancels confirmation and selection prompts (off: ESC is ignored)
        self.esc_cancels_prompts: bool = False

    @classmethod
    def load(cls, path: Path) -> "UserSettings":
        """Load user settings from file. Missing or unreadable files give defaults."""
        settings = cls(path)

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)

                settings.log_to_file = bool(data.get("log_to_file", True))
                settings.esc_cancels_prompts = bool(data.get("esc_cancels_prompts", False))
            except (json.JSONDecodeError, IOError, AttributeError):
                pass

        return settings

    def save(self):
        """Save user settings to file."""
        data = {
            "log_to_file": self.log_to_file,
            "esc_cancels_prompts": self.esc_cancels_prompts,
        }
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

"""
Logging utilities for TUI Bricks.
"""

import re
import sys
from datetime import datetime
from pathlib import Path


# Cursor-to-next-line commands end a visual line just like "\n"
_NEXT_LINE = re.compile(r'\x1b\[\d*E')
_ANSI = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')


class TeeOutput:
    """Write to both stdout and a log file, filtering out UI noise."""

    # Patterns to skip in log file (separators, prompt hints, blanks)
    _SKIP_PATTERNS = [
        r'^-{3,}$',                              # Header dash separators
        r'^Select from the list by typing',      # Menu instruction line
        r'^\(y\)es or \(n\)o\?$',                 # Confirmation hint
        r'^\s*$',                                 # Blank lines
    ]

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._line_buffer = ""
        # Write session header with version
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message):
        self.terminal.write(message)

        clean = _ANSI.sub('', _NEXT_LINE.sub('\n', message))
        self._line_buffer += clean

        while '\n' in self._line_buffer:
            line, self._line_buffer = self._line_buffer.split('\n', 1)
            stripped = line.rstrip()
            if not self._skip_regex.search(stripped):
                self._write_log_line(stripped)

        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def isatty(self):
        return self.terminal.isatty()

    def close(self):
        # Flush any remaining buffer
        if self._line_buffer.strip() and not self._skip_regex.search(self._line_buffer):
            self._write_log_line(self._line_buffer.rstrip())
        self._line_buffer = ""
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        self._write_log_line(message)
        self.log_file.flush()

    def _write_log_line(self, text: str):
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        self.log_file.write(f"{timestamp} {text}\n")


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, 'log_only'):
        sys.stdout.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore

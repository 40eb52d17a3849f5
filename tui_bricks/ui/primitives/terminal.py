"""
Terminal output primitives for TUI Bricks.

ANSI command strings, the queue-then-flush output buffer, and screen clearing.
"""

import sys

# Cursor / screen commands (VT100)
RESET_COLOR = "\x1b[0m"
CLEAR_ALL = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def move_to(col: int, row: int) -> str:
    """Move cursor to an absolute zero-based (col, row) position."""
    return f"\x1b[{row + 1};{col + 1}H"


def move_to_next_line(count: int = 1) -> str:
    """Move cursor down `count` lines, to column 0."""
    return f"\x1b[{count}E"


def move_to_previous_line(count: int = 1) -> str:
    """Move cursor up `count` lines, to column 0."""
    return f"\x1b[{count}F"


class OutputBuffer:
    """
    Queued terminal output.

    Commands are collected with queue() and written to the stream in a
    single write on flush(). Nothing reaches the terminal until a flush,
    so a whole frame appears at once instead of flickering in piece by piece.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self._pending: list[str] = []

    @property
    def pending(self) -> str:
        """Text queued but not yet written."""
        return "".join(self._pending)

    def queue(self, *commands) -> "OutputBuffer":
        for command in commands:
            self._pending.append(str(command))
        return self

    def flush(self):
        data = "".join(self._pending)
        self._pending.clear()
        if data:
            self.stream.write(data)
        self.stream.flush()

    def execute(self, *commands):
        """Queue commands and flush immediately."""
        self.queue(*commands)
        self.flush()


def clear(out: OutputBuffer):
    """
    Reset styling, wipe the screen, hide the cursor and home it.

    Queued only; the next flush makes it visible.
    """
    out.queue(RESET_COLOR, CLEAR_ALL, HIDE_CURSOR, move_to(0, 0))


SEPARATOR_WIDTH = 45


def make_separator(char: str = "-", width: int = SEPARATOR_WIDTH) -> str:
    """Create a horizontal separator line string."""
    return char * width

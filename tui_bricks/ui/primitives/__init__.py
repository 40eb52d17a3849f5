"""
Terminal I/O primitives.

Low-level terminal control commands, the output buffer, and keyboard input.
"""

from .terminal import (
    RESET_COLOR,
    CLEAR_ALL,
    CLEAR_LINE,
    HIDE_CURSOR,
    SHOW_CURSOR,
    SEPARATOR_WIDTH,
    move_to,
    move_to_next_line,
    move_to_previous_line,
    make_separator,
    OutputBuffer,
    clear,
)
from .keyboard_input import (
    CancelInput,
    KeyboardInput,
    raw_terminal,
    cbreak_noecho,
    get_keyboard,
    KEY_ESC,
)

__all__ = [
    # Terminal
    "RESET_COLOR",
    "CLEAR_ALL",
    "CLEAR_LINE",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "SEPARATOR_WIDTH",
    "move_to",
    "move_to_next_line",
    "move_to_previous_line",
    "make_separator",
    "OutputBuffer",
    "clear",
    # Keyboard input
    "CancelInput",
    "KeyboardInput",
    "raw_terminal",
    "cbreak_noecho",
    "get_keyboard",
    "KEY_ESC",
]

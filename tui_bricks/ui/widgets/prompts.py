"""
Blocking prompt widgets.

Each prompt writes its text through the output buffer, flushes so the
operator can see it, and blocks until it gets an answer it accepts.
Rejected answers are retried indefinitely; only I/O failures (and an
opted-in ESC) get out of the loop early.
"""

import re
from typing import Any, Sequence

from ...core.logging import debug_log
from ..primitives import (
    OutputBuffer,
    KeyboardInput,
    CancelInput,
    get_keyboard,
    move_to_next_line,
    move_to_previous_line,
    CLEAR_LINE,
    HIDE_CURSOR,
    SHOW_CURSOR,
    KEY_ESC,
)
from ..components import emit_line, emit_iter


NUMBER_HINT = "(Input should be a number)"
CONFIRM_HINT = "(y)es or (n)o?"
SELECT_HINT = "Select from the list by typing the letter"

U32_MAX = 0xFFFFFFFF

# ASCII digits only; int() alone would also take "_" separators and non-Latin digits
_U32_PATTERN = re.compile(r'\+?[0-9]+')


def parse_u32(text: str) -> int | None:
    """Parse an unsigned 32-bit integer, or return None."""
    if not _U32_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > U32_MAX:
        return None
    return value


def _read_key(keyboard: KeyboardInput, allow_esc: bool) -> str:
    key = keyboard.read_key()
    if allow_esc and key == KEY_ESC:
        raise CancelInput()
    return key


def input_u32(out: OutputBuffer, prompt: str, keyboard: KeyboardInput | None = None) -> int:
    """
    Ask for a non-negative number.

    A line that doesn't parse is erased from the screen and the operator
    types again; no error message is shown.

    Args:
        out: Output buffer to draw into
        prompt: Prompt text (may span lines)
        keyboard: Input source (defaults to stdin)

    Returns:
        The parsed value (0 to 4294967295)
    """
    keyboard = keyboard or get_keyboard()
    emit_iter(out, prompt.split("\n"))
    emit_line(out, NUMBER_HINT)
    out.queue(SHOW_CURSOR)
    out.flush()

    while True:
        answer = keyboard.read_line().strip()
        value = parse_u32(answer)
        if value is not None:
            out.queue(HIDE_CURSOR)
            return value
        debug_log(f"PROMPT | rejected number | input={answer!r}")
        out.execute(move_to_previous_line(1), CLEAR_LINE)


def input_string(out: OutputBuffer, prompt: str, keyboard: KeyboardInput | None = None) -> str:
    """Ask for a line of text. Returns it stripped; empty is allowed."""
    keyboard = keyboard or get_keyboard()
    emit_iter(out, prompt.split("\n"))
    out.queue(SHOW_CURSOR)
    out.flush()

    result = keyboard.read_line().strip()

    out.queue(HIDE_CURSOR)
    return result


def confirmation_prompt(
    out: OutputBuffer,
    prompt: str,
    keyboard: KeyboardInput | None = None,
    allow_esc: bool = False,
) -> bool:
    """
    Ask a yes/no question answered with a single keypress.

    Only lowercase 'y' and 'n' count; every other key is ignored.

    Raises:
        CancelInput: If allow_esc is True and ESC is pressed
    """
    keyboard = keyboard or get_keyboard()
    emit_iter(out, prompt.split("\n"))
    emit_line(out, CONFIRM_HINT)
    out.flush()

    while True:
        key = _read_key(keyboard, allow_esc)
        if key == 'y':
            return True
        if key == 'n':
            return False


def select_from_list(
    out: OutputBuffer,
    prompt: str,
    options: Sequence[tuple[str, Any]],
    keyboard: KeyboardInput | None = None,
    allow_esc: bool = False,
) -> Any:
    """
    Show lettered options and wait for the operator to press one.

    Args:
        out: Output buffer to draw into
        prompt: Prompt text (may span lines)
        options: (key, label) pairs, shown in order as "key: label".
            If two options share a key, the first one wins.
        keyboard: Input source (defaults to stdin)
        allow_esc: If True, ESC raises CancelInput

    Returns:
        The label of the chosen option

    Raises:
        CancelInput: If allow_esc is True and ESC is pressed
    """
    keyboard = keyboard or get_keyboard()
    emit_iter(out, prompt.split("\n"))
    emit_line(out, SELECT_HINT)
    out.queue(move_to_next_line(1))
    for key, label in options:
        emit_line(out, f"{key}: {label}")
    out.flush()

    while True:
        selected = _read_key(keyboard, allow_esc)
        for key, label in options:
            if key == selected:
                return label

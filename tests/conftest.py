"""Pytest configuration and shared fixtures."""

import io
from dataclasses import dataclass, field

import pytest

from tui_bricks.ui.primitives import OutputBuffer, KeyboardInput


class ScriptedKeyboard(KeyboardInput):
    """Keyboard that replays canned lines and keypresses."""

    def __init__(self, lines=(), keys=()):
        super().__init__(stream=io.StringIO())
        self.lines = list(lines)
        self.keys = list(keys)
        self.lines_read = 0
        self.keys_read = 0

    def read_line(self) -> str:
        if not self.lines:
            raise EOFError("script exhausted")
        self.lines_read += 1
        return self.lines.pop(0) + "\n"

    def read_key(self) -> str:
        if not self.keys:
            raise EOFError("script exhausted")
        self.keys_read += 1
        return self.keys.pop(0)


@dataclass
class FakeItem:
    """Minimal catalog item."""
    part_id: int
    text: str = field(default="Brick 2 x 4\nred")

    def identifier(self):
        return self.part_id

    def render(self) -> str:
        return self.text


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def out(stream):
    return OutputBuffer(stream)


@pytest.fixture
def keyboard():
    def make(lines=(), keys=()):
        return ScriptedKeyboard(lines=lines, keys=keys)
    return make


def split_lines(text: str) -> list[str]:
    """Split queued output into visual lines at next-line commands.

    Other control sequences are left in place.
    """
    return text.split("\x1b[1E")

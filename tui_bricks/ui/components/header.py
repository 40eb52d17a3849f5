"""
Screen header component.

A dashed banner around one or more title lines.
"""

from ..primitives import OutputBuffer, move_to_next_line
from .lines import emit_dash, emit_iter


DEFAULT_TITLE = "Welcome to TUI Bricks"


def header(out: OutputBuffer, title: str):
    """Queue dash, title lines, dash, then one blank line.

    An empty title emits no title lines; the two dashes end up adjacent.
    """
    emit_dash(out)
    if title:
        emit_iter(out, title.split("\n"))
    emit_dash(out)
    out.queue(move_to_next_line(1))


def default_header(out: OutputBuffer):
    header(out, DEFAULT_TITLE)

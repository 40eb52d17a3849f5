"""
Line emission helpers.

Each line is queued as text followed by a next-line cursor move, so the
output lays out correctly even while the terminal is in cbreak mode.
"""

from typing import Any, Iterable

from ..primitives import OutputBuffer, make_separator, move_to_next_line


def emit_line(out: OutputBuffer, line: Any):
    """Queue one line. Embedded newlines are not handled; split first."""
    out.queue(line, move_to_next_line(1))


def emit_dash(out: OutputBuffer):
    emit_line(out, make_separator())


def emit_iter(out: OutputBuffer, lines: Iterable[Any]):
    """Queue each item of `lines` on its own line, in order."""
    for line in lines:
        out.queue(line, move_to_next_line(1))

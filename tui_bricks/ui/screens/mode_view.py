"""
Mode renderer - paints a full frame for the current screen mode.
"""

from ...mode import Mode, Default, DisplayItem, EditItem
from ..primitives import OutputBuffer, clear, move_to_next_line
from ..components import emit_line, emit_iter, header, default_header


EDIT_HINT = "use any of the following commands to edit the item"


def emit_mode(out: OutputBuffer, mode: Mode):
    """
    Queue the frame for `mode`, starting from a cleared screen.

    Nothing is flushed; the prompt that follows does that.
    """
    clear(out)
    if isinstance(mode, Default):
        default_header(out)
        out.queue(mode.info, move_to_next_line(2))
    elif isinstance(mode, DisplayItem):
        header(out, f"Viewing item with part ID {mode.item.identifier()}")
        emit_iter(out, mode.item.render().split("\n"))
    elif isinstance(mode, EditItem):
        header(out, f"Now editing item with part ID {mode.item.identifier()}")
        emit_iter(out, mode.item.render().split("\n"))
        emit_line(out, EDIT_HINT)
    else:
        raise TypeError(f"Not a screen mode: {mode!r}")

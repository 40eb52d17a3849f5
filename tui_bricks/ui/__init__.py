"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (commands, output buffer, keyboard)
- components/: Visual building blocks (lines, header)
- widgets/: Blocking prompts (number, text, confirm, select)
- screens/: Full-frame renderers (mode view)
"""

# Re-export commonly used items for convenience
from .primitives import (
    # Terminal
    OutputBuffer,
    clear,
    # Keyboard
    KeyboardInput,
    CancelInput,
    get_keyboard,
    KEY_ESC,
)
from .components import (
    emit_line,
    emit_dash,
    emit_iter,
    header,
    default_header,
)
from .widgets import (
    input_u32,
    input_string,
    confirmation_prompt,
    select_from_list,
)
from .screens import emit_mode
from ..mode import Item, Mode, Default, DisplayItem, EditItem

__all__ = [
    # Primitives
    "OutputBuffer",
    "clear",
    "KeyboardInput",
    "CancelInput",
    "get_keyboard",
    "KEY_ESC",
    # Components
    "emit_line",
    "emit_dash",
    "emit_iter",
    "header",
    "default_header",
    # Widgets
    "input_u32",
    "input_string",
    "confirmation_prompt",
    "select_from_list",
    # Screens
    "emit_mode",
    # Modes
    "Item",
    "Mode",
    "Default",
    "DisplayItem",
    "EditItem",
]

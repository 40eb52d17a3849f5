"""
TUI Bricks - terminal rendering and prompts for the Bricks record browser.

Renders screen modes as terminal output and collects operator input through
blocking prompts. Which screen comes next is up to the caller.

The common names are re-exported here; submodules work too:
    from tui_bricks.mode import Default, DisplayItem, EditItem
    from tui_bricks.ui import OutputBuffer, emit_mode, select_from_list
    from tui_bricks.config import UserSettings
"""

DIST_NAME = "tui-bricks"


def _get_version():
    """Read version from the VERSION file in a checkout, else from installed metadata."""
    from pathlib import Path
    from importlib.metadata import version, PackageNotFoundError
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .mode import Item, Mode, Default, DisplayItem, EditItem  # noqa: E402
from .ui import (  # noqa: E402
    OutputBuffer,
    KeyboardInput,
    CancelInput,
    clear,
    emit_line,
    emit_dash,
    emit_iter,
    header,
    default_header,
    input_u32,
    input_string,
    confirmation_prompt,
    select_from_list,
    emit_mode,
)

__all__ = [
    "__version__",
    # Modes
    "Item",
    "Mode",
    "Default",
    "DisplayItem",
    "EditItem",
    # UI
    "OutputBuffer",
    "KeyboardInput",
    "CancelInput",
    "clear",
    "emit_line",
    "emit_dash",
    "emit_iter",
    "header",
    "default_header",
    "input_u32",
    "input_string",
    "confirmation_prompt",
    "select_from_list",
    "emit_mode",
]

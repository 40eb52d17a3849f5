"""
Screen modes.

A Mode says which screen to show; the renderer in ui.screens turns it into
terminal output. Items come from the caller's catalog and only need an
identifier and a printable rendering.
"""

from dataclasses import dataclass
from typing import Any, Protocol, Union


class Item(Protocol):
    """A catalog record as seen by the renderer."""

    def identifier(self) -> Any:
        ...

    def render(self) -> str:
        """Multi-line text shown on the item screens."""
        ...


@dataclass(frozen=True)
class Default:
    """Home screen with an informational message."""
    info: str


@dataclass(frozen=True)
class DisplayItem:
    """Read-only view of one item."""
    item: Item


@dataclass(frozen=True)
class EditItem:
    """Item view followed by the edit-commands hint."""
    item: Item


Mode = Union[Default, DisplayItem, EditItem]

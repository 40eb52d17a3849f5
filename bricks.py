#!/usr/bin/env python3
"""
TUI Bricks - browse and edit a parts catalog in the terminal.

Demo controller for the tui_bricks rendering layer. The catalog lives in
memory only; nothing is saved.
"""

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime

from tui_bricks import __version__
from tui_bricks.config import UserSettings
from tui_bricks.core.logging import TeeOutput, debug_log
from tui_bricks.core.paths import get_settings_path, get_logs_dir
from tui_bricks.mode import Default, DisplayItem, EditItem
from tui_bricks.ui import (
    OutputBuffer,
    KeyboardInput,
    CancelInput,
    emit_mode,
    input_u32,
    input_string,
    confirmation_prompt,
    select_from_list,
)
from tui_bricks.ui.primitives import SHOW_CURSOR, RESET_COLOR


# ============================================================================
# Catalog
# ============================================================================


@dataclass
class Part:
    """A brick in the catalog."""
    part_id: int
    name: str
    description: str = ""

    def identifier(self) -> int:
        return self.part_id

    def render(self) -> str:
        lines = [f"Part ID:     {self.part_id}", f"Name:        {self.name}"]
        if self.description:
            lines.append(f"Description: {self.description}")
        return "\n".join(lines)


SAMPLE_PARTS = [
    Part(3001, "Brick 2 x 4", "The classic"),
    Part(3003, "Brick 2 x 2"),
    Part(3020, "Plate 2 x 4", "One third the height of a brick"),
    Part(3062, "Round Brick 1 x 1"),
]

MAIN_MENU = [
    ('v', "View an item"),
    ('e', "Edit an item"),
    ('q', "Quit"),
]

EDIT_MENU = [
    ('n', "Change name"),
    ('d', "Change description"),
    ('x', "Delete item"),
    ('b', "Back"),
]


# ============================================================================
# Main Application
# ============================================================================


class BricksApp:
    """Main application controller."""

    def __init__(self, settings: UserSettings, out: OutputBuffer = None, keyboard: KeyboardInput = None):
        self.settings = settings
        self.out = out or OutputBuffer()
        self.keyboard = keyboard or KeyboardInput()
        self.parts = {p.part_id: Part(p.part_id, p.name, p.description) for p in SAMPLE_PARTS}
        self.info = f"{len(self.parts)} parts in the catalog."

    @property
    def allow_esc(self) -> bool:
        return self.settings.esc_cancels_prompts

    def select(self, prompt: str, options) -> str | None:
        """select_from_list that maps an ESC cancel to None."""
        try:
            return select_from_list(self.out, prompt, options, self.keyboard, allow_esc=self.allow_esc)
        except CancelInput:
            return None

    def confirm(self, prompt: str) -> bool:
        try:
            return confirmation_prompt(self.out, prompt, self.keyboard, allow_esc=self.allow_esc)
        except CancelInput:
            return False

    def lookup_part(self) -> Part | None:
        """Ask for a part ID. Sets self.info when there is no such part."""
        part_id = input_u32(self.out, "Enter the part ID:", self.keyboard)
        part = self.parts.get(part_id)
        if part is None:
            self.info = f"No item with part ID {part_id}."
        return part

    def handle_view(self):
        part = self.lookup_part()
        if part is None:
            return
        emit_mode(self.out, DisplayItem(part))
        self.select("", [('b', "Back")])
        self.info = f"Viewed part {part.part_id}."

    def handle_edit(self):
        part = self.lookup_part()
        if part is None:
            return

        while True:
            emit_mode(self.out, EditItem(part))
            action = self.select("", EDIT_MENU)
            debug_log(f"EDIT | part={part.part_id} | action={action}")

            if action == "Change name":
                name = input_string(self.out, "New name:", self.keyboard)
                if name:
                    part.name = name
            elif action == "Change description":
                part.description = input_string(self.out, "New description (empty to clear):", self.keyboard)
            elif action == "Delete item":
                if self.confirm(f"Delete part {part.part_id}?"):
                    del self.parts[part.part_id]
                    self.info = f"Deleted part {part.part_id}."
                    return
            else:
                self.info = f"Finished editing part {part.part_id}."
                return

    def run(self):
        """Main loop: home screen, then whatever the operator picks."""
        while True:
            emit_mode(self.out, Default(self.info))
            action = self.select("What would you like to do?", MAIN_MENU)

            if action == "View an item":
                self.handle_view()
            elif action == "Edit an item":
                self.handle_edit()
            elif action == "Quit" or action is None:
                if self.confirm("Really quit?"):
                    return


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="TUI Bricks - browse and edit a parts catalog"
    )
    parser.add_argument("--no-log", action="store_true", help="don't write a session log")
    args = parser.parse_args()

    settings = UserSettings.load(get_settings_path())

    tee = None
    if settings.log_to_file and not args.no_log:
        log_path = get_logs_dir() / f"{datetime.now().strftime('%Y-%m-%d')}.log"
        tee = TeeOutput(log_path, version=__version__)
        sys.stdout = tee

    out = OutputBuffer()
    try:
        BricksApp(settings, out=out).run()
    finally:
        out.execute(RESET_COLOR, SHOW_CURSOR)
        if tee:
            sys.stdout = tee.terminal
            tee.close()


def cli():
    """Console-script entry: runs main(), Ctrl-C exits cleanly."""
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)


if __name__ == "__main__":
    cli()

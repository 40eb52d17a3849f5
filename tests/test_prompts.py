"""
Tests for blocking prompt widgets.

Tests retry loops, cursor bookkeeping, and key matching with a scripted keyboard.
"""

import pytest

from tui_bricks.ui.primitives import CancelInput, KEY_ESC, SHOW_CURSOR, HIDE_CURSOR, CLEAR_LINE
from tui_bricks.ui.widgets import (
    parse_u32,
    input_u32,
    input_string,
    confirmation_prompt,
    select_from_list,
    NUMBER_HINT,
    CONFIRM_HINT,
    SELECT_HINT,
)
from tests.conftest import split_lines

ERASE = "\x1b[1F" + CLEAR_LINE


class TestParseU32:
    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("42", 42),
        ("+7", 7),
        ("007", 7),
        ("4294967295", 4294967295),
    ])
    def test_valid(self, text, expected):
        assert parse_u32(text) == expected

    @pytest.mark.parametrize("text", [
        "", "abc", "-5", "4294967296", "1_000", "1.5", "٣", "12abc", "+", " 4",
    ])
    def test_invalid(self, text):
        assert parse_u32(text) is None


class TestInputU32:
    def test_retries_until_valid(self, out, stream, keyboard):
        """Two rejected lines mean exactly two erase-and-retry cycles."""
        kb = keyboard(lines=["abc", "-5", "42"])

        assert input_u32(out, "How many?", kb) == 42
        assert kb.lines_read == 3
        assert stream.getvalue().count(ERASE) == 2

    def test_prompt_and_hint_flushed_before_reading(self, out, stream, keyboard):
        input_u32(out, "Line one\nLine two", keyboard(lines=["1"]))

        written = stream.getvalue()
        assert split_lines(written)[:3] == ["Line one", "Line two", NUMBER_HINT]
        assert written.endswith(SHOW_CURSOR)

    def test_hides_cursor_on_success(self, out, keyboard):
        input_u32(out, "n?", keyboard(lines=["  9  "]))
        assert out.pending == HIDE_CURSOR

    def test_no_error_text_on_reject(self, out, stream, keyboard):
        input_u32(out, "n?", keyboard(lines=["nope", "3"]))
        assert "nope" not in stream.getvalue()

    def test_closed_input_raises(self, out, keyboard):
        with pytest.raises(EOFError):
            input_u32(out, "n?", keyboard(lines=["x"]))


class TestInputString:
    def test_trims_surrounding_whitespace(self, out, keyboard):
        assert input_string(out, "Name:", keyboard(lines=["  hi there  "])) == "hi there"

    def test_empty_is_valid(self, out, keyboard):
        kb = keyboard(lines=["", "unused"])
        assert input_string(out, "Name:", kb) == ""
        assert kb.lines_read == 1

    def test_cursor_shown_then_hidden(self, out, stream, keyboard):
        input_string(out, "Name:", keyboard(lines=["x"]))
        assert stream.getvalue().endswith(SHOW_CURSOR)
        assert out.pending == HIDE_CURSOR


class TestConfirmationPrompt:
    def test_case_sensitive(self, out, keyboard):
        kb = keyboard(keys=["x", "Y", "n"])
        assert confirmation_prompt(out, "Sure?", kb) is False
        assert kb.keys_read == 3

    def test_yes(self, out, keyboard):
        assert confirmation_prompt(out, "Sure?", keyboard(keys=["y"])) is True

    def test_hint_shown(self, out, stream, keyboard):
        confirmation_prompt(out, "Sure?", keyboard(keys=["y"]))
        assert split_lines(stream.getvalue())[:2] == ["Sure?", CONFIRM_HINT]

    def test_esc_ignored_by_default(self, out, keyboard):
        assert confirmation_prompt(out, "Sure?", keyboard(keys=[KEY_ESC, "y"])) is True

    def test_esc_cancels_when_allowed(self, out, keyboard):
        with pytest.raises(CancelInput):
            confirmation_prompt(out, "Sure?", keyboard(keys=[KEY_ESC]), allow_esc=True)


class TestSelectFromList:
    OPTIONS = [('a', "Apples"), ('b', "Bananas")]

    def test_ignores_unmatched_keys(self, out, keyboard):
        kb = keyboard(keys=["x", "a"])
        assert select_from_list(out, "Fruit?", self.OPTIONS, kb) == "Apples"
        assert kb.keys_read == 2

    def test_single_key(self, out, keyboard):
        assert select_from_list(out, "Fruit?", self.OPTIONS, keyboard(keys=["b"])) == "Bananas"

    def test_layout(self, out, stream, keyboard):
        select_from_list(out, "Pick\none", self.OPTIONS, keyboard(keys=["a"]))
        assert split_lines(stream.getvalue()) == [
            "Pick", "one", SELECT_HINT, "", "a: Apples", "b: Bananas", "",
        ]

    def test_first_duplicate_key_wins(self, out, keyboard):
        options = [('a', "First"), ('a', "Second")]
        assert select_from_list(out, "?", options, keyboard(keys=["a"])) == "First"

    def test_returns_label_object(self, out, keyboard):
        label = ("tuple", "label")
        result = select_from_list(out, "?", [('t', label)], keyboard(keys=["t"]))
        assert result == label

    def test_esc_cancels_when_allowed(self, out, keyboard):
        with pytest.raises(CancelInput):
            select_from_list(out, "?", self.OPTIONS, keyboard(keys=["z", KEY_ESC]), allow_esc=True)

    def test_empty_key_ignored(self, out, keyboard):
        """Arrow keys come through as '' and never match."""
        assert select_from_list(out, "?", self.OPTIONS, keyboard(keys=["", "b"])) == "Bananas"

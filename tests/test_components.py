"""
Tests for line emission and the header component.

Run with: pytest tests/test_components.py -v
"""

import pytest

from tui_bricks.ui.components import emit_line, emit_dash, emit_iter, header, default_header
from tests.conftest import split_lines

NEXT = "\x1b[1E"
DASH = "-" * 45


class TestEmitLine:
    def test_line_then_advance(self, out):
        emit_line(out, "hello")
        assert out.pending == "hello" + NEXT

    def test_embedded_newline_passed_through(self, out):
        emit_line(out, "a\nb")
        assert out.pending == "a\nb" + NEXT

    def test_dash(self, out):
        emit_dash(out)
        assert out.pending == DASH + NEXT

    def test_nothing_written_until_flush(self, out, stream):
        emit_line(out, "queued")
        assert stream.getvalue() == ""
        out.flush()
        assert stream.getvalue() == "queued" + NEXT


class TestEmitIter:
    @pytest.mark.parametrize("text", ["one", "one\ntwo", "a\n\nb\n", ""])
    def test_one_advance_per_segment(self, out, text):
        segments = text.split("\n")
        emit_iter(out, segments)

        assert out.pending.count(NEXT) == len(segments)
        assert split_lines(out.pending)[:-1] == segments

    def test_generator_consumed_once(self, out):
        consumed = []

        def gen():
            for n in range(3):
                consumed.append(n)
                yield n

        emit_iter(out, gen())
        assert consumed == [0, 1, 2]
        assert out.pending == f"0{NEXT}1{NEXT}2{NEXT}"


class TestHeader:
    def test_shape(self, out):
        header(out, "Title")
        assert out.pending == f"{DASH}{NEXT}Title{NEXT}{DASH}{NEXT}{NEXT}"

    def test_multiline_title_order(self, out):
        header(out, "first\nsecond\nthird")
        lines = split_lines(out.pending)
        assert lines == [DASH, "first", "second", "third", DASH, "", ""]

    def test_empty_title_separators_adjacent(self, out):
        header(out, "")
        assert out.pending == f"{DASH}{NEXT}{DASH}{NEXT}{NEXT}"

    def test_default_header(self, out):
        default_header(out)
        assert split_lines(out.pending) == [DASH, "Welcome to TUI Bricks", DASH, "", ""]

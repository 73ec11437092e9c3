"""Tests for pi.menu.screen_buffer — cell grid, dirty tracking and rendering."""

from __future__ import annotations

import io

import pytest

from pi.menu.color import Color
from pi.menu.screen_buffer import ScreenBuffer, TerminalSizeUnavailable
from pi.menu.style import (
    CURSOR_HOME,
    DEFAULT_STYLE,
    ERASE_CONSOLE,
    RESET_ALL,
    CellStyle,
    cell_prefix,
    cursor_to,
    frame_prefix,
)

from .virtual_terminal import VirtualTerminal

RED = CellStyle(foreground=Color(255, 0, 0))


def snapshot(buffer: ScreenBuffer):
    return [
        [(buffer.get_char(x, y), buffer.get_style(x, y)) for x in range(buffer.width)]
        for y in range(buffer.height)
    ]


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestInitialize:
    def test_starts_blank_and_clean(self, buffer):
        assert (buffer.width, buffer.height) == (10, 5)
        for y in range(5):
            assert buffer.row_text(y) == " " * 10
        assert buffer.get_style(3, 3) == DEFAULT_STYLE
        assert buffer.dirty_count == 0

    @pytest.mark.parametrize("size", [(0, 5), (10, 0), (-3, -3)])
    def test_non_positive_size_raises(self, size):
        with pytest.raises(TerminalSizeUnavailable):
            ScreenBuffer(*size)

    def test_reinitialize_wipes_content(self, buffer):
        buffer.set_cell(1, 1, "x", RED)
        buffer.initialize(4, 2)
        assert (buffer.width, buffer.height) == (4, 2)
        assert buffer.row_text(1) == "    "
        assert buffer.get_style(1, 1) == DEFAULT_STYLE
        assert buffer.dirty_count == 0

    def test_custom_blank_and_style(self):
        style = CellStyle(background=Color(0, 0, 80))
        buf = ScreenBuffer(3, 1, blank=".", default_style=style)
        assert buf.row_text(0) == "..."
        assert buf.get_style(0, 0) == style

    def test_error_message(self):
        assert str(TerminalSizeUnavailable()) == "Error getting console size"
        assert "0x5" in str(TerminalSizeUnavailable(0, 5))


class TestForTerminal:
    def test_reserves_bottom_row(self):
        buf = ScreenBuffer.for_terminal(VirtualTerminal(rows=6, columns=10))
        assert (buf.width, buf.height) == (10, 5)

    def test_single_row_terminal_keeps_one_row(self):
        buf = ScreenBuffer.for_terminal(VirtualTerminal(rows=1, columns=10))
        assert buf.height == 1

    def test_zero_columns_raises(self):
        with pytest.raises(TerminalSizeUnavailable):
            ScreenBuffer.for_terminal(VirtualTerminal(rows=5, columns=0))

    def test_size_query_failure_propagates(self):
        term = VirtualTerminal()
        term.size_available = False
        with pytest.raises(TerminalSizeUnavailable):
            ScreenBuffer.for_terminal(term)


class TestClear:
    def test_clear_chars_keeps_styles(self, buffer, out):
        buffer.set_cell(2, 2, "x", RED)
        buffer.render_dirty(out)
        buffer.clear_chars()
        assert buffer.get_char(2, 2) == " "
        assert buffer.get_style(2, 2) == RED
        assert buffer.dirty_count == 50

    def test_clear_resets_styles(self, buffer):
        buffer.set_cell(2, 2, "x", RED)
        buffer.clear()
        assert buffer.get_char(2, 2) == " "
        assert buffer.get_style(2, 2) == DEFAULT_STYLE


# ---------------------------------------------------------------------------
# Mutation and bounds
# ---------------------------------------------------------------------------


class TestMutation:
    def test_set_char_marks_dirty(self, buffer):
        buffer.set_char(2, 3, "x")
        assert buffer.get_char(2, 3) == "x"
        assert buffer.is_dirty(2, 3)
        assert buffer.dirty_count == 1

    def test_set_style(self, buffer):
        buffer.set_style(0, 0, RED)
        assert buffer.get_style(0, 0) == RED
        assert buffer.get_char(0, 0) == " "
        assert buffer.is_dirty(0, 0)

    def test_set_cell(self, buffer):
        buffer.set_cell(9, 4, "z", RED)
        assert buffer.get_char(9, 4) == "z"
        assert buffer.get_style(9, 4) == RED

    def test_set_foreground_keeps_other_attributes(self, buffer):
        buffer.set_style(1, 1, CellStyle(bold=True, background=Color(1, 1, 1)))
        buffer.set_foreground(1, 1, Color(9, 9, 9))
        style = buffer.get_style(1, 1)
        assert style.foreground == Color(9, 9, 9)
        assert style.bold
        assert style.background == Color(1, 1, 1)

    def test_last_write_wins(self, buffer):
        buffer.set_char(0, 0, "a")
        buffer.set_char(0, 0, "b")
        assert buffer.get_char(0, 0) == "b"

    def test_out_of_bounds_reads(self, buffer):
        assert buffer.get_char(10, 0) is None
        assert buffer.get_style(0, -1) is None
        assert not buffer.is_dirty(-1, -1)
        assert buffer.row_text(5) == ""


class TestBoundaries:
    @pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, -1), (0, 5), (-1, -1), (10, 5)])
    def test_writes_outside_are_noops(self, buffer, x, y):
        before = snapshot(buffer)
        buffer.set_char(x, y, "x")
        buffer.set_style(x, y, RED)
        buffer.set_cell(x, y, "x", RED)
        buffer.set_foreground(x, y, Color(1, 2, 3))
        assert snapshot(buffer) == before
        assert buffer.dirty_count == 0

    def test_edges_are_inside(self, buffer):
        for x, y in [(0, 0), (9, 0), (0, 4), (9, 4)]:
            buffer.set_char(x, y, "e")
        assert buffer.dirty_count == 4


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderFull:
    def test_emits_every_cell(self, buffer, out):
        assert buffer.render_full(out) == 50
        expected_row = (frame_prefix(DEFAULT_STYLE) + " ") * 10 + "\n"
        assert out.getvalue() == ERASE_CONSOLE + CURSOR_HOME + expected_row * 5 + RESET_ALL

    def test_count_independent_of_dirty_state(self, buffer, out):
        buffer.set_char(0, 0, "x")
        assert buffer.render_full(out) == 50
        assert buffer.render_full(out) == 50

    def test_clears_dirty_flags(self, buffer, out):
        buffer.set_char(1, 1, "x")
        buffer.render_full(out)
        assert buffer.dirty_count == 0

    def test_single_write(self, buffer):
        writes = []

        class Recorder:
            def write(self, data):
                writes.append(data)

        buffer.render_full(Recorder())
        assert len(writes) == 1

    def test_styles_in_frame(self, buffer, out):
        style = CellStyle(foreground=Color(1, 2, 3), bold=True)
        buffer.set_cell(0, 0, "Q", style)
        buffer.render_full(out)
        assert out.getvalue().startswith(ERASE_CONSOLE + CURSOR_HOME + frame_prefix(style) + "Q")


class TestRenderDirty:
    def test_single_cell_output(self, buffer, out):
        buffer.set_char(2, 3, "x")
        assert buffer.render_dirty(out) == 1
        assert out.getvalue() == cursor_to(2, 3) + cell_prefix(DEFAULT_STYLE) + "x"

    def test_nothing_dirty_writes_nothing(self, buffer):
        writes = []

        class Recorder:
            def write(self, data):
                writes.append(data)

        assert buffer.render_dirty(Recorder()) == 0
        assert writes == []

    def test_flags_consumed(self, buffer):
        buffer.set_char(2, 3, "x")
        first, second = io.StringIO(), io.StringIO()
        assert buffer.render_dirty(first) == 1
        assert buffer.render_dirty(second) == 0
        assert second.getvalue() == ""

    def test_rewritten_cell_reappears(self, buffer, out):
        buffer.set_char(2, 3, "x")
        buffer.render_dirty(out)
        buffer.set_char(2, 3, "x")
        assert buffer.render_dirty(out) == 1

    def test_row_major_order(self, buffer, out):
        buffer.set_char(5, 1, "b")
        buffer.set_char(1, 4, "c")
        buffer.set_char(3, 0, "a")
        buffer.render_dirty(out)
        text = out.getvalue()
        assert text.index(cursor_to(3, 0)) < text.index(cursor_to(5, 1)) < text.index(cursor_to(1, 4))

    def test_each_cell_repeats_its_style(self, buffer, out):
        buffer.set_cell(0, 0, "a", RED)
        buffer.set_cell(1, 0, "b", RED)
        buffer.render_dirty(out)
        assert out.getvalue() == (
            cursor_to(0, 0) + cell_prefix(RED) + "a" + cursor_to(1, 0) + cell_prefix(RED) + "b"
        )

    def test_dirty_volume_smaller_than_full(self, buffer):
        full, dirty = io.StringIO(), io.StringIO()
        buffer.render_full(full)
        buffer.set_char(0, 0, "x")
        buffer.render_dirty(dirty)
        assert len(dirty.getvalue()) < len(full.getvalue()) / 10

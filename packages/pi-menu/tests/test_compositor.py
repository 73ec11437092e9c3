"""Tests for pi.menu.compositor — measuring, blitting and color overlays."""

from __future__ import annotations

import pytest

from pi.menu.color import Color
from pi.menu.compositor import (
    BoundingBox,
    TextMetrics,
    apply_color_overlay,
    blit,
    centered_origin_x,
    draw_centered,
    draw_text,
    draw_title,
    erase,
    measure,
)
from pi.menu.fonts import ANSI_SHADOW, BLOODY, MONO12
from pi.menu.screen_buffer import ScreenBuffer
from pi.menu.style import CURSOR_HOME, DEFAULT_STYLE, ERASE_CONSOLE, RESET_ALL, CellStyle, frame_prefix


def snapshot(buffer: ScreenBuffer):
    return [
        [(buffer.get_char(x, y), buffer.get_style(x, y)) for x in range(buffer.width)]
        for y in range(buffer.height)
    ]


def expected_width(text, font):
    return sum(font.get(ch).measured_width for ch in text if font.get(ch) is not None)


# ---------------------------------------------------------------------------
# Measuring
# ---------------------------------------------------------------------------


class TestMeasure:
    def test_sums_measured_widths(self, tiny_font):
        # 'B' declares 9x9 but its rows are at most 3 wide and 3 high
        assert measure("AB", tiny_font) == TextMetrics(6, 3)

    def test_missing_characters_contribute_nothing(self, tiny_font):
        assert measure("A?zB", tiny_font) == measure("AB", tiny_font)

    def test_empty(self, tiny_font):
        assert measure("", tiny_font) == TextMetrics(0, 0)
        assert measure("???", tiny_font) == TextMetrics(0, 0)

    @pytest.mark.parametrize("font", [MONO12, BLOODY, ANSI_SHADOW])
    @pytest.mark.parametrize("text", ["A", "HELLO", "MENU 42!", "lower", ">LASVEGAS<", ""])
    def test_width_matches_glyph_sum(self, font, text):
        assert measure(text, font).width == expected_width(text, font)

    def test_height_is_tallest_glyph(self, tiny_font):
        assert measure("A", tiny_font).height == 2
        assert measure("AB", tiny_font).height == 3


class TestCenteredOrigin:
    def test_centered(self):
        assert centered_origin_x(10, 4) == 3
        assert centered_origin_x(11, 3) == 4

    def test_may_be_negative(self):
        assert centered_origin_x(4, 20) == -8


# ---------------------------------------------------------------------------
# Blitting
# ---------------------------------------------------------------------------


class TestBlit:
    def test_writes_glyph_rows(self, buffer, tiny_font):
        box = blit(buffer, "A", tiny_font, 0, 0)
        assert box == BoundingBox(0, 0, 3, 2)
        assert buffer.row_text(0) == "/-\\       "
        assert buffer.row_text(1) == "|-|       "
        assert buffer.row_text(2) == " " * 10

    def test_advances_by_measured_width(self, buffer, tiny_font):
        blit(buffer, "BA", tiny_font, 1, 0)
        assert buffer.row_text(0) == " BB /-\\   "
        assert buffer.row_text(1) == " B  |-|   "
        assert buffer.row_text(2) == " BBB      "

    def test_missing_character_does_not_advance(self, tiny_font):
        a, b = ScreenBuffer(10, 5), ScreenBuffer(10, 5)
        blit(a, "?A", tiny_font, 2, 1)
        blit(b, "A", tiny_font, 2, 1)
        assert snapshot(a) == snapshot(b)

    def test_writes_blank_cells_too(self, buffer):
        from pi.menu.glyphs import Font, Glyph

        font = Font("holes", [Glyph("O", 3, 1, ("# #",))])
        buffer.set_char(1, 0, "x")
        blit(buffer, "O", font, 0, 0)
        assert buffer.row_text(0)[:3] == "# #"

    def test_idempotent(self, tiny_font):
        once, twice = ScreenBuffer(10, 5), ScreenBuffer(10, 5)
        blit(once, "AB", tiny_font, 1, 1)
        blit(twice, "AB", tiny_font, 1, 1)
        blit(twice, "AB", tiny_font, 1, 1)
        assert snapshot(once) == snapshot(twice)

    def test_idempotent_with_builtin_font(self):
        once, twice = ScreenBuffer(40, 12), ScreenBuffer(40, 12)
        blit(once, "PI", MONO12, 3, 1)
        for _ in range(2):
            blit(twice, "PI", MONO12, 3, 1)
        assert snapshot(once) == snapshot(twice)

    def test_clips_at_edges(self, buffer, tiny_font):
        blit(buffer, "A", tiny_font, -1, 4)
        assert buffer.row_text(4).startswith("-\\ ")

    def test_fully_outside(self, buffer, tiny_font):
        blit(buffer, "AAAA", tiny_font, 20, 20)
        assert buffer.dirty_count == 0

    def test_without_style_keeps_existing(self, buffer, tiny_font):
        red = CellStyle(foreground=Color(255, 0, 0))
        buffer.set_style(0, 0, red)
        blit(buffer, "A", tiny_font, 0, 0)
        assert buffer.get_style(0, 0) == red

    def test_with_style(self, buffer, tiny_font):
        style = CellStyle(bold=True)
        blit(buffer, "A", tiny_font, 0, 0, style)
        assert buffer.get_style(2, 1) == style

    def test_erase_blanks_the_same_cells(self, buffer, tiny_font):
        blit(buffer, "AB", tiny_font, 0, 0)
        erase(buffer, "AB", tiny_font, 0, 0)
        for y in range(5):
            assert buffer.row_text(y) == " " * 10

    def test_erase_with_mask(self, buffer, tiny_font):
        erase(buffer, "A", tiny_font, 0, 0, mask="#")
        assert buffer.row_text(0) == "###       "


class TestEndToEnd:
    def test_glyph_in_small_frame(self, buffer, tiny_font, out):
        blit(buffer, "A", tiny_font, 0, 0)
        assert buffer.render_full(out) == 50

        cell = frame_prefix(DEFAULT_STYLE)
        rows = ["/-\\" + " " * 7, "|-|" + " " * 7] + [" " * 10] * 3
        expected = ERASE_CONSOLE + CURSOR_HOME
        for row in rows:
            expected += "".join(cell + ch for ch in row) + "\n"
        expected += RESET_ALL
        assert out.getvalue() == expected
        assert out.getvalue().count(cell) == 50


# ---------------------------------------------------------------------------
# Color overlay
# ---------------------------------------------------------------------------


class TestBoundingBox:
    def test_edges(self):
        box = BoundingBox(2, 3, 4, 5)
        assert (box.right, box.bottom) == (6, 8)

    def test_cells_row_major(self):
        assert list(BoundingBox(0, 0, 2, 2).cells()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_normalize(self):
        box = BoundingBox(2, 2, 4, 2)
        assert box.normalize(2, 2) == (0.0, 0.0)
        assert box.normalize(4, 3) == (0.5, 0.5)

    def test_zero_extent_normalizes_to_zero(self):
        assert BoundingBox(5, 5, 0, 0).normalize(5, 5) == (0.0, 0.0)
        assert BoundingBox(0, 0, 3, 0).normalize(1, 0) == (1 / 3, 0.0)


class TestColorOverlay:
    def test_color_sets_foreground(self, buffer):
        box = BoundingBox(0, 0, 4, 2)
        apply_color_overlay(buffer, box, lambda x, y: Color.clamped(x * 400, y * 100, 0))
        assert buffer.get_style(1, 1).foreground == Color(100, 50, 0)
        assert buffer.get_style(0, 0).foreground == Color(0, 0, 0)
        assert buffer.get_style(4, 0) == DEFAULT_STYLE

    def test_style_replaces_whole_style(self, buffer):
        style = CellStyle(foreground=Color(1, 1, 1), bold=True)
        apply_color_overlay(buffer, BoundingBox(0, 0, 1, 1), lambda x, y: style)
        assert buffer.get_style(0, 0) == style

    def test_empty_box_writes_nothing(self, buffer):
        calls = []
        apply_color_overlay(buffer, BoundingBox(0, 0, 0, 0), lambda x, y: calls.append((x, y)) or Color())
        assert calls == []
        assert buffer.dirty_count == 0

    def test_skips_cells_outside_buffer(self, buffer):
        calls = []

        def fn(x, y):
            calls.append((x, y))
            return Color()

        apply_color_overlay(buffer, BoundingBox(8, 4, 4, 2), fn)
        assert len(calls) == 2

    def test_overlay_only_touches_box(self, buffer, tiny_font):
        draw_text(buffer, "A", tiny_font, 2, 1, lambda x, y: Color(9, 9, 9))
        assert buffer.dirty_count == 6
        assert buffer.get_style(2, 1).foreground == Color(9, 9, 9)


# ---------------------------------------------------------------------------
# Placement helpers
# ---------------------------------------------------------------------------


class TestPlacement:
    def test_draw_title_centers_horizontally(self, buffer, tiny_font):
        box = draw_title(buffer, "A", tiny_font, 1)
        assert box == BoundingBox(4, 1, 3, 2)
        assert buffer.row_text(1)[4:7] == "/-\\"

    def test_draw_centered(self, buffer, tiny_font):
        box = draw_centered(buffer, "A", tiny_font, 5, 2)
        assert box == BoundingBox(4, 1, 3, 2)
        assert buffer.row_text(2)[4:7] == "|-|"

    def test_title_wider_than_buffer_is_clipped(self, tiny_font):
        buf = ScreenBuffer(4, 3)
        box = draw_title(buf, "AAA", tiny_font, 0)
        assert box.x == 2 - 4
        assert buf.row_text(0) == "\\/-\\"

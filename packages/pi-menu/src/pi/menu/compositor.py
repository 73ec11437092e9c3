"""Glyph compositor: lays strings out in a block font and blits them into a buffer.

Layout is done in two passes over the string.  ``measure`` computes the
bounding box (sum of glyph widths, tallest glyph) and ``blit`` walks the
string again writing every glyph cell, blank cells included, at a running
x offset.  Characters the font has no glyph for are skipped by both passes:
they take up no columns and draw nothing.

An optional color function can then be evaluated over the bounding box to
paint gradients across the whole title independently of the glyph shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Union

from pi.menu.color import Color
from pi.menu.glyphs import Font, Glyph
from pi.menu.screen_buffer import BLANK, ScreenBuffer
from pi.menu.style import CellStyle

__all__ = [
    "BoundingBox",
    "ColorFunction",
    "TextMetrics",
    "apply_color_overlay",
    "blit",
    "centered_origin_x",
    "draw_centered",
    "draw_text",
    "draw_title",
    "erase",
    "measure",
]

# A color function maps normalized (x, y) in [0, 1) to either a foreground
# color or a complete cell style.
ColorFunction = Callable[[float, float], Union[Color, CellStyle]]


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextMetrics:
    width: int
    height: int


@dataclass(frozen=True)
class BoundingBox:
    """A rectangle in buffer coordinates. ``x``/``y`` may be negative."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(col, row)`` for every cell, row-major."""
        for row in range(self.y, self.bottom):
            for col in range(self.x, self.right):
                yield col, row

    def normalize(self, col: int, row: int) -> tuple[float, float]:
        """Map a cell to ``[0, 1)`` along each axis; a zero extent maps to 0.0."""
        nx = (col - self.x) / self.width if self.width > 0 else 0.0
        ny = (row - self.y) / self.height if self.height > 0 else 0.0
        return nx, ny


def _resolve(text: str, font: Font) -> Iterator[Glyph]:
    for ch in text:
        glyph = font.get(ch)
        if glyph is not None:
            yield glyph


def measure(text: str, font: Font) -> TextMetrics:
    """Bounding-box size of *text* laid out in *font*."""
    width = 0
    height = 0
    for glyph in _resolve(text, font):
        width += glyph.measured_width
        height = max(height, glyph.measured_height)
    return TextMetrics(width, height)


def centered_origin_x(canvas_width: int, text_width: int) -> int:
    """Left edge that centers *text_width* columns; may be negative."""
    return canvas_width // 2 - text_width // 2


# ---------------------------------------------------------------------------
# Blitting
# ---------------------------------------------------------------------------


def _blit_glyph(
    buffer: ScreenBuffer,
    glyph: Glyph,
    x: int,
    y: int,
    style: CellStyle | None,
    mask: str | None,
) -> None:
    for row, line in enumerate(glyph.rows):
        for col, ch in enumerate(line):
            if mask is not None:
                ch = mask
            if style is None:
                buffer.set_char(x + col, y + row, ch)
            else:
                buffer.set_cell(x + col, y + row, ch, style)


def blit(
    buffer: ScreenBuffer,
    text: str,
    font: Font,
    x: int,
    y: int,
    style: CellStyle | None = None,
) -> BoundingBox:
    """Write *text* into *buffer* with its top-left corner at (*x*, *y*).

    Without *style* only characters are written and existing cell styles
    are kept.  Returns the measured bounding box at the given origin.
    """
    metrics = measure(text, font)
    cursor_x = x
    for glyph in _resolve(text, font):
        _blit_glyph(buffer, glyph, cursor_x, y, style, None)
        cursor_x += glyph.measured_width
    return BoundingBox(x, y, metrics.width, metrics.height)


def erase(
    buffer: ScreenBuffer,
    text: str,
    font: Font,
    x: int,
    y: int,
    mask: str = BLANK,
) -> BoundingBox:
    """Overwrite exactly the cells ``blit`` would touch with *mask*."""
    metrics = measure(text, font)
    cursor_x = x
    for glyph in _resolve(text, font):
        _blit_glyph(buffer, glyph, cursor_x, y, None, mask)
        cursor_x += glyph.measured_width
    return BoundingBox(x, y, metrics.width, metrics.height)


# ---------------------------------------------------------------------------
# Color overlay
# ---------------------------------------------------------------------------


def apply_color_overlay(
    buffer: ScreenBuffer,
    box: BoundingBox,
    color_fn: ColorFunction,
) -> None:
    """Evaluate *color_fn* for every cell of *box* and apply the result.

    A ``Color`` result replaces the cell's foreground; a ``CellStyle``
    replaces the whole style.
    """
    for col, row in box.cells():
        if not buffer.in_bounds(col, row):
            continue
        result = color_fn(*box.normalize(col, row))
        if isinstance(result, CellStyle):
            buffer.set_style(col, row, result)
        else:
            buffer.set_foreground(col, row, result)


# ---------------------------------------------------------------------------
# Convenience placements
# ---------------------------------------------------------------------------


def draw_text(
    buffer: ScreenBuffer,
    text: str,
    font: Font,
    x: int,
    y: int,
    color_fn: ColorFunction | None = None,
    style: CellStyle | None = None,
) -> BoundingBox:
    box = blit(buffer, text, font, x, y, style)
    if color_fn is not None:
        apply_color_overlay(buffer, box, color_fn)
    return box


def draw_centered(
    buffer: ScreenBuffer,
    text: str,
    font: Font,
    center_x: int,
    center_y: int,
    color_fn: ColorFunction | None = None,
    style: CellStyle | None = None,
) -> BoundingBox:
    """Draw *text* so its bounding box is centered on (*center_x*, *center_y*)."""
    metrics = measure(text, font)
    x = center_x - metrics.width // 2
    y = center_y - metrics.height // 2
    return draw_text(buffer, text, font, x, y, color_fn, style)


def draw_title(
    buffer: ScreenBuffer,
    text: str,
    font: Font,
    top: int,
    color_fn: ColorFunction | None = None,
    style: CellStyle | None = None,
) -> BoundingBox:
    """Draw *text* horizontally centered on the buffer, starting at row *top*."""
    metrics = measure(text, font)
    x = centered_origin_x(buffer.width, metrics.width)
    return draw_text(buffer, text, font, x, top, color_fn, style)

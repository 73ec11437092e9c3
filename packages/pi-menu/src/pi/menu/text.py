"""Plain single-row text written into the screen buffer, one code point per cell."""

from __future__ import annotations

import enum
from typing import Callable

import wcwidth as _wcwidth

from pi.menu.color import Color
from pi.menu.screen_buffer import ScreenBuffer
from pi.menu.style import CellStyle

_TAB_SIZE = 4


class Alignment(str, enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def text_width(text: str) -> int:
    """Display width of *text*; unprintable code points count as one cell."""
    width = _wcwidth.wcswidth(text)
    return width if width >= 0 else len(text)


def aligned_x(width: int, content_width: int, alignment: Alignment) -> int:
    """Starting column for *content_width* columns in a *width* wide row.

    Never negative: text wider than the row starts at column 0.
    """
    if alignment is Alignment.CENTER:
        x = width // 2 - content_width // 2
    elif alignment is Alignment.RIGHT:
        x = width - content_width
    else:
        x = 0
    return max(0, x)


def write_text(
    buffer: ScreenBuffer,
    x: int,
    y: int,
    text: str,
    style: CellStyle | None = None,
    color_fn: Callable[[float], Color] | None = None,
) -> int:
    """Write *text* starting at (*x*, *y*); returns the column after the last cell.

    With *style* each cell gets that style, otherwise the existing style is
    kept.  *color_fn* then recolors the foreground with ``color_fn(i / n)``
    for the i-th of n cells.
    """
    cells = text.expandtabs(_TAB_SIZE)
    count = len(cells)
    for i, ch in enumerate(cells):
        if style is None:
            buffer.set_char(x + i, y, ch)
        else:
            buffer.set_cell(x + i, y, ch, style)
        if color_fn is not None:
            buffer.set_foreground(x + i, y, color_fn(i / count))
    return x + count


def write_aligned(
    buffer: ScreenBuffer,
    y: int,
    text: str,
    alignment: Alignment = Alignment.LEFT,
    style: CellStyle | None = None,
    color_fn: Callable[[float], Color] | None = None,
) -> int:
    """Write *text* on row *y* aligned within the buffer width."""
    x = aligned_x(buffer.width, text_width(text.expandtabs(_TAB_SIZE)), alignment)
    return write_text(buffer, x, y, text, style, color_fn)

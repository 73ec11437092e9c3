"""Frame and background decorations applied to a whole screen buffer.

Both decorations touch (nearly) every cell, so a frame that uses them should
be output with ``ScreenBuffer.render_full``; diffing buys nothing here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pi.menu.color import Color
from pi.menu.screen_buffer import ScreenBuffer


@dataclass(frozen=True)
class BorderStyle:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


DOUBLE_BORDER = BorderStyle("╔", "╗", "╚", "╝", "═", "║")
SINGLE_BORDER = BorderStyle("┌", "┐", "└", "┘", "─", "│")
ROUNDED_BORDER = BorderStyle("╭", "╮", "╰", "╯", "─", "│")

BORDERS: dict[str, BorderStyle] = {
    "double": DOUBLE_BORDER,
    "single": SINGLE_BORDER,
    "rounded": ROUNDED_BORDER,
}

GradientFunction = Callable[[float, float], Color]


def add_border(buffer: ScreenBuffer, border: BorderStyle = DOUBLE_BORDER) -> None:
    """Stamp *border* onto the four outer edges of *buffer* (characters only)."""
    right = buffer.width - 1
    bottom = buffer.height - 1

    for x in range(1, right):
        buffer.set_char(x, 0, border.horizontal)
        buffer.set_char(x, bottom, border.horizontal)
    for y in range(1, bottom):
        buffer.set_char(0, y, border.vertical)
        buffer.set_char(right, y, border.vertical)

    # Corners last: on a 1-wide or 1-high buffer they overlap, last write wins
    buffer.set_char(0, 0, border.top_left)
    buffer.set_char(right, 0, border.top_right)
    buffer.set_char(0, bottom, border.bottom_left)
    buffer.set_char(right, bottom, border.bottom_right)


def fill_gradient(buffer: ScreenBuffer, gradient: GradientFunction) -> None:
    """Set every cell's foreground to ``gradient(col / width, row / height)``."""
    width = buffer.width
    height = buffer.height
    for row in range(height):
        ny = row / height
        for col in range(width):
            buffer.set_foreground(col, row, gradient(col / width, ny))


def linear_ramp(x: float, y: float) -> Color:
    """Blue-based ramp: red grows downward, green fades toward the bottom-left."""
    return Color.clamped(y * 255.0, x * (1.0 - y) * 255.0, 250)


def decorate(
    buffer: ScreenBuffer,
    border: BorderStyle | None = DOUBLE_BORDER,
    gradient: GradientFunction | None = linear_ramp,
) -> None:
    """Apply the border and then the gradient, skipping whichever is ``None``."""
    if border is not None:
        add_border(buffer, border)
    if gradient is not None:
        fill_gradient(buffer, gradient)

"""Ready-made color functions for titles, text and animations."""

from __future__ import annotations

import math
from typing import Callable

from pi.menu.color import Color, hsl_to_rgb
from pi.menu.style import CellStyle


def default_gradient(x: float) -> Color:
    """Default menu title gradient: blue to magenta with a green hump."""
    return Color.clamped(x * 255.0, math.sin(x * 3.1415) * 200.0, 255)


def rainbow(x: float) -> Color:
    """Two full hue cycles across the span."""
    return hsl_to_rgb(x * 720.0, 1.0, 0.5)


def sine_rainbow(x: float) -> Color:
    return Color.clamped(
        math.sin(6.2831 * x) * 127 + 128,
        math.sin(6.2831 * x + 2.094) * 127 + 128,
        math.sin(6.2831 * x + 4.188) * 127 + 128,
    )


def blue_to_purple(x: float) -> Color:
    return Color.clamped(128 + 127 * math.sin(x * 3.1415), 0, 255 * x)


def rainbow_uv(x: float, y: float) -> CellStyle:
    """Bold pastel rainbow whose hue depends on both axes."""
    return CellStyle(foreground=hsl_to_rgb(x * y * 360.0, 0.7, 0.7), bold=True)


def shifting_rainbow(frame: int, speed: float = 0.05) -> Callable[[float], Color]:
    """A rainbow that scrolls by *speed* of a cycle per frame."""

    def _color(x: float) -> Color:
        return hsl_to_rgb(math.fmod((x + frame * speed) * 360.0, 360.0), 1.0, 0.5)

    return _color


def as_uv(fn: Callable[[float], Color]) -> Callable[[float, float], Color]:
    """Adapt a horizontal gradient to the ``(x, y)`` color-function shape."""

    def _uv(x: float, y: float) -> Color:
        return fn(x)

    return _uv


GRADIENTS: dict[str, Callable[[float], Color]] = {
    "default": default_gradient,
    "rainbow": rainbow,
    "sine": sine_rainbow,
    "purple": blue_to_purple,
}

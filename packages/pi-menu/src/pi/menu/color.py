"""RGB color values and color-space helpers.

Provides the immutable ``Color`` triple used by cell styles, HSL -> RGB
conversion, and a stable name -> hue hash used to tint chat-style senders.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "BLACK",
    "Color",
    "WHITE",
    "fnv1a32",
    "hsl_to_rgb",
    "hue_from_string",
]


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB color with independent 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(
                    f"Color channel {name} must be an int in [0, 255], got {value!r}"
                )

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> Color:
        """Build a color from arbitrary numbers, truncating and clamping each channel.

        Gradient functions compute channels as floats (``x * 255``,
        ``sin(x) * 200``); this is the conversion they go through.
        """
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        text = value.lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Expected #rrggbb, got {value!r}")
        try:
            return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError as exc:
            raise ValueError(f"Expected #rrggbb, got {value!r}") from exc

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


def _clamp_channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


# ---------------------------------------------------------------------------
# HSL conversion
# ---------------------------------------------------------------------------


def hsl_to_rgb(h: float, s: float, l: float) -> Color:  # noqa: E741
    """Convert HSL to an 8-bit RGB ``Color``.

    *h* is in degrees and may be any value (normalized into ``[0, 360)``);
    *s* and *l* are in ``[0, 1]``.
    """
    h = math.fmod(h, 360.0)
    if h < 0.0:
        h += 360.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0

    if h < 60.0:
        r1, g1, b1 = c, x, 0.0
    elif h < 120.0:
        r1, g1, b1 = x, c, 0.0
    elif h < 180.0:
        r1, g1, b1 = 0.0, c, x
    elif h < 240.0:
        r1, g1, b1 = 0.0, x, c
    elif h < 300.0:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return Color(
        _round_channel(r1 + m),
        _round_channel(g1 + m),
        _round_channel(b1 + m),
    )


def _round_channel(value: float) -> int:
    # round-half-away-from-zero, matching C's std::round
    return max(0, min(255, int(math.floor(value * 255.0 + 0.5))))


# ---------------------------------------------------------------------------
# Name -> hue hashing
# ---------------------------------------------------------------------------

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a32(text: str) -> int:
    """32-bit FNV-1a hash over the UTF-8 bytes of *text*."""
    h = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


def hue_from_string(text: str) -> float:
    """Map *text* to a stable hue in ``[0, 360)``."""
    return fnv1a32(text) / 4294967296.0 * 360.0

"""Multi-row block glyphs and the fonts that hold them.

A ``Glyph`` is a small bitmap of code points for one character.  Rows are
not required to share a length, and the ``width``/``height`` fields are the
values the font tables were authored with, which frequently disagree with
the actual rows.  Layout always uses ``measured_width``/``measured_height``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glyph:
    char: str
    width: int
    height: int
    rows: tuple[str, ...]

    @property
    def measured_width(self) -> int:
        """Longest row, in cells."""
        return max((len(row) for row in self.rows), default=0)

    @property
    def measured_height(self) -> int:
        return len(self.rows)


class Font:
    """A named collection of glyphs keyed by the character they represent."""

    def __init__(self, name: str, glyphs: Iterable[Glyph]) -> None:
        self.name = name
        self._glyphs: dict[str, Glyph] = {}
        for glyph in glyphs:
            # First definition wins, like a linear scan over the table would
            self._glyphs.setdefault(glyph.char, glyph)

    def get(self, char: str) -> Glyph | None:
        """Return the glyph for *char*, or ``None`` when the font has none."""
        return self._glyphs.get(char)

    def chars(self) -> list[str]:
        return list(self._glyphs)

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self._glyphs.values())

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"Font({self.name!r}, {len(self)} glyphs)"


# ---------------------------------------------------------------------------
# Built-in font registry
# ---------------------------------------------------------------------------


class FontName(str, enum.Enum):
    MONO12 = "mono12"
    BLOODY = "bloody"
    ANSI_SHADOW = "ansi_shadow"
    ALLIGATOR2 = "alligator2"


DEFAULT_FONT = FontName.MONO12


def _builtin_fonts() -> dict[str, Font]:
    # Deferred: the font tables import this module.
    from pi.menu.fonts import ALLIGATOR2, ANSI_SHADOW, BLOODY, MONO12

    return {
        FontName.MONO12.value: MONO12,
        FontName.BLOODY.value: BLOODY,
        FontName.ANSI_SHADOW.value: ANSI_SHADOW,
        FontName.ALLIGATOR2.value: ALLIGATOR2,
    }


def available_fonts() -> list[str]:
    """Names accepted by :func:`get_font`."""
    return [name.value for name in FontName]


def get_font(name: str | FontName = DEFAULT_FONT) -> Font:
    """Look up a built-in font, falling back to Mono12 for unknown names."""
    key = name.value if isinstance(name, FontName) else str(name).lower()
    fonts = _builtin_fonts()
    font = fonts.get(key)
    if font is None:
        logger.warning("Unknown font %r, falling back to %s", name, DEFAULT_FONT.value)
        font = fonts[DEFAULT_FONT.value]
    return font

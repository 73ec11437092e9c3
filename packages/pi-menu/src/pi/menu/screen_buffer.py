"""Screen buffer: a grid of styled character cells with per-cell dirty tracking.

The buffer is the single owner of what is on screen.  Drawing code mutates
cells through ``set_char``/``set_style``/``set_cell``; output happens through
one of two strategies:

* ``render_full`` -- erase the terminal and repaint every cell.
* ``render_dirty`` -- reposition the cursor and repaint only the cells that
  were written since they were last rendered.

Writes outside the grid are silently dropped.  Glyphs and borders routinely
overhang the frame edges, so clipping is the normal case, not an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from pi.menu.color import Color
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

if TYPE_CHECKING:
    from pi.menu.terminal import Terminal

logger = logging.getLogger(__name__)

__all__ = [
    "BLANK",
    "OutputStream",
    "ScreenBuffer",
    "TerminalSizeUnavailable",
]

BLANK = " "


class TerminalSizeUnavailable(Exception):
    """The terminal did not report usable dimensions."""

    def __init__(self, width: int | None = None, height: int | None = None) -> None:
        self.width = width
        self.height = height
        if width is None or height is None:
            message = "Error getting console size"
        else:
            message = f"Error getting console size (got {width}x{height})"
        super().__init__(message)


class OutputStream(Protocol):
    """Anything frames can be written to (a terminal, ``sys.stdout``, ``StringIO``)."""

    def write(self, data: str) -> object: ...


class ScreenBuffer:
    """A ``width x height`` grid of (character, style) cells plus dirty flags."""

    def __init__(
        self,
        width: int,
        height: int,
        blank: str = BLANK,
        default_style: CellStyle = DEFAULT_STYLE,
    ) -> None:
        self._blank = blank
        self._default_style = default_style
        self._width = 0
        self._height = 0
        self._chars: list[list[str]] = []
        self._styles: list[list[CellStyle]] = []
        self._dirty: list[list[bool]] = []
        self.initialize(width, height)

    @classmethod
    def for_terminal(cls, terminal: Terminal, **kwargs: object) -> ScreenBuffer:
        """Size a buffer from *terminal*, leaving the bottom row unused.

        Drawing into the last terminal row makes most emulators scroll, so
        one row is always reserved.
        """
        columns = terminal.columns
        rows = terminal.rows
        if columns < 1 or rows < 1:
            raise TerminalSizeUnavailable(columns, rows)
        return cls(columns, max(1, rows - 1), **kwargs)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, width: int, height: int) -> None:
        """(Re)allocate the grid, wiping all content to blank/default style."""
        if width < 1 or height < 1:
            raise TerminalSizeUnavailable(width, height)

        self._width = width
        self._height = height
        self._chars = [[self._blank] * width for _ in range(height)]
        self._styles = [[self._default_style] * width for _ in range(height)]
        self._dirty = [[False] * width for _ in range(height)]
        logger.debug("Screen buffer allocated at %dx%d", width, height)

    def clear_chars(self) -> None:
        """Blank every character but keep the styles."""
        for y in range(self._height):
            for x in range(self._width):
                self.set_char(x, y, self._blank)

    def clear(self) -> None:
        """Blank every character and reset every style."""
        for y in range(self._height):
            for x in range(self._width):
                self.set_cell(x, y, self._blank, self._default_style)

    # ------------------------------------------------------------------
    # Properties / accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def blank(self) -> str:
        return self._blank

    @property
    def default_style(self) -> CellStyle:
        return self._default_style

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_char(self, x: int, y: int) -> str | None:
        if not self.in_bounds(x, y):
            return None
        return self._chars[y][x]

    def get_style(self, x: int, y: int) -> CellStyle | None:
        if not self.in_bounds(x, y):
            return None
        return self._styles[y][x]

    def is_dirty(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._dirty[y][x]

    @property
    def dirty_count(self) -> int:
        return sum(row.count(True) for row in self._dirty)

    def row_text(self, y: int) -> str:
        """Characters of row *y* joined into a string (no styling)."""
        if not 0 <= y < self._height:
            return ""
        return "".join(self._chars[y])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_char(self, x: int, y: int, char: str) -> None:
        if not self.in_bounds(x, y):
            return
        self._chars[y][x] = char
        self._dirty[y][x] = True

    def set_style(self, x: int, y: int, style: CellStyle) -> None:
        if not self.in_bounds(x, y):
            return
        self._styles[y][x] = style
        self._dirty[y][x] = True

    def set_cell(self, x: int, y: int, char: str, style: CellStyle) -> None:
        if not self.in_bounds(x, y):
            return
        self._chars[y][x] = char
        self._styles[y][x] = style
        self._dirty[y][x] = True

    def set_foreground(self, x: int, y: int, color: Color) -> None:
        """Replace only the foreground of the cell's current style."""
        if not self.in_bounds(x, y):
            return
        self.set_style(x, y, self._styles[y][x].with_foreground(color))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_full(self, out: OutputStream) -> int:
        """Erase the terminal and repaint every cell.

        Returns the number of cells emitted, always ``width * height``.
        """
        parts: list[str] = [ERASE_CONSOLE, CURSOR_HOME]
        for y in range(self._height):
            chars = self._chars[y]
            styles = self._styles[y]
            dirty = self._dirty[y]
            for x in range(self._width):
                parts.append(frame_prefix(styles[x]))
                parts.append(chars[x])
                dirty[x] = False
            parts.append("\n")
        parts.append(RESET_ALL)

        out.write("".join(parts))
        return self._width * self._height

    def render_dirty(self, out: OutputStream) -> int:
        """Repaint only the cells written since they were last rendered.

        Every dirty cell is emitted on its own with a cursor move and a full
        style prefix, even when its neighbour shares the same style.
        Returns the number of cells emitted.
        """
        parts: list[str] = []
        count = 0
        for y in range(self._height):
            dirty = self._dirty[y]
            if True not in dirty:
                continue
            chars = self._chars[y]
            styles = self._styles[y]
            for x in range(self._width):
                if not dirty[x]:
                    continue
                parts.append(cursor_to(x, y))
                parts.append(cell_prefix(styles[x]))
                parts.append(chars[x])
                dirty[x] = False
                count += 1

        if parts:
            out.write("".join(parts))
        return count

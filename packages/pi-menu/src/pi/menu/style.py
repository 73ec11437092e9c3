"""Cell styles and the ANSI escape sequences that encode them.

The sequence shapes here are part of the output contract: 24-bit SGR
foreground/background, bold and blink toggles, reset-all, the ``ESC c`` full
erase, and 1-based ``CUP`` cursor positioning.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from pi.menu.color import BLACK, WHITE, Color, hsl_to_rgb, hue_from_string

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

ESC = "\x1b"
CSI = "\x1b["

SET_BOLD = "\x1b[1m"
RESET_BOLD = "\x1b[22m"
SET_BLINKING = "\x1b[5m"
RESET_BLINKING = "\x1b[25m"
RESET_ALL = "\x1b[0m"
ERASE_CONSOLE = "\x1bc"
CURSOR_HOME = "\x1b[H"

_FOREGROUND_FMT = "\x1b[38;2;{};{};{}m"
_BACKGROUND_FMT = "\x1b[48;2;{};{};{}m"
_CURSOR_TO_FMT = "\x1b[{};{}H"


# ---------------------------------------------------------------------------
# CellStyle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CellStyle:
    """Foreground/background colors and attributes for one character cell."""

    foreground: Color = WHITE
    background: Color = BLACK
    bold: bool = False
    blinking: bool = False

    def with_foreground(self, color: Color) -> CellStyle:
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> CellStyle:
        return replace(self, background=color)

    def with_bold(self, on: bool = True) -> CellStyle:
        return replace(self, bold=on)

    def with_blinking(self, on: bool = True) -> CellStyle:
        return replace(self, blinking=on)


DEFAULT_STYLE = CellStyle()


# ---------------------------------------------------------------------------
# Sequence builders
# ---------------------------------------------------------------------------


def cursor_to(col: int, row: int) -> str:
    """Move the cursor to zero-based (*col*, *row*)."""
    return _CURSOR_TO_FMT.format(row + 1, col + 1)


def fg_sequence(color: Color) -> str:
    return _FOREGROUND_FMT.format(color.r, color.g, color.b)


def bg_sequence(color: Color) -> str:
    return _BACKGROUND_FMT.format(color.r, color.g, color.b)


def frame_prefix(style: CellStyle) -> str:
    """Style prefix for a cell inside a full frame.

    Foreground, background, then bold and blink when set.  No reset is
    emitted, so attributes from an earlier cell in the same frame may carry
    over; this mirrors the full-frame output format.
    """
    parts = [fg_sequence(style.foreground), bg_sequence(style.background)]
    if style.bold:
        parts.append(SET_BOLD)
    if style.blinking:
        parts.append(SET_BLINKING)
    return "".join(parts)


def cell_prefix(style: CellStyle) -> str:
    """Self-contained style prefix for an individually positioned cell.

    Starts with reset-all so the cell never inherits attributes from
    whatever was written before it.
    """
    parts = [RESET_ALL, fg_sequence(style.foreground), bg_sequence(style.background)]
    if style.blinking:
        parts.append(SET_BLINKING)
    if style.bold:
        parts.append(SET_BOLD)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Plain-text coloring (outside the screen buffer)
# ---------------------------------------------------------------------------


def colorize(text: str, color: Color) -> str:
    """Prefix *text* with a foreground sequence."""
    return fg_sequence(color) + text


def gradient_text(text: str, color_fn: Callable[[float], Color]) -> str:
    """Color each code point of *text* with ``color_fn(i / len(text))``.

    The result ends with reset-all.
    """
    length = len(text)
    parts: list[str] = []
    for i, ch in enumerate(text):
        parts.append(fg_sequence(color_fn(i / length)))
        parts.append(ch)
    parts.append(RESET_ALL)
    return "".join(parts)


def format_message(sender: str, message: str) -> str:
    """Render a chat-style ``<sender> message`` line.

    The sender name is bold and tinted with a hue derived from the name, so
    each sender keeps the same color across runs.
    """
    tint = hsl_to_rgb(hue_from_string(sender), 0.9, 0.69)
    return f"<{SET_BOLD}{fg_sequence(tint)}{sender}{RESET_ALL}> {message}"

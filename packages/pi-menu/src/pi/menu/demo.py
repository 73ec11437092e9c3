"""The example menu shipped with the CLI: a tiny slot machine.

Two pages: a welcome page (start, debug info, exit) and a play page whose
"Gamble" option spins three reels with ``animate`` and then shows a
centered WINNER or LOSS banner.
"""

from __future__ import annotations

import random
import time
from typing import Callable

from pi.menu.animation import animate
from pi.menu.color import Color, hsl_to_rgb
from pi.menu.compositor import draw_centered, erase
from pi.menu.glyphs import FontName, get_font
from pi.menu.gradients import rainbow_uv
from pi.menu.menu import MenuApp, Option, SubMenu
from pi.menu.screen_buffer import ScreenBuffer
from pi.menu.style import CellStyle

REEL_CHARS = "X123456789"
SUITS = "♥♦♣♠"
REEL_COLORS = [
    Color(255, 25, 25),
    Color(255, 255, 25),
    Color(60, 120, 255),
    Color(60, 255, 60),
    Color(60, 60, 255),
]
GOLD = Color(255, 215, 0)
BORDER_COLORS = [Color(25, 25, 255), Color(255, 25, 25)]
WINNING_LINES = {"321", "123", "420", "696", "969"}

_FRAME_MULTIPLIER = 3
_REEL_STOPS = [6 * _FRAME_MULTIPLIER, 12 * _FRAME_MULTIPLIER, 18 * _FRAME_MULTIPLIER]


def gold_red(x: float, y: float) -> Color:
    return hsl_to_rgb(x * y * 30.0, 1.0, 0.5)


def is_winning(reels: str) -> bool:
    """Three of a kind, or one of the lucky lines."""
    return len(set(reels)) == 1 or reels in WINNING_LINES


def _draw_suit_border(buffer: ScreenBuffer, frame: int) -> None:
    right = buffer.width - 1
    bottom = buffer.height - 1
    edges = [(x, 0) for x in range(buffer.width)] + [(x, bottom) for x in range(buffer.width)]
    edges += [(0, y) for y in range(buffer.height)] + [(right, y) for y in range(buffer.height)]
    for x, y in edges:
        style = CellStyle(foreground=BORDER_COLORS[(x + y + frame) % 2])
        buffer.set_cell(x, y, SUITS[(x + y) % len(SUITS)], style)


class SlotMachine:
    """Spins three reels inside a menu's buffer."""

    def __init__(
        self,
        rng: random.Random | None = None,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._reel_font = get_font(FontName.MONO12)
        self._spacing_glyph = get_font(FontName.ALLIGATOR2).get("A")

    def spin(self, app: MenuApp) -> str:
        """Animate one spin and show the result banner; returns the reels."""
        buffer = app.init()
        reels = ["1", "2", "3"]
        glyph_width = self._spacing_glyph.measured_width if self._spacing_glyph else 0
        glyph_height = self._spacing_glyph.measured_height if self._spacing_glyph else 0
        spacing = buffer.width // (len(reels) + 1) - glyph_width // 2
        top = buffer.height // 2 - glyph_height // 2

        def _frame(buf: ScreenBuffer, frame: int) -> None:
            for i, stop in enumerate(_REEL_STOPS):
                x = spacing * (i + 1)
                if frame <= stop:
                    erase(buf, reels[i], self._reel_font, x, top)
                    reels[i] = self._rng.choice(REEL_CHARS)
                color = GOLD if frame >= stop - 2 else self._rng.choice(REEL_COLORS)
                glyph = self._reel_font.get(reels[i])
                if glyph is None:
                    continue
                for row, line in enumerate(glyph.rows):
                    for col, ch in enumerate(line):
                        buf.set_cell(x + col, top + row, ch, CellStyle(foreground=color))
            _draw_suit_border(buf, frame)

        animate(buffer, app.terminal, _frame, _REEL_STOPS[-1], 1.0 / _REEL_STOPS[0], self._sleep)

        result = "".join(reels)
        self._sleep(1.5)
        self.show_result(app, is_winning(result))
        self._sleep(3.0)
        return result

    def show_result(self, app: MenuApp, won: bool) -> None:
        buffer = app.init()
        if won:
            font, text, color_fn = get_font(FontName.ANSI_SHADOW), "WINNER", rainbow_uv
        else:
            font, text, color_fn = get_font(FontName.BLOODY), "LOSS", gold_red
        draw_centered(buffer, text, font, buffer.width // 2, buffer.height // 2, color_fn)
        buffer.render_full(app.terminal)


def show_debug_info(app: MenuApp) -> None:
    buffer = app.ensure_buffer()
    current = app.current_submenu
    lines = [
        "Debug stuff",
        "-" * 37,
        f"Window size (in chars): height: {buffer.height}    width: {buffer.width}",
        f"Current selected menu index: {app.current_index}     name {current.name if current else '-'}",
        "-" * 37,
        f"Submenus: {len(app.submenus)}",
    ]
    for submenu in app.submenus:
        lines.append(f"Name: {submenu.name} with {len(submenu.options)} options")
        lines.extend(f"    - {option.text} -" for option in submenu.options)
    lines.append("-" * 37)
    app.show_message(lines)


def build_demo(app: MenuApp, machine: SlotMachine | None = None) -> MenuApp:
    """Populate *app* with the slot machine pages."""
    machine = machine or SlotMachine()

    welcome = SubMenu(">LASVEGAS<", title_font=get_font(FontName.ANSI_SHADOW), title_color_fn=rainbow_uv)
    welcome.add_options(
        [
            Option("Start", lambda ctx: ctx.select_submenu("PLAY")),
            Option("Debug menu", show_debug_info),
            Option("Exit", lambda ctx: ctx.exit(), color=Color(255, 25, 25)),
        ]
    )

    play = SubMenu("PLAY", title_color_fn=gold_red)
    play.add_options(
        [
            Option("Gamble", machine.spin),
            Option("Return to main menu", lambda ctx: ctx.select_submenu(0)),
        ]
    )

    app.add_submenus([welcome, play])
    return app

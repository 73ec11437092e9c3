"""Keyboard-driven menus drawn into a screen buffer.

A ``MenuApp`` owns the buffer, a list of ``SubMenu`` pages and the loop that
reads keys from a ``Terminal``.  Each page has a title (block-font glyphs or a
single gradient-colored line) and a vertical list of ``Option`` rows framed by
an ``OptionBar``.  Option callbacks receive the running ``MenuApp`` so they
can switch pages, show messages or stop the loop.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from pi.menu.color import Color
from pi.menu.compositor import ColorFunction, apply_color_overlay, blit, centered_origin_x, measure
from pi.menu.config import MenuConfig
from pi.menu.decorators import BORDERS, decorate, linear_ramp
from pi.menu.glyphs import Font, get_font
from pi.menu.gradients import GRADIENTS
from pi.menu.keybindings import MenuKeybindingsManager, get_menu_keybindings
from pi.menu.keys import KEY_DOWN, KEY_UP, Key, key_from_code
from pi.menu.screen_buffer import ScreenBuffer
from pi.menu.terminal import Terminal
from pi.menu.text import Alignment, aligned_x, text_width, write_aligned, write_text

logger = logging.getLogger(__name__)

OptionCallback = Callable[["MenuApp"], object]


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Subscription:
    """Handle returned by ``Option.subscribe``; pass it back to unsubscribe."""

    id: int


_subscription_ids = itertools.count(1)


class Option:
    """One selectable row: display text plus the callbacks run on confirm."""

    def __init__(
        self,
        text: str,
        callbacks: OptionCallback | Iterable[OptionCallback] = (),
        color: Color | None = None,
    ) -> None:
        self.text = text
        self.color = color
        self._callbacks: list[tuple[Subscription, OptionCallback]] = []
        if callable(callbacks):
            callbacks = (callbacks,)
        for callback in callbacks:
            self.subscribe(callback)

    def subscribe(self, callback: OptionCallback) -> Subscription:
        handle = Subscription(next(_subscription_ids))
        self._callbacks.append((handle, callback))
        return handle

    def unsubscribe(self, handle: Subscription) -> bool:
        """Remove the callback registered under *handle*; ``False`` if unknown."""
        for i, (registered, _) in enumerate(self._callbacks):
            if registered == handle:
                del self._callbacks[i]
                return True
        return False

    @property
    def callbacks(self) -> list[OptionCallback]:
        return [callback for _, callback in self._callbacks]

    def call(self, context: MenuApp) -> None:
        """Run every callback in subscription order.

        Exceptions raised by a callback propagate to the caller.
        """
        for _, callback in list(self._callbacks):
            callback(context)

    def __repr__(self) -> str:
        return f"Option({self.text!r}, {len(self._callbacks)} callbacks)"


@dataclass(frozen=True)
class OptionBar:
    """Decoration drawn around option rows.

    ``top`` is a line above the list, ``between_gap`` a line drawn before
    each option when ``gap`` is set.  ``color`` overrides the submenu's bar
    color when given.
    """

    top: str = ""
    before: str = ""
    after: str = ""
    selected_before: str = ""
    selected_after: str = ""
    gap: bool = False
    between_gap: str = ""
    color: Color | None = None

    def left(self, selected: bool) -> str:
        return self.selected_before if selected else self.before

    def right(self, selected: bool) -> str:
        return self.selected_after if selected else self.after


ARROW_BAR = OptionBar(
    top="-------------------",
    before="  - ",
    selected_before="  ==> ",
)

BRACKET_BAR = OptionBar(
    selected_before="< ",
    selected_after=" >",
    color=Color(255, 235, 50),
)


# ---------------------------------------------------------------------------
# SubMenu
# ---------------------------------------------------------------------------


@dataclass
class SubMenu:
    """A named page of options with its own appearance settings.

    ``title_font`` of ``None`` uses the app's configured font.
    ``title_color_fn`` paints the block-font title's bounding box and
    ``title_gradient`` colors a plain (font-less) title.
    """

    name: str
    options: list[Option] = field(default_factory=list)
    selected_color: Color = field(default_factory=lambda: Color(255, 255, 0))
    default_color: Color = field(default_factory=lambda: Color(128, 128, 128))
    bar_color: Color = field(default_factory=lambda: Color(255, 50, 255))
    bar: OptionBar = ARROW_BAR
    title_font: Font | None = None
    title_color_fn: ColorFunction | None = None
    title_gradient: Callable[[float], Color] | None = None
    title_alignment: Alignment = Alignment.CENTER
    options_alignment: Alignment = Alignment.LEFT
    selected_index: int = 0

    def add_option(self, option: Option) -> None:
        self.options.append(option)

    def add_options(self, options: Iterable[Option]) -> None:
        self.options.extend(options)

    def select_option(self, index: int) -> None:
        """Select *index*; out-of-range indices are ignored."""
        if 0 <= index < len(self.options):
            self.selected_index = index

    def increment_option(self) -> None:
        if not self.options:
            return
        self.selected_index = (self.selected_index + 1) % len(self.options)

    def decrement_option(self) -> None:
        if not self.options:
            return
        self.selected_index = (self.selected_index - 1) % len(self.options)

    @property
    def selected_option(self) -> Option | None:
        if not self.options:
            return None
        return self.options[self.selected_index]

    def call_selected(self, context: MenuApp) -> None:
        option = self.selected_option
        if option is not None:
            logger.debug("Calling option %r of %r", option.text, self.name)
            option.call(context)


# ---------------------------------------------------------------------------
# MenuApp
# ---------------------------------------------------------------------------


class MenuApp:
    """Owns the screen buffer and runs the draw / read key / dispatch loop."""

    def __init__(
        self,
        terminal: Terminal,
        submenus: Iterable[SubMenu] = (),
        config: MenuConfig | None = None,
        keybindings: MenuKeybindingsManager | None = None,
    ) -> None:
        self.terminal = terminal
        self.submenus: list[SubMenu] = list(submenus)
        self.config = config or MenuConfig()
        self._keybindings = keybindings
        self.buffer: ScreenBuffer | None = None
        self.current_index = 0
        self._running = False

    @property
    def keybindings(self) -> MenuKeybindingsManager:
        return self._keybindings or get_menu_keybindings()

    @property
    def running(self) -> bool:
        return self._running

    # -- lifecycle ----------------------------------------------------------

    def init(self) -> ScreenBuffer:
        """(Re)size the buffer from the terminal.

        Raises ``TerminalSizeUnavailable`` when the size cannot be read.
        """
        self.buffer = ScreenBuffer.for_terminal(self.terminal)
        logger.info("Menu initialized at %dx%d", self.buffer.width, self.buffer.height)
        return self.buffer

    def exit(self) -> None:
        self._running = False

    def run(self) -> None:
        """Draw, block for a key, dispatch it; repeat until ``exit()``."""
        if self.buffer is None:
            self.init()
        self.terminal.start()
        self._running = bool(self.submenus)
        try:
            while self._running:
                self.draw()
                data = self.terminal.read_key()
                if not self.handle_input(data):
                    logger.debug("Unbound key %r", data)
        finally:
            self._running = False
            self.terminal.stop()

    # -- submenus -----------------------------------------------------------

    @property
    def current_submenu(self) -> SubMenu | None:
        if not self.submenus:
            return None
        return self.submenus[self.current_index]

    def add_submenu(self, submenu: SubMenu) -> None:
        self.submenus.append(submenu)

    def add_submenus(self, submenus: Iterable[SubMenu]) -> None:
        self.submenus.extend(submenus)

    def remove_submenu(self, index: int) -> None:
        if not 0 <= index < len(self.submenus):
            return
        del self.submenus[index]
        if index < self.current_index:
            self.current_index -= 1
        elif self.current_index >= len(self.submenus):
            self.current_index = max(0, len(self.submenus) - 1)

    def clear_submenus(self) -> None:
        self.submenus.clear()
        self.current_index = 0

    def find_submenu(self, name: str) -> SubMenu | None:
        for submenu in self.submenus:
            if submenu.name == name:
                return submenu
        return None

    def select_submenu(self, target: int | str) -> None:
        """Select by index or by name (first match); unknown targets are ignored."""
        if isinstance(target, str):
            for i, submenu in enumerate(self.submenus):
                if submenu.name == target:
                    self.current_index = i
                    return
            logger.debug("No submenu named %r", target)
            return
        if 0 <= target < len(self.submenus):
            self.current_index = target

    def increment_submenu(self) -> None:
        if self.submenus:
            self.current_index = (self.current_index + 1) % len(self.submenus)

    def decrement_submenu(self) -> None:
        if self.submenus:
            self.current_index = (self.current_index - 1) % len(self.submenus)

    # -- input --------------------------------------------------------------

    def handle_input(self, data: str) -> bool:
        """Dispatch raw key input; returns ``False`` when no action is bound."""
        action = self.keybindings.action_for(data)
        if action is None:
            return False

        submenu = self.current_submenu
        if action == "selectCancel":
            self.exit()
        elif action == "nextMenu":
            self.increment_submenu()
        elif action == "previousMenu":
            self.decrement_submenu()
        elif submenu is None:
            return False
        elif action == "selectUp":
            submenu.decrement_option()
        elif action == "selectDown":
            submenu.increment_option()
        elif action == "selectConfirm":
            submenu.call_selected(self)
        return True

    def handle_key_code(self, code: int) -> bool:
        """Handle a console key code.

        Only up, down and enter are interpreted; every other code is left to
        the caller and ``False`` is returned.
        """
        submenu = self.current_submenu
        if submenu is None:
            return False
        if code == KEY_UP:
            submenu.decrement_option()
        elif code == KEY_DOWN:
            submenu.increment_option()
        elif key_from_code(code) == Key.enter:
            submenu.call_selected(self)
        else:
            return False
        return True

    # -- drawing ------------------------------------------------------------

    def ensure_buffer(self) -> ScreenBuffer:
        """The current buffer, initializing it on first use."""
        return self.buffer if self.buffer is not None else self.init()

    def _title_font(self, submenu: SubMenu) -> Font | None:
        if submenu.title_font is not None:
            return submenu.title_font
        if self.config.plain_titles:
            return None
        return get_font(self.config.font)

    def _top_padding(self) -> int:
        return self.config.top_padding + (1 if self.config.border_enabled else 0)

    def draw(self) -> None:
        """Compose the current page and output it as one full frame.

        With a border only the characters are cleared, so cell styles (bold
        from an earlier title overlay, for one) persist until overwritten.
        """
        buffer = self.ensure_buffer()
        border_enabled = self.config.border_enabled

        if border_enabled:
            buffer.clear_chars()
            decorate(buffer, BORDERS[self.config.border], linear_ramp)
        else:
            buffer.clear()

        submenu = self.current_submenu
        if submenu is not None:
            top = self._top_padding()
            row = self._draw_title(buffer, submenu, top)
            self._draw_options(buffer, submenu, row, top)

        buffer.render_full(self.terminal)

    def _draw_title(self, buffer: ScreenBuffer, submenu: SubMenu, top: int) -> int:
        """Draw the title starting at row *top*; returns the first row below it."""
        font = self._title_font(submenu)
        if font is None:
            gradient = submenu.title_gradient or GRADIENTS[self.config.gradient]
            write_aligned(buffer, top, submenu.name, submenu.title_alignment, color_fn=gradient)
            return top + 1

        metrics = measure(submenu.name, font)
        if submenu.title_alignment is Alignment.CENTER:
            x = centered_origin_x(buffer.width, metrics.width)
        else:
            x = aligned_x(buffer.width, metrics.width, submenu.title_alignment)
        box = blit(buffer, submenu.name, font, x, top)
        if submenu.title_color_fn is not None:
            apply_color_overlay(buffer, box, submenu.title_color_fn)
        return box.bottom

    def _draw_options(self, buffer: ScreenBuffer, submenu: SubMenu, row: int, left: int) -> None:
        bar = submenu.bar
        bar_style = buffer.default_style.with_foreground(bar.color or submenu.bar_color)

        if bar.top:
            write_text(buffer, self._option_x(buffer, bar.top, submenu, left), row, bar.top, bar_style)
            row += 1

        for i, option in enumerate(submenu.options):
            if bar.gap:
                write_text(
                    buffer, self._option_x(buffer, bar.between_gap, submenu, left), row, bar.between_gap, bar_style
                )
                row += 1

            selected = i == submenu.selected_index
            text_color = option.color or (submenu.selected_color if selected else submenu.default_color)
            line = bar.left(selected) + option.text + bar.right(selected)

            x = self._option_x(buffer, line, submenu, left)
            x = write_text(buffer, x, row, bar.left(selected), bar_style)
            x = write_text(buffer, x, row, option.text, buffer.default_style.with_foreground(text_color))
            write_text(buffer, x, row, bar.right(selected), bar_style)
            row += 1

    @staticmethod
    def _option_x(buffer: ScreenBuffer, line: str, submenu: SubMenu, left: int) -> int:
        if submenu.options_alignment is Alignment.LEFT:
            return left
        return aligned_x(buffer.width, text_width(line), submenu.options_alignment)

    # -- messages -----------------------------------------------------------

    def show_message(self, lines: Sequence[str], wait: bool = True) -> None:
        """Replace the screen with *lines* of plain text.

        With *wait* the call blocks until a key is pressed.
        """
        buffer = self.ensure_buffer()
        buffer.clear()
        for y, line in enumerate(lines):
            write_text(buffer, 0, y, line)
        buffer.render_full(self.terminal)
        if wait:
            self.terminal.read_key()

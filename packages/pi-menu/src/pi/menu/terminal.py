"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that reports the console size, switches stdin to cbreak mode,
reads one key at a time (blocking), and writes escape sequences to stdout.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from typing import Protocol

from pi.menu.screen_buffer import TerminalSizeUnavailable
from pi.menu.style import ERASE_CONSOLE, RESET_ALL, RESET_BLINKING, RESET_BOLD

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_SET_TITLE_FMT = "\x1b]0;{}\x07"

# Time to wait for the rest of an escape sequence after a lone ESC byte
_ESCAPE_TIMEOUT = 0.05


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def write(self, data: str) -> None: ...

    def read_key(self) -> str: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...

    def set_title(self, title: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``."""

    def __init__(self, write_log_path: str | None = None) -> None:
        self._original_termios: list | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._write_log_path: str = (
            write_log_path
            if write_log_path is not None
            else os.environ.get("PI_MENU_WRITE_LOG", "")
        )

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._size().columns

    @property
    def rows(self) -> int:
        return self._size().lines

    def _size(self) -> os.terminal_size:
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (ValueError, OSError) as exc:
            logger.error("Terminal size query failed: %s", exc)
            raise TerminalSizeUnavailable() from exc
        if size.columns < 1 or size.lines < 1:
            raise TerminalSizeUnavailable(size.columns, size.lines)
        return size

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Switch stdin to cbreak mode (no echo, no line buffering) and hide the cursor.

        Output post-processing stays on so frame newlines still return the
        carriage.
        """
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self.hide_cursor()

    def stop(self) -> None:
        """Reset attributes, show the cursor, and restore the terminal mode."""
        self._raw_write(RESET_ALL + RESET_BLINKING + RESET_BOLD)
        self.show_cursor()
        if self._original_termios is not None:
            termios.tcsetattr(
                sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios
            )
            self._original_termios = None

    # -- input --------------------------------------------------------------

    def read_key(self) -> str:
        """Block until one key is pressed and return its raw sequence.

        A lone ESC is returned as-is when nothing follows it quickly;
        otherwise the rest of the escape sequence is read with it.  Input is
        decoded incrementally, so a multi-byte UTF-8 key comes back whole.
        """
        fd = sys.stdin.fileno()
        data = ""
        while not data:
            chunk = os.read(fd, 1)
            if not chunk:
                return self._decoder.decode(b"", final=True)
            data = self._decoder.decode(chunk)
        if data == "\x1b":
            ready, _, _ = select.select([fd], [], [], _ESCAPE_TIMEOUT)
            if ready:
                data += self._decoder.decode(os.read(fd, 16))
                data += self._finish_partial(fd)
        return data

    def _finish_partial(self, fd: int) -> str:
        # Read the continuation bytes of a character split by the last read
        data = ""
        while self._decoder.getstate()[0]:
            chunk = os.read(fd, 1)
            if not chunk:
                return data + self._decoder.decode(b"", final=True)
            data += self._decoder.decode(chunk)
        return data

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError as exc:
                logger.warning("Cannot append to write log %s: %s", self._write_log_path, exc)

    def hide_cursor(self) -> None:
        self._raw_write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._raw_write(_SHOW_CURSOR)

    def clear_screen(self) -> None:
        self._raw_write(RESET_ALL + ERASE_CONSOLE)

    def set_title(self, title: str) -> None:
        self._raw_write(_SET_TITLE_FMT.format(title))

    def _raw_write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()

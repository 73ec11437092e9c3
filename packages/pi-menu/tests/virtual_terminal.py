"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``pi.menu.terminal.Terminal`` protocol without performing any real I/O.
All output is captured in a buffer for assertions and key presses are
served from a scripted queue.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from pi.menu.screen_buffer import TerminalSizeUnavailable


class VirtualTerminal:
    """In-memory terminal that records all writes for test inspection.

    Implements the ``Terminal`` protocol from ``pi.menu.terminal``.

    Parameters
    ----------
    rows:
        Number of terminal rows (height).  One row is reserved by the
        screen buffer, so a 6-row terminal yields a 5-row buffer.
    columns:
        Number of terminal columns (width).
    keys:
        Raw key sequences returned by successive ``read_key`` calls.
    """

    def __init__(self, rows: int = 24, columns: int = 80, keys: Iterable[str] = ()) -> None:
        self._rows = rows
        self._columns = columns
        self._buffer: list[str] = []
        self._keys: deque[str] = deque(keys)
        self._started = False
        self._cursor_visible = True
        self._title: str = ""
        self.size_available = True

    # -- Terminal protocol: properties --------------------------------------

    @property
    def rows(self) -> int:
        if not self.size_available:
            raise TerminalSizeUnavailable()
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        self._rows = value

    @property
    def columns(self) -> int:
        if not self.size_available:
            raise TerminalSizeUnavailable()
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        self._columns = value

    # -- Terminal protocol: lifecycle ---------------------------------------

    def start(self) -> None:
        self._started = True
        self.hide_cursor()

    def stop(self) -> None:
        self._started = False
        self.show_cursor()

    # -- Terminal protocol: input -------------------------------------------

    def read_key(self) -> str:
        """Pop the next scripted key.

        Raises ``RuntimeError`` when the script is exhausted so a test with a
        loop that never exits fails instead of hanging.
        """
        if not self._keys:
            raise RuntimeError("No more scripted keys")
        return self._keys.popleft()

    # -- Terminal protocol: output ------------------------------------------

    def write(self, data: str) -> None:
        """Append *data* to the internal buffer."""
        self._buffer.append(data)

    def hide_cursor(self) -> None:
        self._cursor_visible = False
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self._cursor_visible = True
        self.write("\x1b[?25h")

    def clear_screen(self) -> None:
        self.write("\x1b[0m\x1bc")

    def set_title(self, title: str) -> None:
        self._title = title
        self.write(f"\x1b]0;{title}\x07")

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def write_count(self) -> int:
        """Return the number of individual ``write`` calls made."""
        return len(self._buffer)

    @property
    def started(self) -> bool:
        return self._started

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    @property
    def title(self) -> str:
        return self._title

    @property
    def pending_keys(self) -> int:
        return len(self._keys)

    def clear_buffer(self) -> None:
        """Discard all recorded output."""
        self._buffer.clear()

    def queue_keys(self, *keys: str) -> None:
        """Append raw key sequences to the input script."""
        self._keys.extend(keys)

"""Bounded frame loops that repaint only what changed between frames."""

from __future__ import annotations

import logging
import time
from typing import Callable

from pi.menu.compositor import BoundingBox, centered_origin_x, draw_title, erase, measure
from pi.menu.glyphs import Font
from pi.menu.gradients import as_uv, shifting_rainbow
from pi.menu.screen_buffer import OutputStream, ScreenBuffer

logger = logging.getLogger(__name__)

FrameDrawer = Callable[[ScreenBuffer, int], object]


def animate(
    buffer: ScreenBuffer,
    out: OutputStream,
    draw_frame: FrameDrawer,
    frames: int,
    interval: float = 0.05,
    sleep: Callable[[float], object] = time.sleep,
    full_first: bool = True,
) -> int:
    """Run *frames* frames of ``draw_frame(buffer, i)`` followed by a render.

    The first frame is output with ``render_full`` when *full_first* is set,
    every other frame with ``render_dirty``.  Sleeps *interval* seconds after
    each frame.  Returns the total number of cells written.
    """
    written = 0
    for i in range(frames):
        draw_frame(buffer, i)
        if i == 0 and full_first:
            written += buffer.render_full(out)
        else:
            written += buffer.render_dirty(out)
        sleep(interval)
    logger.debug("Animated %d frames, %d cells written", frames, written)
    return written


def animate_title(
    buffer: ScreenBuffer,
    out: OutputStream,
    text: str,
    font: Font,
    frames: int = 40,
    interval: float = 0.05,
    top: int = 1,
    speed: float = 0.05,
    sleep: Callable[[float], object] = time.sleep,
) -> BoundingBox:
    """Scroll a rainbow across a centered block-font title.

    Every frame redraws and recolors only the title, so incremental renders
    after the first cover just its bounding box.
    """

    def _frame(buf: ScreenBuffer, i: int) -> None:
        draw_title(buf, text, font, top, as_uv(shifting_rainbow(i, speed)))

    animate(buffer, out, _frame, frames, interval, sleep)
    metrics = measure(text, font)
    return BoundingBox(centered_origin_x(buffer.width, metrics.width), top, metrics.width, metrics.height)


def clear_title(buffer: ScreenBuffer, text: str, font: Font, top: int = 1) -> BoundingBox:
    """Blank the cells a centered title occupies, leaving styles alone."""
    metrics = measure(text, font)
    return erase(buffer, text, font, centered_origin_x(buffer.width, metrics.width), top)

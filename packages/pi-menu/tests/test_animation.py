"""Tests for pi.menu.animation — bounded frame loops."""

from __future__ import annotations

from pi.menu.animation import animate, animate_title, clear_title
from pi.menu.compositor import BoundingBox
from pi.menu.style import CURSOR_HOME, ERASE_CONSOLE, RESET_ALL


def mark_x(buffer, i):
    buffer.set_char(i, 0, "x")


class TestAnimate:
    def test_full_first_then_dirty(self, buffer, out):
        sleeps = []
        written = animate(buffer, out, mark_x, frames=3, interval=0.1, sleep=sleeps.append)
        assert written == 50 + 1 + 1
        assert sleeps == [0.1, 0.1, 0.1]
        assert out.getvalue().count(ERASE_CONSOLE + CURSOR_HOME) == 1

    def test_dirty_only(self, buffer, out):
        written = animate(buffer, out, mark_x, frames=3, sleep=lambda s: None, full_first=False)
        assert written == 3
        assert ERASE_CONSOLE not in out.getvalue()

    def test_frame_index_passed(self, buffer, out):
        seen = []
        animate(buffer, out, lambda buf, i: seen.append(i), frames=4, sleep=lambda s: None)
        assert seen == [0, 1, 2, 3]

    def test_zero_frames(self, buffer, out):
        sleeps = []
        assert animate(buffer, out, mark_x, frames=0, sleep=sleeps.append) == 0
        assert out.getvalue() == ""
        assert sleeps == []

    def test_unchanged_frame_writes_nothing(self, buffer, out):
        written = animate(buffer, out, lambda buf, i: None, frames=3, sleep=lambda s: None)
        assert written == 50


class TestAnimateTitle:
    def test_later_frames_cover_only_the_title(self, buffer, out, tiny_font):
        marks = []
        box = animate_title(
            buffer, out, "A", tiny_font, frames=2, top=1, sleep=lambda s: marks.append(len(out.getvalue()))
        )
        assert box == BoundingBox(4, 1, 3, 2)
        second_frame = out.getvalue()[marks[0]:marks[1]]
        assert second_frame.count(RESET_ALL) == 6

    def test_colors_shift_between_frames(self, buffer, out, tiny_font):
        styles = []
        animate_title(
            buffer,
            out,
            "A",
            tiny_font,
            frames=2,
            speed=0.25,
            sleep=lambda s: styles.append(buffer.get_style(4, 1)),
        )
        assert styles[0] != styles[1]

    def test_clear_title(self, buffer, out, tiny_font):
        animate_title(buffer, out, "A", tiny_font, frames=1, sleep=lambda s: None)
        clear_title(buffer, "A", tiny_font)
        assert buffer.row_text(1) == " " * 10
        assert buffer.dirty_count == 6

"""Tests for pi.menu.color — RGB values, HSL conversion and name hashing."""

from __future__ import annotations

import math

import pytest

from pi.menu.color import BLACK, WHITE, Color, fnv1a32, hsl_to_rgb, hue_from_string


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


class TestColor:
    def test_channels(self):
        c = Color(1, 2, 3)
        assert (c.r, c.g, c.b) == (1, 2, 3)
        assert c.as_tuple() == (1, 2, 3)

    def test_constants(self):
        assert BLACK == Color(0, 0, 0)
        assert WHITE == Color(255, 255, 255)

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
    def test_out_of_range_rejected(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_float_rejected(self):
        with pytest.raises(ValueError):
            Color(1.5, 0, 0)

    def test_is_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 9  # type: ignore[misc]

    def test_hashable_and_comparable(self):
        assert {Color(1, 2, 3), Color(1, 2, 3)} == {Color(1, 2, 3)}


class TestClamped:
    def test_truncates(self):
        assert Color.clamped(127.9, 0.2, 254.99) == Color(127, 0, 254)

    def test_clamps(self):
        assert Color.clamped(-20, 300, 255) == Color(0, 255, 255)

    def test_nan_is_zero(self):
        assert Color.clamped(math.nan, 10, 10) == Color(0, 10, 10)


class TestHex:
    def test_from_hex(self):
        assert Color.from_hex("#ff8000") == Color(255, 128, 0)
        assert Color.from_hex("0a0b0c") == Color(10, 11, 12)

    def test_to_hex(self):
        assert Color(255, 128, 0).to_hex() == "#ff8000"

    @pytest.mark.parametrize("value", ["#fff", "#gg0000", ""])
    def test_invalid_hex(self, value):
        with pytest.raises(ValueError):
            Color.from_hex(value)


# ---------------------------------------------------------------------------
# HSL
# ---------------------------------------------------------------------------


class TestHslToRgb:
    @pytest.mark.parametrize(
        "hue, expected",
        [
            (0, Color(255, 0, 0)),
            (60, Color(255, 255, 0)),
            (120, Color(0, 255, 0)),
            (180, Color(0, 255, 255)),
            (240, Color(0, 0, 255)),
            (300, Color(255, 0, 255)),
        ],
    )
    def test_primary_hues(self, hue, expected):
        assert hsl_to_rgb(hue, 1.0, 0.5) == expected

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 1.0, 0.5) == hsl_to_rgb(0, 1.0, 0.5)
        assert hsl_to_rgb(720 + 120, 1.0, 0.5) == Color(0, 255, 0)

    def test_negative_hue(self):
        assert hsl_to_rgb(-120, 1.0, 0.5) == Color(0, 0, 255)

    def test_grey_rounds_half_up(self):
        # 0.5 * 255 = 127.5 -> 128
        assert hsl_to_rgb(0, 0.0, 0.5) == Color(128, 128, 128)

    def test_black_and_white(self):
        assert hsl_to_rgb(200, 1.0, 0.0) == BLACK
        assert hsl_to_rgb(200, 1.0, 1.0) == WHITE


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


class TestFnv1a32:
    def test_empty_is_offset_basis(self):
        assert fnv1a32("") == 0x811C9DC5

    @pytest.mark.parametrize(
        "text, expected",
        [("a", 0xE40C292C), ("foobar", 0xBF9CF968)],
    )
    def test_known_vectors(self, text, expected):
        assert fnv1a32(text) == expected

    def test_hashes_utf8_bytes(self):
        assert fnv1a32("é") != fnv1a32("e")


class TestHueFromString:
    def test_in_range(self):
        for name in ["alice", "bob", "", "ünïcødé"]:
            assert 0.0 <= hue_from_string(name) < 360.0

    def test_stable(self):
        assert hue_from_string("alice") == hue_from_string("alice")

    def test_matches_hash(self):
        assert hue_from_string("a") == pytest.approx(0xE40C292C / 2**32 * 360.0)

"""Mono 12 block font rendered with half-block characters."""

from __future__ import annotations

from pi.menu.glyphs import Font, Glyph

MONO12 = Font(
    "mono12",
    [
        Glyph(
            "A",
            7,
            10,
            (
                "    ▄▄    ",
                "   ████   ",
                "   ████   ",
                "  ██  ██  ",
                "  ██████  ",
                " ▄██  ██▄ ",
                " ▀▀    ▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "B",
            7,
            10,
            (
                " ▄▄▄▄▄▄   ",
                " ██▀▀▀▀██ ",
                " ██    ██ ",
                " ███████  ",
                " ██    ██ ",
                " ██▄▄▄▄██ ",
                " ▀▀▀▀▀▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "C",
            7,
            10,
            (
                "    ▄▄▄▄  ",
                "  ██▀▀▀▀█ ",
                " ██▀      ",
                " ██       ",
                " ██▄      ",
                "  ██▄▄▄▄█ ",
                "    ▀▀▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "D",
            7,
            10,
            (
                " ▄▄▄▄▄    ",
                " ██▀▀▀██  ",
                " ██    ██ ",
                " ██    ██ ",
                " ██    ██ ",
                " ██▄▄▄██  ",
                " ▀▀▀▀▀    ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "E",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄▄ ",
                " ██▀▀▀▀▀▀ ",
                " ██       ",
                " ███████  ",
                " ██       ",
                " ██▄▄▄▄▄▄ ",
                " ▀▀▀▀▀▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "F",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄▄ ",
                " ██▀▀▀▀▀▀ ",
                " ██       ",
                " ███████  ",
                " ██       ",
                " ██       ",
                " ▀▀       ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "G",
            7,
            10,
            (
                "    ▄▄▄▄  ",
                "  ██▀▀▀▀█ ",
                " ██       ",
                " ██  ▄▄▄▄ ",
                " ██  ▀▀██ ",
                "  ██▄▄▄██ ",
                "    ▀▀▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "H",
            7,
            10,
            (
                " ▄▄    ▄▄ ",
                " ██    ██ ",
                " ██    ██ ",
                " ████████ ",
                " ██    ██ ",
                " ██    ██ ",
                " ▀▀    ▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "I",
            7,
            10,
            (
                "  ▄▄▄▄▄▄  ",
                "  ▀▀██▀▀  ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "  ▄▄██▄▄  ",
                "  ▀▀▀▀▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "J",
            7,
            10,
            (
                "    ▄▄▄▄▄ ",
                "    ▀▀▀██ ",
                "       ██ ",
                "       ██ ",
                "       ██ ",
                " █▄▄▄▄▄██ ",
                "  ▀▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "K",
            7,
            10,
            (
                " ▄▄   ▄▄▄ ",
                " ██  ██▀  ",
                " ██▄██    ",
                " █████    ",
                " ██  ██▄  ",
                " ██   ██▄ ",
                " ▀▀    ▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "L",
            7,
            10,
            (
                " ▄▄       ",
                " ██       ",
                " ██       ",
                " ██       ",
                " ██       ",
                " ██▄▄▄▄▄▄ ",
                " ▀▀▀▀▀▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "M",
            7,
            10,
            (
                " ▄▄▄  ▄▄▄ ",
                " ███  ███ ",
                " ████████ ",
                " ██ ██ ██ ",
                " ██ ▀▀ ██ ",
                " ██    ██ ",
                " ▀▀    ▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "N",
            7,
            10,
            (
                " ▄▄▄   ▄▄ ",
                " ███   ██ ",
                " ██▀█  ██ ",
                " ██ ██ ██ ",
                " ██  █▄██ ",
                " ██   ███ ",
                " ▀▀   ▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "O",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "  ██▀▀██  ",
                " ██    ██ ",
                " ██    ██ ",
                " ██    ██ ",
                "  ██▄▄██  ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "P",
            7,
            10,
            (
                " ▄▄▄▄▄▄   ",
                " ██▀▀▀▀█▄ ",
                " ██    ██ ",
                " ██████▀  ",
                " ██       ",
                " ██       ",
                " ▀▀       ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "Q",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "  ██▀▀██  ",
                " ██    ██ ",
                " ██    ██ ",
                " ██    ██ ",
                "  ██▄▄██▀ ",
                "   ▀▀▀██  ",
                "       ▀  ",
                "          ",
            ),
        ),
        Glyph(
            "R",
            7,
            10,
            (
                " ▄▄▄▄▄▄   ",
                " ██▀▀▀▀██ ",
                " ██    ██ ",
                " ███████  ",
                " ██  ▀██▄ ",
                " ██    ██ ",
                " ▀▀    ▀▀▀",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "S",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                " ▄█▀▀▀▀█  ",
                " ██▄      ",
                "  ▀████▄  ",
                "      ▀██ ",
                " █▄▄▄▄▄█▀ ",
                "  ▀▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "T",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄▄ ",
                " ▀▀▀██▀▀▀ ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ▀▀    ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "U",
            7,
            10,
            (
                " ▄▄    ▄▄ ",
                " ██    ██ ",
                " ██    ██ ",
                " ██    ██ ",
                " ██    ██ ",
                " ▀██▄▄██▀ ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "V",
            7,
            10,
            (
                " ▄▄    ▄▄ ",
                " ▀██  ██▀ ",
                "  ██  ██  ",
                "  ██  ██  ",
                "   ████   ",
                "   ████   ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "W",
            7,
            10,
            (
                "▄▄      ▄▄",
                "██      ██",
                "▀█▄ ██ ▄█▀",
                " ██ ██ ██ ",
                " ███▀▀███ ",
                " ███  ███ ",
                " ▀▀▀  ▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "X",
            7,
            10,
            (
                " ▄▄▄  ▄▄▄ ",
                "  ██▄▄██  ",
                "   ████   ",
                "    ██    ",
                "   ████   ",
                "  ██  ██  ",
                " ▀▀▀  ▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "Y",
            7,
            10,
            (
                "▄▄▄    ▄▄▄",
                " ██▄  ▄██ ",
                "  ██▄▄██  ",
                "   ▀██▀   ",
                "    ██    ",
                "    ██    ",
                "    ▀▀    ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "Z",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄▄ ",
                " ▀▀▀▀▀███ ",
                "     ██▀  ",
                "   ▄██▀   ",
                "  ▄██     ",
                " ███▄▄▄▄▄ ",
                " ▀▀▀▀▀▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "1",
            7,
            10,
            (
                "   ▄▄▄    ",
                "  █▀██    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                " ▄▄▄██▄▄▄ ",
                " ▀▀▀▀▀▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "2",
            7,
            10,
            (
                "  ▄▄▄▄▄   ",
                " █▀▀▀▀██▄ ",
                "       ██ ",
                "     ▄█▀  ",
                "   ▄█▀    ",
                " ▄██▄▄▄▄▄ ",
                " ▀▀▀▀▀▀▀▀ ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "3",
            7,
            10,
            (
                "  ▄▄▄▄▄   ",
                " █▀▀▀▀██▄ ",
                "      ▄██ ",
                "   █████  ",
                "      ▀██ ",
                " █▄▄▄▄██▀ ",
                "  ▀▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "4",
            7,
            10,
            (
                "     ▄▄▄  ",
                "    ▄███  ",
                "   █▀ ██  ",
                " ▄█▀  ██  ",
                " ████████ ",
                "      ██  ",
                "      ▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "5",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄  ",
                " ██▀▀▀▀▀  ",
                " ██▄▄▄▄   ",
                " █▀▀▀▀██▄ ",
                "       ██ ",
                " █▄▄▄▄██▀ ",
                "  ▀▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "6",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "  ██▀▀▀█  ",
                " ██ ▄▄▄   ",
                " ███▀▀██▄ ",
                " ██    ██ ",
                " ▀██▄▄██▀ ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "7",
            7,
            10,
            (
                " ▄▄▄▄▄▄▄▄ ",
                " ▀▀▀▀▀███ ",
                "     ▄██  ",
                "     ██   ",
                "    ██    ",
                "   ██     ",
                "  ▀▀      ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "8",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                " ▄██▀▀██▄ ",
                " ██▄  ▄██ ",
                "  ██████  ",
                " ██▀  ▀██ ",
                " ▀██▄▄██▀ ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "9",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                " ▄██▀▀██▄ ",
                " ██    ██ ",
                " ▀██▄▄███ ",
                "   ▀▀▀ ██ ",
                "  █▄▄▄██  ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "0",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "  ██▀▀██  ",
                " ██    ██ ",
                " ██ ██ ██ ",
                " ██    ██ ",
                "  ██▄▄██  ",
                "   ▀▀▀▀   ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "!",
            7,
            10,
            (
                "    ▄▄    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ▀▀    ",
                "    ▄▄    ",
                "    ▀▀    ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "@",
            7,
            10,
            (
                "          ",
                "  ▄████▄  ",
                "▄██▀  ▀██ ",
                "██ ▄█████ ",
                "██ ██▄▄██ ",
                "▀█▄ ▀▀▀▀▀ ",
                " ▀██▄▄▄█▄ ",
                "   ▀▀▀▀▀  ",
                "          ",
            ),
        ),
        Glyph(
            "#",
            7,
            10,
            (
                "    ▄▄ ▄▄ ",
                "   ▄█  ██ ",
                " █████████",
                "  ▄█  ██  ",
                "█████████ ",
                " ▄█  ██   ",
                " ▀▀  ▀    ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "$",
            7,
            10,
            (
                "    ▄     ",
                "  ▄▄█▄▄   ",
                " ██▀█▀▀   ",
                " ▀███▄▄   ",
                "    █▀██  ",
                " █▄▄█▄██  ",
                "  ▀▀█▀▀   ",
                "    ▀     ",
                "          ",
            ),
        ),
        Glyph(
            "%",
            7,
            10,
            (
                " ▄▄▄      ",
                "█   █     ",
                "▀▄▄▄▀  ▄  ",
                "   ▄ ▀    ",
                " ▀  ▄▀▀▀▄ ",
                "    █   █ ",
                "     ▀▀▀  ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "^",
            7,
            10,
            (
                "   ▄▄▄    ",
                " ▄██▀██▄  ",
                "▀▀▀   ▀▀▀ ",
                "          ",
                "          ",
                "          ",
                "          ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "&",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "  ██▀▀▀█  ",
                "  ▀█▄     ",
                "  ████▄ ▄▄",
                " ██  ▀█▄██",
                " ▀██▄▄███ ",
                "   ▀▀▀▀▀▀▀",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "*",
            7,
            10,
            (
                "    ▄     ",
                " ▄▄ █ ▄▄  ",
                "  █████   ",
                " ▀▀ █ ▀▀  ",
                "    ▀     ",
                "          ",
                "          ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "(",
            7,
            10,
            (
                "     ▄▄   ",
                "    ██    ",
                "   ▄█▀    ",
                "   ██     ",
                "   ██     ",
                "   ▀█▄    ",
                "    ██    ",
                "     ▀▀   ",
                "          ",
            ),
        ),
        Glyph(
            ")",
            7,
            10,
            (
                "  ▄▄      ",
                "   ██     ",
                "   ▀█▄    ",
                "    ██    ",
                "    ██    ",
                "   ▄█▀    ",
                "   ██     ",
                "  ▀▀      ",
                "          ",
            ),
        ),
        Glyph(
            "[",
            7,
            10,
            (
                "   ▄▄▄▄   ",
                "   ██     ",
                "   ██     ",
                "   ██     ",
                "   ██     ",
                "   ██     ",
                "   ██     ",
                "   ▀▀▀▀   ",
                "          ",
            ),
        ),
        Glyph(
            "]",
            7,
            10,
            (
                "  ▄▄▄▄    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "    ██    ",
                "  ▀▀▀▀    ",
                "          ",
            ),
        ),
        Glyph(
            "?",
            7,
            10,
            (
                "  ▄▄▄▄▄   ",
                " █▀▀▀▀██  ",
                "     ▄█▀  ",
                "   ▄██▀   ",
                "   ██     ",
                "   ▄▄     ",
                "   ▀▀     ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            ">",
            7,
            10,
            (
                "          ",
                "          ",
                " █▄▄▄     ",
                "   ▀▀▀█▄▄ ",
                "   ▄▄▄█▀▀ ",
                " █▀▀▀     ",
                "          ",
                "          ",
                "          ",
            ),
        ),
        Glyph(
            "<",
            7,
            10,
            (
                "          ",
                "          ",
                "     ▄▄▄█ ",
                " ▄▄█▀▀▀   ",
                " ▀▀█▄▄▄   ",
                "     ▀▀▀█ ",
                "          ",
                "          ",
                "          ",
            ),
        ),
    ],
)

"""Bloody shaded block font (uppercase letters only)."""

from __future__ import annotations

from pi.menu.glyphs import Font, Glyph

BLOODY = Font(
    "bloody",
    [
        Glyph(
            "A",
            10,
            10,
            (
                " ▄▄▄      ",
                "▒████▄    ",
                "▒██  ▀█▄  ",
                "░██▄▄▄▄██ ",
                " ▓█   ▓██▒",
                " ▒▒   ▓▒█░",
                "  ▒   ▒▒ ░",
                "  ░   ▒   ",
                "      ░  ░",
                "          ",
            ),
        ),
        Glyph(
            "B",
            10,
            8,
            (
                " ▄▄▄▄   ",
                "▓█████▄ ",
                "▒██▒ ▄██",
                "▒██░█▀  ",
                "░▓█  ▀█▓",
                "░▒▓███▀▒",
                "▒░▒   ░ ",
                " ░    ░ ",
                " ░      ",
                "      ░ ",
            ),
        ),
        Glyph(
            "C",
            10,
            9,
            (
                " ▄████▄  ",
                "▒██▀ ▀█  ",
                "▒▓█    ▄ ",
                "▒▓▓▄ ▄██▒",
                "▒ ▓███▀ ░",
                "░ ░▒ ▒  ░",
                "  ░  ▒   ",
                "░        ",
                "░ ░      ",
                "░        ",
            ),
        ),
        Glyph(
            "D",
            10,
            8,
            (
                "▓█████▄ ",
                "▒██▀ ██▌",
                "░██   █▌",
                "░▓█▄   ▌",
                "░▒████▓ ",
                " ▒▒▓  ▒ ",
                " ░ ▒  ▒ ",
                " ░ ░  ░ ",
                "   ░    ",
                " ░      ",
            ),
        ),
        Glyph(
            "E",
            10,
            7,
            (
                "▓█████ ",
                "▓█   ▀ ",
                "▒███   ",
                "▒▓█  ▄ ",
                "░▒████▒",
                "░░ ▒░ ░",
                " ░ ░  ░",
                "   ░   ",
                "   ░  ░",
                "       ",
            ),
        ),
        Glyph(
            "F",
            10,
            8,
            (
                "  █████▒",
                "▓██   ▒ ",
                "▒████ ░ ",
                "░▓█▒  ░ ",
                "░▒█░    ",
                " ▒ ░    ",
                " ░      ",
                " ░ ░    ",
                "        ",
                "        ",
            ),
        ),
        Glyph(
            "G",
            10,
            8,
            (
                "  ▄████ ",
                " ██▒ ▀█▒",
                "▒██░▄▄▄░",
                "░▓█  ██▓",
                "░▒▓███▀▒",
                " ░▒   ▒ ",
                "  ░   ░ ",
                "░ ░   ░ ",
                "      ░ ",
                "        ",
            ),
        ),
        Glyph(
            "H",
            10,
            8,
            (
                " ██░ ██ ",
                "▓██░ ██▒",
                "▒██▀▀██░",
                "░▓█ ░██ ",
                "░▓█▒░██▓",
                " ▒ ░░▒░▒",
                " ▒ ░▒░ ░",
                " ░  ░░ ░",
                " ░  ░  ░",
                "        ",
            ),
        ),
        Glyph(
            "I",
            10,
            4,
            (
                " ██▓",
                "▓██▒",
                "▒██▒",
                "░██░",
                "░██░",
                "░▓  ",
                " ▒ ░",
                " ▒ ░",
                " ░  ",
                "    ",
            ),
        ),
        Glyph(
            "J",
            10,
            9,
            (
                " ▄▄▄██▀▀▀",
                "   ▒██   ",
                "   ░██   ",
                "▓██▄██▓  ",
                " ▓███▒   ",
                " ▒▓▒▒░   ",
                " ▒ ░▒░   ",
                " ░ ░ ░   ",
                " ░   ░   ",
                "         ",
            ),
        ),
        Glyph(
            "K",
            10,
            7,
            (
                " ██ ▄█▀",
                " ██▄█▒ ",
                "▓███▄░ ",
                "▓██ █▄ ",
                "▒██▒ █▄",
                "▒ ▒▒ ▓▒",
                "░ ░▒ ▒░",
                "░ ░░ ░ ",
                "░  ░   ",
                "       ",
            ),
        ),
        Glyph(
            "L",
            10,
            8,
            (
                " ██▓    ",
                "▓██▒    ",
                "▒██░    ",
                "▒██░    ",
                "░██████▒",
                "░ ▒░▓  ░",
                "░ ░ ▒  ░",
                "  ░ ░   ",
                "    ░  ░",
                "        ",
            ),
        ),
        Glyph(
            "M",
            10,
            11,
            (
                " ███▄ ▄███▓",
                "▓██▒▀█▀ ██▒",
                "▓██    ▓██░",
                "▒██    ▒██ ",
                "▒██▒   ░██▒",
                "░ ▒░   ░  ░",
                "░  ░      ░",
                "░      ░   ",
                "       ░   ",
                "           ",
            ),
        ),
        Glyph(
            "N",
            10,
            11,
            (
                " ███▄    █ ",
                " ██ ▀█   █ ",
                "▓██  ▀█ ██▒",
                "▓██▒  ▐▌██▒",
                "▒██░   ▓██░",
                "░ ▒░   ▒ ▒ ",
                "░ ░░   ░ ▒░",
                "   ░   ░ ░ ",
                "         ░ ",
                "           ",
            ),
        ),
        Glyph(
            "O",
            10,
            9,
            (
                " ▒█████  ",
                "▒██▒  ██▒",
                "▒██░  ██▒",
                "▒██   ██░",
                "░ ████▓▒░",
                "░ ▒░▒░▒░ ",
                "  ░ ▒ ▒░ ",
                "░ ░ ░ ▒  ",
                "    ░ ░  ",
                "         ",
            ),
        ),
        Glyph(
            "P",
            10,
            9,
            (
                " ██▓███  ",
                "▓██░  ██▒",
                "▓██░ ██▓▒",
                "▒██▄█▓▒ ▒",
                "▒██▒ ░  ░",
                "▒▓▒░ ░  ░",
                "░▒ ░     ",
                "░░       ",
                "         ",
                "         ",
            ),
        ),
        Glyph(
            "Q",
            10,
            9,
            (
                "  █████  ",
                "▒██▓  ██▒",
                "▒██▒  ██░",
                "░██  █▀ ░",
                "░▒███▒█▄ ",
                "░░ ▒▒░ ▒ ",
                " ░ ▒░  ░ ",
                "   ░   ░ ",
                "    ░    ",
                "         ",
            ),
        ),
        Glyph(
            "R",
            10,
            9,
            (
                " ██▀███  ",
                "▓██ ▒ ██▒",
                "▓██ ░▄█ ▒",
                "▒██▀▀█▄  ",
                "░██▓ ▒██▒",
                "░ ▒▓ ░▒▓░",
                "  ░▒ ░ ▒░",
                "  ░░   ░ ",
                "   ░     ",
                "         ",
            ),
        ),
        Glyph(
            "S",
            10,
            9,
            (
                "  ██████ ",
                "▒██    ▒ ",
                "░ ▓██▄   ",
                "  ▒   ██▒",
                "▒██████▒▒",
                "▒ ▒▓▒ ▒ ░",
                "░ ░▒  ░ ░",
                "░  ░  ░  ",
                "      ░  ",
                "         ",
            ),
        ),
        Glyph(
            "T",
            10,
            9,
            (
                "▄▄▄█████▓",
                "▓  ██▒ ▓▒",
                "▒ ▓██░ ▒░",
                "░ ▓██▓ ░ ",
                "  ▒██▒ ░ ",
                "  ▒ ░░   ",
                "    ░    ",
                "  ░      ",
                "         ",
                "         ",
            ),
        ),
        Glyph(
            "U",
            10,
            9,
            (
                " █    ██ ",
                " ██  ▓██▒",
                "▓██  ▒██░",
                "▓▓█  ░██░",
                "▒▒█████▓ ",
                "░▒▓▒ ▒ ▒ ",
                "░░▒░ ░ ░ ",
                " ░░░ ░ ░ ",
                "   ░     ",
                "         ",
            ),
        ),
        Glyph(
            "V",
            10,
            9,
            (
                " ██▒   █▓",
                "▓██░   █▒",
                " ▓██  █▒░",
                "  ▒██ █░░",
                "   ▒▀█░  ",
                "   ░ ▐░  ",
                "   ░ ░░  ",
                "     ░░  ",
                "      ░  ",
                "     ░   ",
            ),
        ),
        Glyph(
            "W",
            10,
            9,
            (
                " █     █░",
                "▓█░ █ ░█░",
                "▒█░ █ ░█ ",
                "░█░ █ ░█ ",
                "░░██▒██▓ ",
                "░ ▓░▒ ▒  ",
                "  ▒ ░ ░  ",
                "  ░   ░  ",
                "    ░    ",
                "         ",
            ),
        ),
        Glyph(
            "X",
            10,
            9,
            (
                "▒██   ██▒",
                "▒▒ █ █ ▒░",
                "░░  █   ░",
                " ░ █ █ ▒ ",
                "▒██▒ ▒██▒",
                "▒▒ ░ ░▓ ░",
                "░░   ░▒ ░",
                " ░    ░  ",
                " ░    ░  ",
                "         ",
            ),
        ),
        Glyph(
            "Y",
            10,
            9,
            (
                "▓██   ██▓",
                " ▒██  ██▒",
                "  ▒██ ██░",
                "  ░ ▐██▓░",
                "  ░ ██▒▓░",
                "   ██▒▒▒ ",
                " ▓██ ░▒░ ",
                " ▒ ▒ ░░  ",
                " ░ ░     ",
                " ░ ░     ",
            ),
        ),
        Glyph(
            "Z",
            10,
            9,
            (
                "▒███████▒",
                "▒ ▒ ▒ ▄▀░",
                "░ ▒ ▄▀▒░ ",
                "  ▄▀▒   ░",
                "▒███████▒",
                "░▒▒ ▓░▒░▒",
                "░░▒ ▒ ░ ▒",
                "░ ░ ░ ░ ░",
                "  ░ ░    ",
                "░        ",
            ),
        ),
    ],
)

"""ANSI Shadow box-drawing font."""

from __future__ import annotations

from pi.menu.glyphs import Font, Glyph

ANSI_SHADOW = Font(
    "ansi_shadow",
    [
        Glyph(
            "A",
            7,
            8,
            (
                " █████╗ ",
                "██╔══██╗",
                "███████║",
                "██╔══██║",
                "██║  ██║",
                "╚═╝  ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "B",
            7,
            8,
            (
                "██████╗ ",
                "██╔══██╗",
                "██████╔╝",
                "██╔══██╗",
                "██████╔╝",
                "╚═════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "C",
            7,
            8,
            (
                " ██████╗",
                "██╔════╝",
                "██║     ",
                "██║     ",
                "╚██████╗",
                " ╚═════╝",
                "        ",
            ),
        ),
        Glyph(
            "D",
            7,
            8,
            (
                "██████╗ ",
                "██╔══██╗",
                "██║  ██║",
                "██║  ██║",
                "██████╔╝",
                "╚═════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "E",
            7,
            8,
            (
                "███████╗",
                "██╔════╝",
                "█████╗  ",
                "██╔══╝  ",
                "███████╗",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "F",
            7,
            8,
            (
                "███████╗",
                "██╔════╝",
                "█████╗  ",
                "██╔══╝  ",
                "██║     ",
                "╚═╝     ",
                "        ",
            ),
        ),
        Glyph(
            "G",
            7,
            9,
            (
                " ██████╗ ",
                "██╔════╝ ",
                "██║  ███╗",
                "██║   ██║",
                "╚██████╔╝",
                " ╚═════╝ ",
                "         ",
            ),
        ),
        Glyph(
            "H",
            7,
            8,
            (
                "██╗  ██╗",
                "██║  ██║",
                "███████║",
                "██╔══██║",
                "██║  ██║",
                "╚═╝  ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "I",
            7,
            3,
            (
                "██╗",
                "██║",
                "██║",
                "██║",
                "██║",
                "╚═╝",
                "   ",
            ),
        ),
        Glyph(
            "J",
            7,
            8,
            (
                "     ██╗",
                "     ██║",
                "     ██║",
                "██   ██║",
                "╚█████╔╝",
                " ╚════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "K",
            7,
            8,
            (
                "██╗  ██╗",
                "██║ ██╔╝",
                "█████╔╝ ",
                "██╔═██╗ ",
                "██║  ██╗",
                "╚═╝  ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "L",
            7,
            8,
            (
                "██╗     ",
                "██║     ",
                "██║     ",
                "██║     ",
                "███████╗",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "M",
            7,
            11,
            (
                "███╗   ███╗",
                "████╗ ████║",
                "██╔████╔██║",
                "██║╚██╔╝██║",
                "██║ ╚═╝ ██║",
                "╚═╝     ╚═╝",
                "           ",
            ),
        ),
        Glyph(
            "N",
            7,
            10,
            (
                "███╗   ██╗",
                "████╗  ██║",
                "██╔██╗ ██║",
                "██║╚██╗██║",
                "██║ ╚████║",
                "╚═╝  ╚═══╝",
                "          ",
            ),
        ),
        Glyph(
            "O",
            7,
            9,
            (
                " ██████╗ ",
                "██╔═══██╗",
                "██║   ██║",
                "██║   ██║",
                "╚██████╔╝",
                " ╚═════╝ ",
                "         ",
            ),
        ),
        Glyph(
            "P",
            7,
            8,
            (
                "██████╗ ",
                "██╔══██╗",
                "██████╔╝",
                "██╔═══╝ ",
                "██║     ",
                "╚═╝     ",
                "        ",
            ),
        ),
        Glyph(
            "Q",
            7,
            9,
            (
                " ██████╗ ",
                "██╔═══██╗",
                "██║   ██║",
                "██║▄▄ ██║",
                "╚██████╔╝",
                " ╚══▀▀═╝ ",
                "         ",
            ),
        ),
        Glyph(
            "R",
            7,
            8,
            (
                "██████╗ ",
                "██╔══██╗",
                "██████╔╝",
                "██╔══██╗",
                "██║  ██║",
                "╚═╝  ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "S",
            7,
            8,
            (
                "███████╗",
                "██╔════╝",
                "███████╗",
                "╚════██║",
                "███████║",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "T",
            7,
            9,
            (
                "████████╗",
                "╚══██╔══╝",
                "   ██║   ",
                "   ██║   ",
                "   ██║   ",
                "   ╚═╝   ",
                "         ",
            ),
        ),
        Glyph(
            "U",
            7,
            9,
            (
                "██╗   ██╗",
                "██║   ██║",
                "██║   ██║",
                "██║   ██║",
                "╚██████╔╝",
                " ╚═════╝ ",
                "         ",
            ),
        ),
        Glyph(
            "V",
            7,
            9,
            (
                "██╗   ██╗",
                "██║   ██║",
                "██║   ██║",
                "╚██╗ ██╔╝",
                " ╚████╔╝ ",
                "  ╚═══╝  ",
                "         ",
            ),
        ),
        Glyph(
            "W",
            7,
            10,
            (
                "██╗    ██╗",
                "██║    ██║",
                "██║ █╗ ██║",
                "██║███╗██║",
                "╚███╔███╔╝",
                " ╚══╝╚══╝ ",
                "          ",
            ),
        ),
        Glyph(
            "X",
            7,
            8,
            (
                "██╗  ██╗",
                "╚██╗██╔╝",
                " ╚███╔╝ ",
                " ██╔██╗ ",
                "██╔╝ ██╗",
                "╚═╝  ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "Y",
            7,
            9,
            (
                "██╗   ██╗",
                "╚██╗ ██╔╝",
                " ╚████╔╝ ",
                "  ╚██╔╝  ",
                "   ██║   ",
                "   ╚═╝   ",
                "         ",
            ),
        ),
        Glyph(
            "Z",
            7,
            8,
            (
                "███████╗",
                "╚══███╔╝",
                "  ███╔╝ ",
                " ███╔╝  ",
                "███████╗",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "1",
            7,
            4,
            (
                " ██╗",
                "███║",
                "╚██║",
                " ██║",
                " ██║",
                " ╚═╝",
                "    ",
            ),
        ),
        Glyph(
            "2",
            7,
            8,
            (
                "██████╗ ",
                "╚════██╗",
                " █████╔╝",
                "██╔═══╝ ",
                "███████╗",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "3",
            7,
            8,
            (
                "██████╗ ",
                "╚════██╗",
                " █████╔╝",
                " ╚═══██╗",
                "██████╔╝",
                "╚═════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "4",
            7,
            8,
            (
                "██╗  ██╗",
                "██║  ██║",
                "███████║",
                "╚════██║",
                "     ██║",
                "     ╚═╝",
                "        ",
            ),
        ),
        Glyph(
            "5",
            7,
            8,
            (
                "███████╗",
                "██╔════╝",
                "███████╗",
                "╚════██║",
                "███████║",
                "╚══════╝",
                "        ",
            ),
        ),
        Glyph(
            "6",
            7,
            9,
            (
                " ██████╗ ",
                "██╔════╝ ",
                "███████╗ ",
                "██╔═══██╗",
                "╚██████╔╝",
                " ╚═════╝ ",
                "         ",
            ),
        ),
        Glyph(
            "7",
            7,
            8,
            (
                "███████╗",
                "╚════██║",
                "    ██╔╝",
                "   ██╔╝ ",
                "   ██║  ",
                "   ╚═╝  ",
                "        ",
            ),
        ),
        Glyph(
            "8",
            7,
            8,
            (
                " █████╗ ",
                "██╔══██╗",
                "╚█████╔╝",
                "██╔══██╗",
                "╚█████╔╝",
                " ╚════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "9",
            7,
            8,
            (
                " █████╗ ",
                "██╔══██╗",
                "╚██████║",
                " ╚═══██║",
                " █████╔╝",
                " ╚════╝ ",
                "        ",
            ),
        ),
        Glyph(
            "0",
            7,
            9,
            (
                " ██████╗ ",
                "██╔═████╗",
                "██║██╔██║",
                "████╔╝██║",
                "╚██████╔╝",
                " ╚═════╝ ",
                "         ",
            ),
        ),
        Glyph(
            "!",
            7,
            3,
            (
                "██╗",
                "██║",
                "██║",
                "╚═╝",
                "██╗",
                "╚═╝",
                "   ",
            ),
        ),
        Glyph(
            "@",
            7,
            9,
            (
                " ██████╗ ",
                "██╔═══██╗",
                "██║██╗██║",
                "██║██║██║",
                "╚█║████╔╝",
                " ╚╝╚═══╝ ",
                "         ",
            ),
        ),
        Glyph(
            "#",
            7,
            9,
            (
                " ██╗ ██╗ ",
                "████████╗",
                "╚██╔═██╔╝",
                "████████╗",
                "╚██╔═██╔╝",
                " ╚═╝ ╚═╝ ",
                "         ",
            ),
        ),
        Glyph(
            "$",
            7,
            8,
            (
                "▄▄███▄▄·",
                "██╔════╝",
                "███████╗",
                "╚════██║",
                "███████║",
                "╚═▀▀▀══╝",
                "        ",
            ),
        ),
        Glyph(
            "%",
            7,
            7,
            (
                "██╗ ██╗",
                "╚═╝██╔╝",
                "  ██╔╝ ",
                " ██╔╝  ",
                "██╔╝██╗",
                "╚═╝ ╚═╝",
                "       ",
            ),
        ),
        Glyph(
            "^",
            7,
            6,
            (
                " ███╗ ",
                "██╔██╗",
                "╚═╝╚═╝",
                "      ",
                "      ",
                "      ",
                "      ",
            ),
        ),
        Glyph(
            "&",
            7,
            9,
            (
                "   ██╗   ",
                "   ██║   ",
                "████████╗",
                "██╔═██╔═╝",
                "██████║  ",
                "╚═════╝  ",
                "         ",
            ),
        ),
        Glyph(
            "*",
            7,
            6,
            (
                "      ",
                "▄ ██╗▄",
                " ████╗",
                "▀╚██╔▀",
                "  ╚═╝ ",
                "      ",
                "      ",
            ),
        ),
        Glyph(
            "(",
            7,
            4,
            (
                " ██╗",
                "██╔╝",
                "██║ ",
                "██║ ",
                "╚██╗",
                " ╚═╝",
                "    ",
            ),
        ),
        Glyph(
            ")",
            7,
            4,
            (
                "██╗ ",
                "╚██╗",
                " ██║",
                " ██║",
                "██╔╝",
                "╚═╝ ",
                "    ",
            ),
        ),
        Glyph(
            "[",
            7,
            4,
            (
                "███╗",
                "██╔╝",
                "██║ ",
                "██║ ",
                "███╗",
                "╚══╝",
                "    ",
            ),
        ),
        Glyph(
            "]",
            7,
            4,
            (
                "███╗",
                "╚██║",
                " ██║",
                " ██║",
                "███║",
                "╚══╝",
                "    ",
            ),
        ),
        Glyph(
            "?",
            7,
            8,
            (
                "██████╗ ",
                "╚════██╗",
                "  ▄███╔╝",
                "  ▀▀══╝ ",
                "  ██╗   ",
                "  ╚═╝   ",
                "        ",
            ),
        ),
        Glyph(
            ">",
            7,
            5,
            (
                "██╗  ",
                "╚██╗ ",
                " ╚██╗",
                " ██╔╝",
                "██╔╝ ",
                "╚═╝  ",
                "     ",
            ),
        ),
        Glyph(
            "<",
            7,
            5,
            (
                "  ██╗",
                " ██╔╝",
                "██╔╝ ",
                "╚██╗ ",
                " ╚██╗",
                "  ╚═╝",
                "     ",
            ),
        ),
    ],
)

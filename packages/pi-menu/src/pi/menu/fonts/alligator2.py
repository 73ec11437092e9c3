"""Alligator2 font drawn with ``:``, ``+`` and ``#`` strokes."""

from __future__ import annotations

from pi.menu.glyphs import Font, Glyph

ALLIGATOR2 = Font(
    "alligator2",
    [
        Glyph(
            "A",
            7,
            12,
            (
                "    :::     ",
                "  :+: :+:   ",
                " +:+   +:+  ",
                "+#++:++#++: ",
                "+#+     +#+ ",
                "#+#     #+# ",
                "###     ### ",
            ),
        ),
        Glyph(
            "B",
            7,
            11,
            (
                ":::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#++:++#+  ",
                "+#+    +#+ ",
                "#+#    #+# ",
                "#########  ",
            ),
        ),
        Glyph(
            "C",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+        ",
                "+#+        ",
                "+#+        ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "D",
            7,
            11,
            (
                ":::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#+    +:+ ",
                "+#+    +#+ ",
                "#+#    #+# ",
                "#########  ",
            ),
        ),
        Glyph(
            "E",
            7,
            11,
            (
                ":::::::::: ",
                ":+:        ",
                "+:+        ",
                "+#++:++#   ",
                "+#+        ",
                "#+#        ",
                "########## ",
            ),
        ),
        Glyph(
            "F",
            7,
            10,
            (
                "::::::::::",
                ":+:       ",
                "+:+       ",
                ":#::+::#  ",
                "+#+       ",
                "#+#       ",
                "###       ",
            ),
        ),
        Glyph(
            "G",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+        ",
                ":#:        ",
                "+#+   +#+# ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "H",
            7,
            11,
            (
                ":::    ::: ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#++:++#++ ",
                "+#+    +#+ ",
                "#+#    #+# ",
                "###    ### ",
            ),
        ),
        Glyph(
            "I",
            7,
            12,
            (
                "::::::::::: ",
                "    :+:     ",
                "    +:+     ",
                "    +#+     ",
                "    +#+     ",
                "    #+#     ",
                "########### ",
            ),
        ),
        Glyph(
            "J",
            7,
            12,
            (
                "::::::::::: ",
                "    :+:     ",
                "    +:+     ",
                "    +#+     ",
                "    +#+     ",
                "#+# #+#     ",
                " #####      ",
            ),
        ),
        Glyph(
            "K",
            7,
            11,
            (
                ":::    ::: ",
                ":+:   :+:  ",
                "+:+  +:+   ",
                "+#++:++    ",
                "+#+  +#+   ",
                "#+#   #+#  ",
                "###    ### ",
            ),
        ),
        Glyph(
            "L",
            7,
            11,
            (
                ":::        ",
                ":+:        ",
                "+:+        ",
                "+#+        ",
                "+#+        ",
                "#+#        ",
                "########## ",
            ),
        ),
        Glyph(
            "M",
            7,
            14,
            (
                "::::    ::::  ",
                "+:+:+: :+:+:+ ",
                "+:+ +:+:+ +:+ ",
                "+#+  +:+  +#+ ",
                "+#+       +#+ ",
                "#+#       #+# ",
                "###       ### ",
            ),
        ),
        Glyph(
            "N",
            7,
            12,
            (
                "::::    ::: ",
                ":+:+:   :+: ",
                ":+:+:+  +:+ ",
                "+#+ +:+ +#+ ",
                "+#+  +#+#+# ",
                "#+#   #+#+# ",
                "###    #### ",
            ),
        ),
        Glyph(
            "O",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#+    +:+ ",
                "+#+    +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "P",
            7,
            11,
            (
                ":::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#++:++#+  ",
                "+#+        ",
                "#+#        ",
                "###        ",
            ),
        ),
        Glyph(
            "Q",
            7,
            12,
            (
                " ::::::::   ",
                ":+:    :+:  ",
                "+:+    +:+  ",
                "+#+    +:+  ",
                "+#+  # +#+  ",
                "#+#   +#+   ",
                " ###### ### ",
            ),
        ),
        Glyph(
            "R",
            7,
            11,
            (
                ":::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#++:++#:  ",
                "+#+    +#+ ",
                "#+#    #+# ",
                "###    ### ",
            ),
        ),
        Glyph(
            "S",
            7,
            10,
            (
                " :::::::: ",
                ":+:    :+:",
                "+:+       ",
                "+#++:++#++",
                "       +#+",
                "#+#    #+#",
                " ######## ",
            ),
        ),
        Glyph(
            "T",
            7,
            12,
            (
                "::::::::::: ",
                "    :+:     ",
                "    +:+     ",
                "    +#+     ",
                "    +#+     ",
                "    #+#     ",
                "    ###     ",
            ),
        ),
        Glyph(
            "U",
            7,
            11,
            (
                ":::    ::: ",
                ":+:    :+: ",
                "+:+    +:+ ",
                "+#+    +:+ ",
                "+#+    +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "V",
            7,
            12,
            (
                ":::     ::: ",
                ":+:     :+: ",
                "+:+     +:+ ",
                "+#+     +:+ ",
                " +#+   +#+  ",
                "  #+#+#+#   ",
                "    ###     ",
            ),
        ),
        Glyph(
            "W",
            7,
            14,
            (
                ":::       ::: ",
                ":+:       :+: ",
                "+:+       +:+ ",
                "+#+  +:+  +#+ ",
                "+#+ +#+#+ +#+ ",
                " #+#+# #+#+#  ",
                "  ###   ###   ",
            ),
        ),
        Glyph(
            "X",
            7,
            11,
            (
                ":::    ::: ",
                ":+:    :+: ",
                " +:+  +:+  ",
                "  +#++:+   ",
                " +#+  +#+  ",
                "#+#    #+# ",
                "###    ### ",
            ),
        ),
        Glyph(
            "Y",
            7,
            10,
            (
                ":::   ::: ",
                ":+:   :+: ",
                " +:+ +:+  ",
                "  +#++:   ",
                "   +#+    ",
                "   #+#    ",
                "   ###    ",
            ),
        ),
        Glyph(
            "Z",
            7,
            10,
            (
                "::::::::: ",
                "     :+:  ",
                "    +:+   ",
                "   +#+    ",
                "  +#+     ",
                " #+#      ",
                "######### ",
            ),
        ),
        Glyph(
            "1",
            7,
            8,
            (
                "  :::   ",
                ":+:+:   ",
                "  +:+   ",
                "  +#+   ",
                "  +#+   ",
                "  #+#   ",
                "####### ",
            ),
        ),
        Glyph(
            "2",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "      +:+  ",
                "    +#+    ",
                "  +#+      ",
                " #+#       ",
                "########## ",
            ),
        ),
        Glyph(
            "3",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "       +:+ ",
                "    +#++:  ",
                "       +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "4",
            7,
            11,
            (
                "    :::    ",
                "   :+:     ",
                "  +:+ +:+  ",
                " +#+  +:+  ",
                "+#+#+#+#+#+",
                "      #+#  ",
                "      ###  ",
            ),
        ),
        Glyph(
            "5",
            7,
            11,
            (
                ":::::::::: ",
                ":+:    :+: ",
                "+:+        ",
                "+#++:++#+  ",
                "       +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "6",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+        ",
                "+#++:++#+  ",
                "+#+    +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "7",
            7,
            12,
            (
                "::::::::::: ",
                ":+:     :+: ",
                "       +:+  ",
                "      +#+   ",
                "     +#+    ",
                "    #+#     ",
                "    ###     ",
            ),
        ),
        Glyph(
            "8",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                " +#++:++#  ",
                "+#+    +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "9",
            7,
            11,
            (
                " ::::::::  ",
                ":+:    :+: ",
                "+:+    +:+ ",
                " +#++:++#+ ",
                "       +#+ ",
                "#+#    #+# ",
                " ########  ",
            ),
        ),
        Glyph(
            "0",
            7,
            10,
            (
                " :::::::  ",
                ":+:   :+: ",
                "+:+  :+:+ ",
                "+#+ + +:+ ",
                "+#+#  +#+ ",
                "#+#   #+# ",
                " #######  ",
            ),
        ),
        Glyph(
            "!",
            7,
            4,
            (
                "::: ",
                ":+: ",
                "+:+ ",
                "+#+ ",
                "+#+ ",
                "    ",
                "### ",
            ),
        ),
        Glyph(
            "@",
            7,
            18,
            (
                "   :::::::::::    ",
                " :+: :+:+:+:+:+:  ",
                "+:+ +:+   +:+ +:+ ",
                "+#+ +:+   +#+ +:+ ",
                "+#+ +#+   +#+ +#+ ",
                " #+# #+#+#+#+#+   ",
                "   #####          ",
            ),
        ),
        Glyph(
            "#",
            7,
            16,
            (
                "   :::   :::    ",
                "   :+:   :+:    ",
                "+:+:+:+:+:+:+:+ ",
                "   +#+   +:+    ",
                "+#+#+#+#+#+#+#+ ",
                "   #+#   #+#    ",
                "   ###   ###    ",
            ),
        ),
        Glyph(
            "$",
            7,
            12,
            (
                "     :::    ",
                "  :+:+:+:+: ",
                "+:+  +:+    ",
                "  +#++:++#+ ",
                "     +#+ +#+",
                "  #+#+#+#+# ",
                "     ###    ",
            ),
        ),
        Glyph(
            "%",
            7,
            15,
            (
                ":::   :::      ",
                ":+:   :+:      ",
                "      +:+      ",
                "      +#+      ",
                "      +#+      ",
                "      #+#   #+#",
                "      ###   ###",
            ),
        ),
        Glyph(
            "^",
            7,
            11,
            (
                "    :::    ",
                "  :+: :+:  ",
                "+:+     +:+",
                "           ",
                "           ",
                "           ",
                "           ",
            ),
        ),
        Glyph(
            "&",
            7,
            13,
            (
                " :::::::     ",
                ":+:   :+:    ",
                " +:+ +:+     ",
                "  +#++:  ++# ",
                " +#+ +#+#+#  ",
                "#+#   #+#+   ",
                " ##########  ",
            ),
        ),
        Glyph(
            "*",
            7,
            14,
            (
                "              ",
                " :+:     :+:  ",
                "   +:+ +:+    ",
                "+#++:++#++:++ ",
                "   +#+ +#+    ",
                " #+#     #+#  ",
                "              ",
            ),
        ),
        Glyph(
            "(",
            7,
            6,
            (
                "  ::: ",
                " :+:  ",
                "+:+   ",
                "+#+   ",
                "+#+   ",
                " #+#  ",
                "  ### ",
            ),
        ),
        Glyph(
            ")",
            7,
            6,
            (
                ":::   ",
                " :+:  ",
                "  +:+ ",
                "  +#+ ",
                "  +#+ ",
                " #+#  ",
                "###   ",
            ),
        ),
        Glyph(
            "[",
            7,
            7,
            (
                ":::::: ",
                ":+:    ",
                "+:+    ",
                "+#+    ",
                "+#+    ",
                "#+#    ",
                "###### ",
            ),
        ),
        Glyph(
            "]",
            7,
            7,
            (
                ":::::: ",
                "   :+: ",
                "   +:+ ",
                "   +#+ ",
                "   +#+ ",
                "   #+# ",
                "###### ",
            ),
        ),
        Glyph(
            "?",
            7,
            11,
            (
                " ::::::::: ",
                ":+:     :+:",
                "       +:+ ",
                "      +#+  ",
                "    +#+    ",
                "           ",
                "    ###   #",
            ),
        ),
        Glyph(
            ">",
            7,
            7,
            (
                ":::    ",
                " :+:   ",
                "  +:+  ",
                "   +#+ ",
                "  +#+  ",
                " #+#   ",
                "##     ",
            ),
        ),
        Glyph(
            "<",
            7,
            7,
            (
                "   ::: ",
                "  :+:  ",
                " +:+   ",
                "+#+    ",
                " +#+   ",
                "  #+#  ",
                "   ### ",
            ),
        ),
    ],
)

"""Built-in block fonts."""

from pi.menu.fonts.alligator2 import ALLIGATOR2
from pi.menu.fonts.ansi_shadow import ANSI_SHADOW
from pi.menu.fonts.bloody import BLOODY
from pi.menu.fonts.mono12 import MONO12

__all__ = [
    "ALLIGATOR2",
    "ANSI_SHADOW",
    "BLOODY",
    "MONO12",
]

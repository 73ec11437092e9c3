import io

import pytest

from pi.menu.glyphs import Font, Glyph
from pi.menu.keybindings import MenuKeybindingsManager, get_menu_keybindings, set_menu_keybindings
from pi.menu.screen_buffer import ScreenBuffer


@pytest.fixture
def tiny_font():
    """A two-glyph font with known shapes.

    'A' is the 2-row, 3-column glyph; 'B' has ragged rows and a declared
    size that disagrees with them.
    """
    return Font(
        "tiny",
        [
            Glyph("A", 3, 2, ("/-\\", "|-|")),
            Glyph("B", 9, 9, ("BB", "B", "BBB")),
        ],
    )


@pytest.fixture
def buffer():
    """A clean 10x5 screen buffer."""
    return ScreenBuffer(10, 5)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture(autouse=True)
def _restore_keybindings():
    original = get_menu_keybindings()
    set_menu_keybindings(MenuKeybindingsManager())
    yield
    set_menu_keybindings(original)

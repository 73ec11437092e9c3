"""pi-menu: Block-font banners and keyboard-driven menus with diffed terminal rendering."""

# Animation
from pi.menu.animation import animate, animate_title, clear_title

# Colors
from pi.menu.color import BLACK, WHITE, Color, fnv1a32, hsl_to_rgb, hue_from_string

# Glyph compositor
from pi.menu.compositor import (
    BoundingBox,
    ColorFunction,
    TextMetrics,
    apply_color_overlay,
    blit,
    centered_origin_x,
    draw_centered,
    draw_text,
    draw_title,
    erase,
    measure,
)

# Configuration
from pi.menu.config import MenuConfig, load_config, save_config

# Borders and background gradients
from pi.menu.decorators import (
    BORDERS,
    DOUBLE_BORDER,
    ROUNDED_BORDER,
    SINGLE_BORDER,
    BorderStyle,
    add_border,
    decorate,
    fill_gradient,
    linear_ramp,
)

# Fonts
from pi.menu.glyphs import DEFAULT_FONT, Font, FontName, Glyph, available_fonts, get_font

# Gradients
from pi.menu.gradients import (
    GRADIENTS,
    as_uv,
    blue_to_purple,
    default_gradient,
    rainbow,
    rainbow_uv,
    shifting_rainbow,
    sine_rainbow,
)

# Keybindings
from pi.menu.keybindings import (
    DEFAULT_MENU_KEYBINDINGS,
    MenuAction,
    MenuKeybindingsManager,
    get_menu_keybindings,
    set_menu_keybindings,
)

# Keyboard input handling
from pi.menu.keys import Key, KeyId, key_from_code, matches_key, parse_key

# Menus
from pi.menu.menu import ARROW_BAR, BRACKET_BAR, MenuApp, Option, OptionBar, SubMenu, Subscription

# Screen buffer
from pi.menu.screen_buffer import OutputStream, ScreenBuffer, TerminalSizeUnavailable

# Cell styles and escape sequences
from pi.menu.style import DEFAULT_STYLE, CellStyle, format_message, gradient_text

# Terminal interface and implementation
from pi.menu.terminal import ProcessTerminal, Terminal

# Plain text
from pi.menu.text import Alignment, text_width, write_aligned, write_text

__all__ = [
    # Animation
    "animate",
    "animate_title",
    "clear_title",
    # Colors
    "BLACK",
    "WHITE",
    "Color",
    "fnv1a32",
    "hsl_to_rgb",
    "hue_from_string",
    # Compositor
    "BoundingBox",
    "ColorFunction",
    "TextMetrics",
    "apply_color_overlay",
    "blit",
    "centered_origin_x",
    "draw_centered",
    "draw_text",
    "draw_title",
    "erase",
    "measure",
    # Config
    "MenuConfig",
    "load_config",
    "save_config",
    # Decorators
    "BORDERS",
    "DOUBLE_BORDER",
    "ROUNDED_BORDER",
    "SINGLE_BORDER",
    "BorderStyle",
    "add_border",
    "decorate",
    "fill_gradient",
    "linear_ramp",
    # Fonts
    "DEFAULT_FONT",
    "Font",
    "FontName",
    "Glyph",
    "available_fonts",
    "get_font",
    # Gradients
    "GRADIENTS",
    "as_uv",
    "blue_to_purple",
    "default_gradient",
    "rainbow",
    "rainbow_uv",
    "shifting_rainbow",
    "sine_rainbow",
    # Keybindings
    "DEFAULT_MENU_KEYBINDINGS",
    "MenuAction",
    "MenuKeybindingsManager",
    "get_menu_keybindings",
    "set_menu_keybindings",
    # Keys
    "Key",
    "KeyId",
    "key_from_code",
    "matches_key",
    "parse_key",
    # Menus
    "ARROW_BAR",
    "BRACKET_BAR",
    "MenuApp",
    "Option",
    "OptionBar",
    "SubMenu",
    "Subscription",
    # Screen buffer
    "OutputStream",
    "ScreenBuffer",
    "TerminalSizeUnavailable",
    # Style
    "DEFAULT_STYLE",
    "CellStyle",
    "format_message",
    "gradient_text",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Text
    "Alignment",
    "text_width",
    "write_aligned",
    "write_text",
]

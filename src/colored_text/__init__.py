from colored_text._cli import main
from colored_text._color import Color, ColorValue, Rgb, hsl_to_rgb, named_color, parse_hex
from colored_text._style import RESET, Decoration, StyledText, colorize, style
from colored_text._term import (
    no_color_requested,
    reset_terminal_check,
    set_terminal_check,
    should_colorize,
    terminal_check,
    terminal_check_enabled,
)

__all__ = [
    "RESET",
    "Color",
    "ColorValue",
    "Decoration",
    "Rgb",
    "StyledText",
    "colorize",
    "hsl_to_rgb",
    "main",
    "named_color",
    "no_color_requested",
    "parse_hex",
    "reset_terminal_check",
    "set_terminal_check",
    "should_colorize",
    "style",
    "terminal_check",
    "terminal_check_enabled",
]

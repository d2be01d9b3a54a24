from __future__ import annotations

import dataclasses
import enum
import sys
from typing import IO, Any

from colored_text._color import Color, ColorValue, Rgb, hsl_to_rgb, named_color, parse_hex
from colored_text._term import no_color_requested, should_colorize

RESET = "\x1b[0m"


class Decoration(enum.IntEnum):
    """Text attributes. The value is the SGR code."""

    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    INVERSE = 7
    STRIKETHROUGH = 9


def _sgr_for(value: ColorValue, *, background: bool) -> str:
    if isinstance(value, Color):
        return str(value.background if background else value.foreground)
    return value.sgr(background=background)


def _slot(value: Any) -> ColorValue | None:
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, tuple) and len(value) == 3:
        return Rgb.clamped(*value)
    return None


@dataclasses.dataclass(frozen=True)
class StyledText:
    """Text plus pending style attributes.

    Every method returns a new ``StyledText``; nothing is rendered until the
    value is turned into a string (``str()``, ``print``, f-strings, ``+``).
    Color slots are last-write-wins, decorations accumulate.

    Implicit conversions always judge ``sys.stdout``; use :meth:`render` with
    the target stream when printing elsewhere. Format specs pad the bare text
    before styling, so padding carries the background color.
    """

    text: str
    fg: ColorValue | None = None
    bg: ColorValue | None = None
    decorations: frozenset[Decoration] = frozenset()

    def __post_init__(self) -> None:
        # frozen: assign through object.__setattr__
        if not isinstance(self.text, str):
            object.__setattr__(self, "text", str(self.text))
        object.__setattr__(self, "fg", _slot(self.fg))
        object.__setattr__(self, "bg", _slot(self.bg))
        object.__setattr__(self, "decorations", frozenset(d for d in self.decorations if isinstance(d, Decoration)))

    # -- slot setters -------------------------------------------------------

    def fg_color(self, color: ColorValue) -> StyledText:
        return dataclasses.replace(self, fg=color)

    def bg_color(self, color: ColorValue) -> StyledText:
        return dataclasses.replace(self, bg=color)

    def decorate(self, *decorations: Decoration) -> StyledText:
        return dataclasses.replace(self, decorations=self.decorations.union(decorations))

    def clear(self) -> StyledText:
        return StyledText(self.text)

    # -- RGB / HSL / hex ----------------------------------------------------

    def rgb(self, r: int, g: int, b: int) -> StyledText:
        return self.fg_color(Rgb.clamped(r, g, b))

    def on_rgb(self, r: int, g: int, b: int) -> StyledText:
        return self.bg_color(Rgb.clamped(r, g, b))

    def hsl(self, h: float, s: float, l: float) -> StyledText:  # noqa: E741
        return self.fg_color(hsl_to_rgb(h, s, l))

    def on_hsl(self, h: float, s: float, l: float) -> StyledText:  # noqa: E741
        return self.bg_color(hsl_to_rgb(h, s, l))

    def hex(self, code: str) -> StyledText:
        rgb = parse_hex(code)
        return self if rgb is None else self.fg_color(rgb)

    def on_hex(self, code: str) -> StyledText:
        rgb = parse_hex(code)
        return self if rgb is None else self.bg_color(rgb)

    # -- named foreground ---------------------------------------------------

    def black(self) -> StyledText:
        return self.fg_color(Color.BLACK)

    def red(self) -> StyledText:
        return self.fg_color(Color.RED)

    def green(self) -> StyledText:
        return self.fg_color(Color.GREEN)

    def yellow(self) -> StyledText:
        return self.fg_color(Color.YELLOW)

    def blue(self) -> StyledText:
        return self.fg_color(Color.BLUE)

    def magenta(self) -> StyledText:
        return self.fg_color(Color.MAGENTA)

    def cyan(self) -> StyledText:
        return self.fg_color(Color.CYAN)

    def white(self) -> StyledText:
        return self.fg_color(Color.WHITE)

    def bright_black(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_BLACK)

    def bright_red(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_RED)

    def bright_green(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_GREEN)

    def bright_yellow(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_YELLOW)

    def bright_blue(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_BLUE)

    def bright_magenta(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_MAGENTA)

    def bright_cyan(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_CYAN)

    def bright_white(self) -> StyledText:
        return self.fg_color(Color.BRIGHT_WHITE)

    # -- named background ---------------------------------------------------

    def on_black(self) -> StyledText:
        return self.bg_color(Color.BLACK)

    def on_red(self) -> StyledText:
        return self.bg_color(Color.RED)

    def on_green(self) -> StyledText:
        return self.bg_color(Color.GREEN)

    def on_yellow(self) -> StyledText:
        return self.bg_color(Color.YELLOW)

    def on_blue(self) -> StyledText:
        return self.bg_color(Color.BLUE)

    def on_magenta(self) -> StyledText:
        return self.bg_color(Color.MAGENTA)

    def on_cyan(self) -> StyledText:
        return self.bg_color(Color.CYAN)

    def on_white(self) -> StyledText:
        return self.bg_color(Color.WHITE)

    def on_bright_black(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_BLACK)

    def on_bright_red(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_RED)

    def on_bright_green(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_GREEN)

    def on_bright_yellow(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_YELLOW)

    def on_bright_blue(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_BLUE)

    def on_bright_magenta(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_MAGENTA)

    def on_bright_cyan(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_CYAN)

    def on_bright_white(self) -> StyledText:
        return self.bg_color(Color.BRIGHT_WHITE)

    # -- decorations --------------------------------------------------------

    def bold(self) -> StyledText:
        return self.decorate(Decoration.BOLD)

    def dim(self) -> StyledText:
        return self.decorate(Decoration.DIM)

    def italic(self) -> StyledText:
        return self.decorate(Decoration.ITALIC)

    def underline(self) -> StyledText:
        return self.decorate(Decoration.UNDERLINE)

    def inverse(self) -> StyledText:
        return self.decorate(Decoration.INVERSE)

    def strikethrough(self) -> StyledText:
        return self.decorate(Decoration.STRIKETHROUGH)

    # -- rendering ----------------------------------------------------------

    def sgr_params(self) -> list[str]:
        params: list[str] = []
        if self.fg is not None:
            params.append(_sgr_for(self.fg, background=False))
        if self.bg is not None:
            params.append(_sgr_for(self.bg, background=True))
        params.extend(str(int(d)) for d in sorted(self.decorations))
        return params

    def render(self, stream: IO[Any] | None = None, *, enabled: bool | None = None) -> str:
        """Return the text wrapped in SGR codes, or the bare text.

        With ``enabled`` left as ``None`` :func:`colored_text.should_colorize`
        is asked about ``stream`` (``sys.stdout`` by default). ``enabled=False``
        always strips; ``enabled=True`` skips the terminal check but still
        yields to ``NO_COLOR``.
        """
        params = self.sgr_params()
        if not params:
            return self.text
        if enabled is None:
            enabled = should_colorize(stream)
        elif enabled:
            enabled = not no_color_requested()
        if not enabled:
            return self.text
        return f"\x1b[{';'.join(params)}m{self.text}{RESET}"

    def __str__(self) -> str:
        return self.render(sys.stdout)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return str(dataclasses.replace(self, text=format(self.text, format_spec)))

    def __add__(self, other: object) -> str:
        if isinstance(other, (str, StyledText)):
            return str(self) + str(other)
        return NotImplemented

    def __radd__(self, other: object) -> str:
        if isinstance(other, str):
            return other + str(self)
        return NotImplemented


def style(text: Any) -> StyledText:
    """Start a style chain over ``text`` (anything ``str()`` accepts)."""
    if isinstance(text, StyledText):
        return text
    return StyledText(text if isinstance(text, str) else str(text))


_DECORATION_NAMES = {d.name.lower(): d for d in Decoration}


def colorize(text: Any, *names: str) -> str:
    """Apply styles by name and render, e.g. ``colorize(msg, "red", "bold")``.

    Accepts color names (``"bright_red"``), background names prefixed with
    ``on_`` and decoration names. Unknown names are skipped.
    """
    styled = style(text)
    for name in names:
        if not isinstance(name, str):
            continue
        key = name.strip().lower().replace("-", "_")
        if key in _DECORATION_NAMES:
            styled = styled.decorate(_DECORATION_NAMES[key])
        elif key.startswith("on_"):
            color = named_color(key[3:])
            if color is not None:
                styled = styled.bg_color(color)
        else:
            color = named_color(key)
            if color is not None:
                styled = styled.fg_color(color)
    return str(styled)

"""Color values: the 16 named ANSI colors, RGB triples, hex and HSL input.

Every conversion here is total. Out-of-range numbers are normalized
(channels clamp, hue wraps) and malformed hex codes come back as ``None``
instead of raising.
"""

from __future__ import annotations

import enum
import math
import string
from typing import NamedTuple, Union

_HEX_DIGITS = frozenset(string.hexdigits)


class Color(enum.IntEnum):
    """Named terminal colors. The value is the foreground SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def foreground(self) -> int:
        return int(self)

    @property
    def background(self) -> int:
        return int(self) + 10

    @property
    def is_bright(self) -> bool:
        return self >= Color.BRIGHT_BLACK


def _channel(value: float) -> int:
    if not isinstance(value, (int, float)):
        return 0
    if value != value:  # NaN
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


class Rgb(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> Rgb:
        """Build an ``Rgb`` with each channel forced into 0-255."""
        return cls(_channel(r), _channel(g), _channel(b))

    def sgr(self, *, background: bool = False) -> str:
        lead = 48 if background else 38
        return f"{lead};2;{self.r};{self.g};{self.b}"


ColorValue = Union[Color, Rgb]


def named_color(name: str) -> Color | None:
    if not isinstance(name, str):
        return None
    key = name.strip().upper().replace("-", "_")
    return Color.__members__.get(key)


def parse_hex(code: str) -> Rgb | None:
    """Decode ``#rrggbb`` or ``rrggbb`` into an ``Rgb``.

    Returns ``None`` for anything that is not exactly six ASCII hex digits
    after an optional single ``#``.
    """
    if not isinstance(code, str):
        return None
    digits = code[1:] if code.startswith("#") else code
    if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
        return None
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _percent(value: float) -> float:
    if value != value:  # NaN
        return 0.0
    return min(max(value, 0.0), 100.0) / 100.0


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:  # noqa: E741
    """Convert HSL to RGB.

    Args:
        h: Hue in degrees. Wrapped modulo 360; non-finite hues count as 0.
        s: Saturation in percent, clamped to [0, 100].
        l: Lightness in percent, clamped to [0, 100].

    Channels are rounded to the nearest integer, halves rounding up.
    """
    if isinstance(h, float) and not math.isfinite(h):
        hue = 0.0
    else:
        hue = float(h % 360)
    sat = _percent(s)
    light = _percent(l)

    chroma = (1.0 - abs(2.0 * light - 1.0)) * sat
    sector = hue / 60.0
    x = chroma * (1.0 - abs(sector % 2.0 - 1.0))
    m = light - chroma / 2.0

    # (-tiny) % 360.0 can come back as exactly 360.0, which lands in the
    # final branch and still yields the red sector.
    segment = int(sector)
    if segment == 0:
        rgb = (chroma, x, 0.0)
    elif segment == 1:
        rgb = (x, chroma, 0.0)
    elif segment == 2:
        rgb = (0.0, chroma, x)
    elif segment == 3:
        rgb = (0.0, x, chroma)
    elif segment == 4:
        rgb = (x, 0.0, chroma)
    else:
        rgb = (chroma, 0.0, x)

    return Rgb.clamped(*(math.floor((c + m) * 255.0 + 0.5) for c in rgb))

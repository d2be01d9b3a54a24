"""Tests for the color value model: named colors, RGB, hex and HSL."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from colored_text._color import Color, Rgb, hsl_to_rgb, named_color, parse_hex


def _close(actual: Rgb, expected: tuple[int, int, int]) -> bool:
    return all(abs(a - e) <= 1 for a, e in zip(actual, expected))


# ---------------------------------------------------------------------------
# Named colors
# ---------------------------------------------------------------------------

class TestColor:
    def test_basic_codes(self):
        assert [c.value for c in Color if not c.is_bright] == list(range(30, 38))

    def test_bright_codes(self):
        assert [c.value for c in Color if c.is_bright] == list(range(90, 98))

    def test_background_is_offset_by_ten(self):
        for c in Color:
            assert c.background == c.foreground + 10

    def test_background_ranges(self):
        assert Color.BLACK.background == 40
        assert Color.WHITE.background == 47
        assert Color.BRIGHT_BLACK.background == 100
        assert Color.BRIGHT_WHITE.background == 107


class TestNamedColor:
    def test_lookup(self):
        assert named_color("red") is Color.RED
        assert named_color("bright_cyan") is Color.BRIGHT_CYAN

    def test_case_and_dashes(self):
        assert named_color("Bright-Blue") is Color.BRIGHT_BLUE
        assert named_color(" MAGENTA ") is Color.MAGENTA

    def test_unknown(self):
        assert named_color("orange") is None
        assert named_color("") is None

    def test_non_string(self):
        assert named_color(None) is None  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Rgb
# ---------------------------------------------------------------------------

class TestRgb:
    def test_clamped_passthrough(self):
        assert Rgb.clamped(255, 128, 0) == Rgb(255, 128, 0)

    def test_clamped_out_of_range(self):
        assert Rgb.clamped(-5, 300, 256) == Rgb(0, 255, 255)

    def test_clamped_floats_truncate(self):
        assert Rgb.clamped(12.9, 0.2, 254.99) == Rgb(12, 0, 254)

    def test_clamped_nan_and_inf(self):
        assert Rgb.clamped(math.nan, math.inf, -math.inf) == Rgb(0, 255, 0)

    def test_sgr(self):
        assert Rgb(1, 2, 3).sgr() == "38;2;1;2;3"
        assert Rgb(1, 2, 3).sgr(background=True) == "48;2;1;2;3"

    @given(st.integers(), st.integers(), st.integers())
    def test_clamped_always_in_range(self, r, g, b):
        rgb = Rgb.clamped(r, g, b)
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)


# ---------------------------------------------------------------------------
# Hex parsing
# ---------------------------------------------------------------------------

class TestParseHex:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("#ff8000", (255, 128, 0)),
            ("ff8000", (255, 128, 0)),
            ("#00FF00", (0, 255, 0)),
            ("#808080", (128, 128, 128)),
            ("000000", (0, 0, 0)),
            ("#ffffff", (255, 255, 255)),
        ],
    )
    def test_valid(self, code, expected):
        assert parse_hex(code) == expected

    @pytest.mark.parametrize(
        "code",
        ["", "#", "xyz", "#f8", "#12345", "#1234567", "not-a-color", "#xyzxyz", "##ff8000",
         " ff8000", "+f8000", "0xff00", "ff_800", "#ff800０"],
    )
    def test_invalid(self, code):
        assert parse_hex(code) is None

    def test_non_string(self):
        assert parse_hex(None) is None  # type: ignore[arg-type]
        assert parse_hex(0xFF8000) is None  # type: ignore[arg-type]

    @given(st.integers(0, 255), st.integers(0, 255), st.integers(0, 255), st.booleans(), st.booleans())
    def test_decodes_bytes_exactly(self, r, g, b, hashed, upper):
        code = f"{r:02x}{g:02x}{b:02x}"
        if upper:
            code = code.upper()
        if hashed:
            code = "#" + code
        assert parse_hex(code) == Rgb(r, g, b)

    @given(st.text())
    def test_never_raises(self, code):
        result = parse_hex(code)
        assert result is None or all(0 <= c <= 255 for c in result)


# ---------------------------------------------------------------------------
# HSL conversion
# ---------------------------------------------------------------------------

class TestHslToRgb:
    @pytest.mark.parametrize(
        "hsl, expected",
        [
            ((0, 100, 50), (255, 0, 0)),
            ((120, 100, 50), (0, 255, 0)),
            ((240, 100, 50), (0, 0, 255)),
            ((60, 100, 50), (255, 255, 0)),
            ((180, 100, 50), (0, 255, 255)),
            ((300, 100, 50), (255, 0, 255)),
            ((0, 0, 50), (128, 128, 128)),
            ((0, 0, 100), (255, 255, 255)),
            ((0, 0, 0), (0, 0, 0)),
        ],
    )
    def test_known_points(self, hsl, expected):
        assert _close(hsl_to_rgb(*hsl), expected)

    def test_primaries_exact(self):
        assert hsl_to_rgb(0, 100, 50) == Rgb(255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == Rgb(0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == Rgb(0, 0, 255)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
        assert hsl_to_rgb(480, 100, 50) == hsl_to_rgb(120, 100, 50)
        assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)

    def test_tiny_negative_hue_is_red(self):
        assert hsl_to_rgb(-1e-20, 100, 50) == Rgb(255, 0, 0)

    def test_saturation_and_lightness_clamp(self):
        assert hsl_to_rgb(0, 150, 50) == hsl_to_rgb(0, 100, 50)
        assert hsl_to_rgb(0, 100, -10) == Rgb(0, 0, 0)
        assert hsl_to_rgb(0, 100, 250) == Rgb(255, 255, 255)

    def test_non_finite_inputs(self):
        assert hsl_to_rgb(math.inf, 100, 50) == Rgb(255, 0, 0)
        assert hsl_to_rgb(math.nan, 100, 50) == Rgb(255, 0, 0)
        assert hsl_to_rgb(0, math.nan, math.nan) == Rgb(0, 0, 0)

    @given(
        st.one_of(st.floats(), st.integers()),
        st.one_of(st.floats(), st.integers()),
        st.one_of(st.floats(), st.integers()),
    )
    def test_total_and_in_range(self, h, s, l):  # noqa: E741
        rgb = hsl_to_rgb(h, s, l)
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)

    @given(st.floats(0, 360, exclude_max=True), st.floats(0, 100))
    def test_zero_saturation_is_gray(self, h, l):  # noqa: E741
        r, g, b = hsl_to_rgb(h, 0, l)
        assert r == g == b

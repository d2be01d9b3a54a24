from __future__ import annotations

import argparse
import contextlib
import sys

from colored_text._color import Color, named_color, parse_hex
from colored_text._style import Decoration, StyledText, style
from colored_text._term import terminal_check

_COLOR_NAMES = [c.name.lower() for c in Color]


def _byte(value: str) -> int:
    try:
        n = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid channel value: {value!r}") from None
    if not 0 <= n <= 255:
        raise argparse.ArgumentTypeError(f"channel must be in 0-255, got {n}")
    return n


def _add_color_options(p: argparse.ArgumentParser, *, background: bool) -> None:
    prefix = "on-" if background else ""
    where = "background" if background else "foreground"
    group = p.add_mutually_exclusive_group()
    group.add_argument(
        "--bg" if background else "--fg",
        dest=f"{where}_name",
        choices=_COLOR_NAMES,
        metavar="NAME",
        help=f"Named {where} color ({', '.join(_COLOR_NAMES[:3])}, ...)",
    )
    group.add_argument(
        f"--{prefix}rgb",
        dest=f"{where}_rgb",
        type=_byte,
        nargs=3,
        metavar=("R", "G", "B"),
        help=f"{where.capitalize()} RGB color, channels 0-255",
    )
    group.add_argument(
        f"--{prefix}hex",
        dest=f"{where}_hex",
        metavar="CODE",
        help=f"{where.capitalize()} hex color (#rrggbb or rrggbb)",
    )
    group.add_argument(
        f"--{prefix}hsl",
        dest=f"{where}_hsl",
        type=float,
        nargs=3,
        metavar=("H", "S", "L"),
        help=f"{where.capitalize()} HSL color (degrees, percent, percent)",
    )


def _apply_color(styled: StyledText, args: argparse.Namespace, *, background: bool) -> tuple[StyledText, bool]:
    where = "background" if background else "foreground"
    name = getattr(args, f"{where}_name")
    rgb = getattr(args, f"{where}_rgb")
    hex_code = getattr(args, f"{where}_hex")
    hsl = getattr(args, f"{where}_hsl")

    if name is not None:
        color = named_color(name)
        if color is not None:
            styled = styled.bg_color(color) if background else styled.fg_color(color)
    elif rgb is not None:
        styled = styled.on_rgb(*rgb) if background else styled.rgb(*rgb)
    elif hsl is not None:
        styled = styled.on_hsl(*hsl) if background else styled.hsl(*hsl)
    elif hex_code is not None:
        if parse_hex(hex_code) is None:
            print(f"warning: ignoring invalid {where} hex color {hex_code!r}", file=sys.stderr)
            return styled, False
        styled = styled.on_hex(hex_code) if background else styled.hex(hex_code)
    return styled, True


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="colored-text", description="Print text decorated with ANSI colors and styles.")
    p.add_argument("text", nargs="+", help="Text to print (words are joined with single spaces)")
    _add_color_options(p, background=False)
    _add_color_options(p, background=True)
    for d in Decoration:
        p.add_argument(f"--{d.name.lower()}", action="store_true", help=f"Apply {d.name.lower()}")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--no-color", action="store_true", help="Never emit ANSI codes")
    mode.add_argument(
        "--force-color",
        action="store_true",
        help="Emit ANSI codes without checking for a terminal (NO_COLOR still wins)",
    )
    p.add_argument("--no-tty-check", action="store_true", help="Emit codes even when stdout is not a terminal")
    args = p.parse_args(argv)

    styled = style(" ".join(args.text))
    styled, fg_ok = _apply_color(styled, args, background=False)
    styled, bg_ok = _apply_color(styled, args, background=True)
    styled = styled.decorate(*(d for d in Decoration if getattr(args, d.name.lower())))

    enabled: bool | None = None
    if args.no_color:
        enabled = False
    elif args.force_color:
        enabled = True

    scope = terminal_check(False) if args.no_tty_check else contextlib.nullcontext()
    with scope:
        print(styled.render(sys.stdout, enabled=enabled))

    return 0 if fg_ok and bg_ok else 1

# basic.py
"""Tour of the styling API. Run with ``python examples/basic.py``."""

from __future__ import annotations

from colored_text import colorize, style


def main() -> None:
    print("\nBasic colors:")
    print(style("Red text").red())
    print(style("Green text").green())
    print(style("Blue text").blue())
    print(style("Yellow text").yellow())
    print(style("Magenta text").magenta())
    print(style("Cyan text").cyan())
    print(style("White text").white())
    print(style("Black text").black())

    print("\nBright colors:")
    print(style("Bright red text").bright_red())
    print(style("Bright green text").bright_green())
    print(style("Bright blue text").bright_blue())

    print("\nBackground colors:")
    print(style("Red background").on_red())
    print(style("Green background").on_green())
    print(style("Blue background").on_bright_blue())

    print("\nText styles:")
    print(style("Bold text").bold())
    print(style("Dim text").dim())
    print(style("Italic text").italic())
    print(style("Underlined text").underline())
    print(style("Inverse text").inverse())
    print(style("Struck-through text").strikethrough())

    print("\nRGB, HSL and hex colors:")
    print(style("Custom RGB color").rgb(255, 128, 0))
    print(style("Custom RGB background").on_rgb(0, 128, 255))
    print(style("HSL teal").hsl(180, 60, 45))
    print(style("Hex color (#ff8000)").hex("#ff8000"))
    print(style("Hex background (#0080ff)").on_hex("0080ff"))

    print("\nChained styles:")
    print(style("Bold red text").red().bold())
    print(style("Italic blue text on yellow background").blue().italic().on_yellow())
    print(style("RGB text with background").rgb(255, 128, 0).on_blue())

    print("\nInside f-strings:")
    name = "World"
    print(f"Hello, {style(name).blue().bold()}!")

    print("\nMixing styles:")
    print(
        f"{colorize('Notice', 'red', 'bold')}. {style('This').blue()} "
        f"{style('is').green()} {style('important').yellow().underline()}!"
    )


if __name__ == "__main__":
    main()

"""Basic huekit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from huekit import (
    RGB,
    Color,
    convert,
    generate_scheme,
    hue_shift,
    palette_color,
    parse_color,
)


def demonstrate_conversions() -> None:
    # Parse text and convert between kinds.
    accent = parse_color("rgb(255, 128, 64)")
    print("Parsed:", accent)
    print("RGB -> HSV:", convert(accent, "hsv"))
    print("RGB -> CMYK:", convert(accent, "cmyk"))
    print("RGB -> hex:", convert(accent, "hex"))


def demonstrate_adjustments() -> None:
    # Every routine returns a new color in the kind it was given.
    print("Hue shift:", hue_shift(RGB(255, 0, 0), 120))

    color = Color(palette_color("cornflower_blue"))
    color.darken(20).hue_shift(30)
    print("Chained on a Color:", color, "dark" if color.is_dark() else "light")


def demonstrate_schemes() -> None:
    for name in ("complementary", "triadic", "analogous", "monochromatic"):
        print(f"{name:>14}:", generate_scheme("#3366cc", name, "hex"))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_adjustments()
    demonstrate_schemes()

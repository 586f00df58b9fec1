"""huekit: color records, conversions, adjustments and color schemes."""

__version__ = "0.1.0"

from .colors import ColorBase, WithAlpha, RGB, RGBA, HSV, HSL, HSLA, CMYK
from .types import ColorKind, SchemeName, SchemeOptions, DEFAULT_SCHEME_OPTIONS
from .exceptions import HuekitError, InvalidInputError, UnknownFormatError, HuekitWarning, SchemeWarning
from .normalizers import (
    is_hex,
    is_rgb,
    is_rgba,
    is_hsv,
    is_hsl,
    is_hsla,
    is_cmyk,
    is_color,
    color_kind,
    expand_hex,
    parse_color,
    create_color,
)
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
    hsv_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    hsl_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    hex_to_hsv,
    hsv_to_hex,
    to_rgb,
    to_rgba,
    to_hex,
    to_hsv,
    to_hsl,
    to_hsla,
    to_cmyk,
    convert,
    websafe,
)
from .routines import (
    is_dark,
    is_light,
    grayscale,
    lighten,
    darken,
    hue_shift,
    equal,
    to_display_string,
    random_color,
)
from .schemes import generate_scheme
from .palettes import STANDARD_COLORS, METRO_COLORS, Palette, palette_color, palette_names, palette_colors
from .color import Color

__all__ = [
    # records
    "ColorBase",
    "WithAlpha",
    "RGB",
    "RGBA",
    "HSV",
    "HSL",
    "HSLA",
    "CMYK",
    "ColorKind",
    "SchemeName",
    "SchemeOptions",
    "DEFAULT_SCHEME_OPTIONS",

    # errors
    "HuekitError",
    "InvalidInputError",
    "UnknownFormatError",
    "HuekitWarning",
    "SchemeWarning",

    # detection and parsing
    "is_hex",
    "is_rgb",
    "is_rgba",
    "is_hsv",
    "is_hsl",
    "is_hsla",
    "is_cmyk",
    "is_color",
    "color_kind",
    "expand_hex",
    "parse_color",
    "create_color",

    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "hex_to_hsv",
    "hsv_to_hex",
    "to_rgb",
    "to_rgba",
    "to_hex",
    "to_hsv",
    "to_hsl",
    "to_hsla",
    "to_cmyk",
    "convert",
    "websafe",

    # routines
    "is_dark",
    "is_light",
    "grayscale",
    "lighten",
    "darken",
    "hue_shift",
    "equal",
    "to_display_string",
    "random_color",
    "generate_scheme",

    # palettes
    "STANDARD_COLORS",
    "METRO_COLORS",
    "Palette",
    "palette_color",
    "palette_names",
    "palette_colors",

    "Color",
]

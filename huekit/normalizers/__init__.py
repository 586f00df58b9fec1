from .detect import (
    is_hex,
    is_rgb,
    is_rgba,
    is_hsv,
    is_hsl,
    is_hsla,
    is_cmyk,
    is_color,
    color_kind,
)
from .parse import expand_hex, parse_color, create_color

__all__ = [
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
]

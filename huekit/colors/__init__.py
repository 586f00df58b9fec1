"""
huekit Color Records
====================

Immutable value records for the typed color kinds. Hex colors are plain
strings and have no record class.

Features
--------
- Immutable instances (frozen after initialization)
- Channels readable by name (``rgb.r``, ``hsla.a``) or as a tuple (``.value``)
- No clamping on construction: ranges are only enforced by the algorithms
- Alpha channel support with the WithAlpha mixin
- ``str(record)`` gives the display form, e.g. ``rgb(255,0,0)``

Usage
-----
>>> from huekit.colors import RGB, RGBA
>>> red = RGB(255, 0, 0)
>>> red.r
255
>>> str(red)
'rgb(255,0,0)'
>>> RGBA(255, 0, 0, 0.5).with_alpha(1)
RGBA(r=255, g=0, b=0, a=1)

Color Classes
-------------
    - RGB:  integer r, g, b (0-255)
    - RGBA: RGB plus float alpha (0-1)
    - HSV:  hue in degrees (0-360), s and v in 0-1
    - HSL:  hue in degrees (0-360), s and l in 0-1
    - HSLA: HSL plus float alpha (0-1)
    - CMYK: integer c, m, y, k percentages (0-100)
"""

from .color_base import ColorBase, WithAlpha
from .rgb import RGB, RGBA, rgb_kind_to_class
from .hsv import HSV, hsv_kind_to_class
from .hsl import HSL, HSLA, hsl_kind_to_class
from .cmyk import CMYK, cmyk_kind_to_class
from ..types.color_types import ColorKind

unified_kind_to_class: dict[ColorKind, type[ColorBase]] = {
    **rgb_kind_to_class,
    **hsv_kind_to_class,
    **hsl_kind_to_class,
    **cmyk_kind_to_class,
}

__all__ = [
    "ColorBase",
    "WithAlpha",
    "RGB",
    "RGBA",
    "HSV",
    "HSL",
    "HSLA",
    "CMYK",
    "unified_kind_to_class",
]

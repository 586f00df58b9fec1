"""
huekit Color Conversions
========================

Conversion graph between the seven color kinds. RGB and HSV are the pivot
representations: every kind reaches RGB in one hop, and the hue-based kinds
go through HSV.

Pairwise Functions
------------------
    hex_to_rgb, rgb_to_hex          hex <-> RGB
    rgb_to_hsv, hsv_to_rgb          RGB <-> HSV (six-sector algorithm)
    hsv_to_hsl, hsl_to_hsv          HSV <-> HSL
    rgb_to_cmyk, cmyk_to_rgb        RGB <-> CMYK (percent scale)
    hex_to_hsv, hsv_to_hex          shortcuts through RGB
    *_to_websafe                    snap to multiples of 51, keeping the kind

High-Level API
--------------
    to_rgb(color)                   universal normalizer, raises UnknownFormatError
    to_hex / to_hsv / to_hsl / to_cmyk (color)
    to_rgba / to_hsla (color, alpha=None)
    convert(color, kind, alpha=None)
    websafe(color)

Examples
--------
>>> from huekit.conversions import convert, rgb_to_hsv
>>> from huekit.colors import RGB
>>> rgb_to_hsv(RGB(255, 0, 0))
HSV(h=0.0, s=1.0, v=1.0)
>>> convert("#ff0000", "cmyk")
CMYK(c=0, m=100, y=100, k=0)
"""

from .to_rgb import hex_to_rgb, hsv_to_rgb, hsl_to_rgb, cmyk_to_rgb, rgba_to_rgb
from .to_hsv import rgb_to_hsv, hsl_to_hsv, hex_to_hsv
from .to_hsl import hsv_to_hsl
from .to_hex import rgb_to_hex, hsv_to_hex
from .to_cmyk import rgb_to_cmyk
from .websafe import (
    rgb_to_websafe,
    rgba_to_websafe,
    hex_to_websafe,
    hsv_to_websafe,
    hsl_to_websafe,
    hsla_to_websafe,
    cmyk_to_websafe,
    websafe,
)
from .wrapper import to_rgb, to_rgba, to_hex, to_hsv, to_hsl, to_hsla, to_cmyk, convert

__all__ = [
    # pairwise
    'hex_to_rgb',
    'hsv_to_rgb',
    'hsl_to_rgb',
    'cmyk_to_rgb',
    'rgba_to_rgb',
    'rgb_to_hsv',
    'hsl_to_hsv',
    'hex_to_hsv',
    'hsv_to_hsl',
    'rgb_to_hex',
    'hsv_to_hex',
    'rgb_to_cmyk',

    # websafe
    'rgb_to_websafe',
    'rgba_to_websafe',
    'hex_to_websafe',
    'hsv_to_websafe',
    'hsl_to_websafe',
    'hsla_to_websafe',
    'cmyk_to_websafe',
    'websafe',

    # High-level API
    'to_rgb',
    'to_rgba',
    'to_hex',
    'to_hsv',
    'to_hsl',
    'to_hsla',
    'to_cmyk',
    'convert',
]

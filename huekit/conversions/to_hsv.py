from __future__ import annotations
from typing import Union

from ..colors import RGB, RGBA, HSV, HSL, HSLA
from ..utils.num_utils import HUE_360
from .to_rgb import hex_to_rgb


def rgb_to_hsv(rgb: Union[RGB, RGBA]) -> HSV:
    """
    Convert RGB (0..255) to HSV with hue in degrees and s, v in 0..1.

    Hue comes from whichever channel is the maximum; the red branch adds 360
    when green is below blue so the result stays non-negative.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    v = max_c
    s = 0 if max_c == 0 else 1 - min_c / max_c

    if max_c == min_c:
        h = 0
    elif max_c == r and g >= b:
        h = 60 * ((g - b) / delta)
    elif max_c == r and g < b:
        h = 60 * ((g - b) / delta) + 360
    elif max_c == g:
        h = 60 * ((b - r) / delta) + 120
    elif max_c == b:
        h = 60 * ((r - g) / delta) + 240
    else:
        h = 0

    if h >= HUE_360:
        h -= HUE_360

    return HSV(h, s, v)


def hsl_to_hsv(hsl: Union[HSL, HSLA]) -> HSV:
    l = hsl.l * 2
    s = hsl.s * (l if l <= 1 else 2 - l)

    v = (l + s) / 2
    s = 0 if l + s == 0 else (2 * s) / (l + s)

    return HSV(hsl.h, s, v)


def hex_to_hsv(hex_value: str) -> HSV:
    return rgb_to_hsv(hex_to_rgb(hex_value))

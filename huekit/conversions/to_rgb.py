from __future__ import annotations
import math
import re
from typing import Union

from ..colors import RGB, RGBA, HSV, HSL, HSLA, CMYK
from ..exceptions import UnknownFormatError
from ..normalizers.parse import expand_hex
from ..utils.num_utils import round_half_up, floor_int, ceil_int

_FULL_HEX = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(hex_value: str) -> RGB:
    """
    Convert a hex string (shorthand allowed) to RGB.

    Raises:
        UnknownFormatError: if the expanded string is not ``#RRGGBB``
    """
    match = _FULL_HEX.match(expand_hex(hex_value))
    if match is None:
        raise UnknownFormatError(f"Not a hex color: {hex_value!r}")
    return RGB(*(int(pair, 16) for pair in match.groups()))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    Convert HSV to RGB with the six-sector hexagon algorithm.

    Saturation and value are scaled to percent, the sector is
    ``floor(h / 60) mod 6`` and every channel is rounded half-up after
    rescaling to 0..255.
    """
    h = hsv.h
    s = hsv.s * 100
    v = hsv.v * 100
    if not math.isfinite(h):
        return RGB(math.nan, math.nan, math.nan)

    sector = math.floor(h / 60) % 6
    v_min = ((100 - s) * v) / 100
    alpha = (v - v_min) * ((h % 60) / 60)
    v_inc = v_min + alpha
    v_dec = v - alpha

    r, g, b = (
        (v, v_inc, v_min),
        (v_dec, v, v_min),
        (v_min, v, v_inc),
        (v_min, v_dec, v),
        (v_inc, v_min, v),
        (v, v_min, v_dec),
    )[sector]

    return RGB(
        round_half_up((r * 255) / 100),
        round_half_up((g * 255) / 100),
        round_half_up((b * 255) / 100),
    )


def hsl_to_rgb(hsl: Union[HSL, HSLA]) -> RGB:
    from .to_hsv import hsl_to_hsv  # local import to avoid cycles
    return hsv_to_rgb(hsl_to_hsv(hsl))


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """
    Convert CMYK percentages to RGB.

    Red is floored while green and blue are ceiled; the asymmetry is
    kept for output compatibility.
    """
    return RGB(
        floor_int(255 * (1 - cmyk.c / 100) * (1 - cmyk.k / 100)),
        ceil_int(255 * (1 - cmyk.m / 100) * (1 - cmyk.k / 100)),
        ceil_int(255 * (1 - cmyk.y / 100) * (1 - cmyk.k / 100)),
    )


def rgba_to_rgb(rgba: RGBA) -> RGB:
    return RGB(rgba.r, rgba.g, rgba.b)

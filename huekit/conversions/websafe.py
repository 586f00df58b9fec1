from __future__ import annotations
from typing import Any, Callable, Union

from ..colors import RGB, RGBA, HSV, HSL, HSLA, CMYK
from ..normalizers.detect import color_kind
from ..types.color_types import ColorKind, ColorValue
from ..utils.default import WEBSAFE_STEP
from ..utils.num_utils import round_half_up
from .to_cmyk import rgb_to_cmyk
from .to_hex import rgb_to_hex
from .to_hsl import hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_rgb import hex_to_rgb, hsv_to_rgb, cmyk_to_rgb


def _snap(channel):
    return round_half_up(channel / WEBSAFE_STEP) * WEBSAFE_STEP


def rgb_to_websafe(rgb: Union[RGB, RGBA]) -> RGB:
    """Snap every channel to the nearest multiple of 51."""
    return RGB(_snap(rgb.r), _snap(rgb.g), _snap(rgb.b))


def rgba_to_websafe(rgba: RGBA) -> RGBA:
    safe = rgb_to_websafe(rgba)
    return RGBA(safe.r, safe.g, safe.b, rgba.a)


def hex_to_websafe(hex_value: str) -> str:
    return rgb_to_hex(rgb_to_websafe(hex_to_rgb(hex_value)))


def hsv_to_websafe(hsv: HSV) -> HSV:
    return rgb_to_hsv(rgb_to_websafe(hsv_to_rgb(hsv)))


def hsl_to_websafe(hsl: HSL) -> HSL:
    return hsv_to_hsl(rgb_to_hsv(rgb_to_websafe(hsv_to_rgb(hsl_to_hsv(hsl)))))


def hsla_to_websafe(hsla: HSLA) -> HSLA:
    safe = hsl_to_websafe(hsla.without_alpha())
    return HSLA(safe.h, safe.s, safe.l, hsla.a)


def cmyk_to_websafe(cmyk: CMYK) -> CMYK:
    return rgb_to_cmyk(rgb_to_websafe(cmyk_to_rgb(cmyk)))


WEBSAFE_BY_KIND: dict[ColorKind, Callable[[Any], ColorValue]] = {
    ColorKind.HEX: hex_to_websafe,
    ColorKind.RGB: rgb_to_websafe,
    ColorKind.RGBA: rgba_to_websafe,
    ColorKind.HSV: hsv_to_websafe,
    ColorKind.HSL: hsl_to_websafe,
    ColorKind.HSLA: hsla_to_websafe,
    ColorKind.CMYK: cmyk_to_websafe,
}


def websafe(color: Any) -> Any:
    """Snap a color of any kind to the web-safe palette, keeping its kind."""
    converter = WEBSAFE_BY_KIND.get(color_kind(color))
    return converter(color) if converter is not None else color

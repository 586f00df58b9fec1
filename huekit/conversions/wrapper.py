from __future__ import annotations
from typing import Any, Callable, Optional, Union

from ..colors import WithAlpha, RGB, RGBA, HSV, HSL, HSLA, CMYK
from ..exceptions import UnknownFormatError
from ..normalizers.detect import color_kind, is_hex
from ..normalizers.parse import expand_hex
from ..types.color_types import ColorKind, ColorValue, Scalar
from ..utils.default import DEFAULT_ALPHA, value_or_default
from .to_cmyk import rgb_to_cmyk
from .to_hex import rgb_to_hex
from .to_hsl import hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_rgb import hex_to_rgb, hsv_to_rgb, hsl_to_rgb, cmyk_to_rgb, rgba_to_rgb

# Every kind reaches the RGB pivot in one hop
TO_RGB: dict[ColorKind, Callable[[Any], RGB]] = {
    ColorKind.RGB: lambda color: color,
    ColorKind.RGBA: rgba_to_rgb,
    ColorKind.HSV: hsv_to_rgb,
    ColorKind.HSL: hsl_to_rgb,
    ColorKind.HSLA: hsl_to_rgb,
    ColorKind.HEX: hex_to_rgb,
    ColorKind.CMYK: cmyk_to_rgb,
}


def _resolve_alpha(color: Any, alpha: Optional[Scalar]) -> Scalar:
    # A carried alpha is only replaced by an explicit non-zero override
    if isinstance(color, WithAlpha):
        return alpha if alpha else color.alpha
    return value_or_default(alpha, DEFAULT_ALPHA)


def to_rgb(color: Any) -> RGB:
    """
    Convert color to RGB.

    Raises:
        UnknownFormatError: if ``color`` is none of the seven kinds
    """
    converter = TO_RGB.get(color_kind(color))
    if converter is None:
        raise UnknownFormatError(f"Unknown color format: {color!r}")
    return converter(color)


def to_rgba(color: Any, alpha: Optional[Scalar] = None) -> RGBA:
    """
    Convert color to RGBA.

    Args:
        color: Any color
        alpha: Alpha to use. Colors that already carry an alpha keep it
            unless a non-zero override is given; others default to 1.
    """
    a = _resolve_alpha(color, alpha)
    if isinstance(color, RGBA):
        return color if a == color.a else color.with_alpha(a)
    rgb = to_rgb(color)
    return RGBA(rgb.r, rgb.g, rgb.b, a)


def to_hex(color: Any) -> str:
    """
    Convert color to lowercase ``#rrggbb``.

    Raises:
        UnknownFormatError: for strings that are not hex and for non-colors
    """
    if isinstance(color, str):
        expanded = expand_hex(color)
        if not is_hex(expanded):
            raise UnknownFormatError(f"Unknown color format: {color!r}")
        return expanded.lower()
    return rgb_to_hex(to_rgb(color))


def to_hsv(color: Any) -> HSV:
    if isinstance(color, HSV):
        return color
    if isinstance(color, (HSL, HSLA)):
        return hsl_to_hsv(color)
    return rgb_to_hsv(to_rgb(color))


def to_hsl(color: Any) -> HSL:
    if type(color) is HSL:
        return color
    if isinstance(color, HSLA):
        return color.without_alpha()
    return hsv_to_hsl(to_hsv(color))


def to_hsla(color: Any, alpha: Optional[Scalar] = None) -> HSLA:
    """Convert color to HSLA; alpha follows the same rules as :func:`to_rgba`."""
    a = _resolve_alpha(color, alpha)
    if isinstance(color, HSLA):
        return color if a == color.a else color.with_alpha(a)
    hsl = to_hsl(color)
    return HSLA(hsl.h, hsl.s, hsl.l, a)


def to_cmyk(color: Any) -> CMYK:
    if isinstance(color, CMYK):
        return color
    return rgb_to_cmyk(to_rgb(color))


CONVERTERS: dict[ColorKind, Callable[[Any, Optional[Scalar]], ColorValue]] = {
    ColorKind.HEX: lambda color, alpha: to_hex(color),
    ColorKind.RGB: lambda color, alpha: to_rgb(color),
    ColorKind.RGBA: to_rgba,
    ColorKind.HSV: lambda color, alpha: to_hsv(color),
    ColorKind.HSL: lambda color, alpha: to_hsl(color),
    ColorKind.HSLA: to_hsla,
    ColorKind.CMYK: lambda color, alpha: to_cmyk(color),
}


def convert(color: Any, kind: Union[str, ColorKind] = ColorKind.RGB, alpha: Optional[Scalar] = None) -> Any:
    """
    Convert color to the named kind.

    Args:
        color: Any color
        kind: Target kind, case-insensitive
        alpha: Alpha for RGBA/HSLA targets (see :func:`to_rgba`)

    Returns:
        The converted color; ``color`` itself when ``kind`` is not recognized
    """
    converter = CONVERTERS.get(ColorKind.from_name(kind))
    if converter is None:
        return color
    return converter(color, alpha)

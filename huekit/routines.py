"""
Derived-color algorithms: lightness tests, grayscale, lighten/darken,
hue rotation, web-safe snapping, equality, display strings and random
colors. Every function returns a new value and leaves its input alone.
"""
from __future__ import annotations
from typing import Any, Optional, Union

import numpy as np

from .colors import ColorBase, WithAlpha, RGB
from .conversions import convert, rgb_to_hex, to_hex, to_hsv, to_rgb, websafe
from .exceptions import UnknownFormatError
from .normalizers.detect import color_kind, is_color, is_hex
from .types.color_types import ColorKind, ColorValue, Scalar
from .utils.default import DEFAULT_ALPHA
from .utils.num_utils import round_half_up, wrap_hue

# Luma weights for grayscale conversion
GRAYSCALE_WEIGHTS = (0.2125, 0.7154, 0.0721)
YIQ_THRESHOLD = 128


def _restore_kind(result: ColorValue, original: Any, alpha: Optional[Scalar] = None) -> ColorValue:
    """Convert ``result`` back to the kind of ``original``, keeping its alpha."""
    if alpha is None and isinstance(original, WithAlpha):
        alpha = original.alpha
    return convert(result, color_kind(original), alpha)


def is_dark(color: Any) -> Optional[bool]:
    """
    Check if specified color is dark (YIQ luma below 128).

    Returns:
        True/False, or None when ``color`` is not a color
    """
    if not is_color(color):
        return None
    rgb = to_rgb(color)
    yiq = (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000
    return bool(yiq < YIQ_THRESHOLD)


def is_light(color: Any) -> Optional[bool]:
    """Logical negation of :func:`is_dark`; None for non-colors."""
    dark = is_dark(color)
    return None if dark is None else not dark


def grayscale(color: Any) -> ColorValue:
    """Convert color to its neutral gray, keeping the original kind."""
    rgb = to_rgb(color)
    wr, wg, wb = GRAYSCALE_WEIGHTS
    gray = round_half_up(rgb.r * wr + rgb.g * wg + rgb.b * wb)
    return _restore_kind(RGB(gray, gray, gray), color)


def lighten(color: Any, amount: Scalar = 10) -> ColorValue:
    """
    Add ``amount`` to each 8-bit channel, clamped to 0..255.

    The color goes through its hex form; the result comes back in the
    original kind with the original alpha.

    Args:
        color: Any color
        amount: Channel offset; negative values darken

    Returns:
        The adjusted color
    """
    hex_value = to_hex(color)
    channels = np.array([int(hex_value[i:i + 2], 16) for i in (1, 3, 5)])
    adjusted = np.clip(channels + amount, 0, 255).astype(int)
    result = rgb_to_hex(RGB(*(int(c) for c in adjusted)))
    return _restore_kind(result, color)


def darken(color: Any, amount: Scalar = 10) -> ColorValue:
    """Darken color; ``darken(c, n)`` is ``lighten(c, -n)``."""
    return lighten(color, -amount)


def hue_shift(color: Any, angle: Scalar, alpha: Optional[Scalar] = None) -> ColorValue:
    """
    Rotate color on the color wheel by ``angle`` degrees.

    Args:
        color: Any color
        angle: Degrees, any sign or magnitude
        alpha: Alpha for RGBA/HSLA results; defaults to the source alpha

    Returns:
        The rotated color in the original kind
    """
    hsv = to_hsv(color)
    shifted = hsv.replace(h=wrap_hue(hsv.h + angle))
    return _restore_kind(shifted, color, alpha)


def equal(color1: Any, color2: Any) -> bool:
    """Check if two colors render to the same hex value (alpha is ignored)."""
    if not is_color(color1) or not is_color(color2):
        return False
    return to_hex(color1) == to_hex(color2)


def to_display_string(color: Any) -> str:
    """
    Get the textual form of a color: ``#rrggbb``, ``rgb(r,g,b)``, ``hsla(h,s,l,a)`` ...

    Raises:
        UnknownFormatError: if ``color`` is not a color
    """
    if is_hex(color):
        return to_hex(color)
    if isinstance(color, ColorBase):
        return str(color)
    raise UnknownFormatError(f"Unknown color format: {color!r}")


def random_color(
    kind: Union[str, ColorKind] = ColorKind.HEX,
    alpha: Scalar = DEFAULT_ALPHA,
    rng: Union[int, np.random.Generator, None] = None,
) -> ColorValue:
    """
    Create a random color from a uniform byte triple.

    Args:
        kind: Kind of the returned color
        alpha: Alpha for RGBA/HSLA results
        rng: Seed or numpy Generator, for reproducible colors

    Returns:
        Random color of the requested kind
    """
    generator = np.random.default_rng(rng)
    r, g, b = (int(c) for c in generator.integers(0, 256, size=3))
    hex_value = rgb_to_hex(RGB(r, g, b))
    if ColorKind.from_name(kind) is ColorKind.HEX:
        return hex_value
    return convert(hex_value, kind, alpha)


__all__ = [
    "is_dark",
    "is_light",
    "grayscale",
    "lighten",
    "darken",
    "hue_shift",
    "websafe",
    "equal",
    "to_display_string",
    "random_color",
]

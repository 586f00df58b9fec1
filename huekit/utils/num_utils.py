import math
from typing import Union

import numpy as np

Number = Union[int, float]

HUE_360 = 360.0
# Past this magnitude the ±360 loop is reduced with fmod first
_WRAP_LOOP_LIMIT = HUE_360 * 1024


def _to_int_if_finite(value: np.floating) -> Number:
    return int(value) if np.isfinite(value) else float(value)


def round_half_up(value: Number) -> Number:
    """
    Round to the nearest integer, ties away from zero on the positive side.

    Python's ``round`` rounds ties to even (``round(2.5) == 2``); color
    channels are rounded with ``floor(x + 0.5)`` instead. NaN and infinities
    are returned as floats.
    """
    return _to_int_if_finite(np.floor(np.float64(value) + 0.5))


def floor_int(value: Number) -> Number:
    """``math.floor`` that lets NaN and infinities through as floats."""
    return _to_int_if_finite(np.floor(np.float64(value)))


def ceil_int(value: Number) -> Number:
    """``math.ceil`` that lets NaN and infinities through as floats."""
    return _to_int_if_finite(np.ceil(np.float64(value)))


def clamp(value: Number, lower: Number, upper: Number) -> Number:
    """Clamp a scalar into ``[lower, upper]``, keeping its Python type."""
    clipped = np.clip(value, lower, upper)
    return int(clipped) if isinstance(value, int) else float(clipped)


def wrap_hue(hue: Number) -> Number:
    """
    Bring a hue into ``[0, 360)`` by repeated ±360 adjustment.

    Args:
        hue: Angle in degrees, any magnitude

    Returns:
        Equivalent angle in ``[0, 360)``; non-finite input is returned as is
    """
    if not math.isfinite(hue):
        return hue
    if abs(hue) > _WRAP_LOOP_LIMIT:
        hue = math.fmod(hue, HUE_360)
    while hue >= HUE_360:
        hue -= HUE_360
    while hue < 0.0:
        hue += HUE_360
    return hue


def format_number(value: Number) -> str:
    """Render a channel value the way display strings expect: ``120`` not ``120.0``."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)

from .num_utils import round_half_up, floor_int, ceil_int, clamp, wrap_hue, format_number
from .default import value_or_default, DEFAULT_ALPHA, DEFAULT_COLOR, WEBSAFE_STEP

__all__ = [
    "round_half_up",
    "floor_int",
    "ceil_int",
    "clamp",
    "wrap_hue",
    "format_number",
    "value_or_default",
    "DEFAULT_ALPHA",
    "DEFAULT_COLOR",
    "WEBSAFE_STEP",
]

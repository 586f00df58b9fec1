from __future__ import annotations
import math
from typing import Union

from ..colors import RGB, RGBA, HSV
from ..utils.num_utils import clamp
from .to_rgb import hsv_to_rgb


def _to_byte(channel) -> int:
    # NaN packs as 0, like a bit-shift of NaN would
    if not math.isfinite(channel):
        return 0
    return clamp(int(channel), 0, 255)


def rgb_to_hex(rgb: Union[RGB, RGBA]) -> str:
    """Format as ``#rrggbb``: lowercase, each byte zero-padded to two digits."""
    return "#" + "".join(f"{_to_byte(c):02x}" for c in (rgb.r, rgb.g, rgb.b))


def hsv_to_hex(hsv: HSV) -> str:
    return rgb_to_hex(hsv_to_rgb(hsv))

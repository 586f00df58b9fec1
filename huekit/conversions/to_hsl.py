from __future__ import annotations

from ..colors import HSV, HSL


def hsv_to_hsl(hsv: HSV) -> HSL:
    """Convert HSV to HSL; hue is carried over unchanged."""
    l = (2 - hsv.s) * hsv.v
    s = hsv.s * hsv.v
    if l == 0:
        s = 0
    else:
        d = l if l <= 1 else 2 - l
        s = 0 if d == 0 else s / d
    l /= 2
    return HSL(hsv.h, s, l)

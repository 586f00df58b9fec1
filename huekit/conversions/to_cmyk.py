from __future__ import annotations
from typing import Union

from ..colors import RGB, RGBA, CMYK
from ..utils.num_utils import round_half_up


def rgb_to_cmyk(rgb: Union[RGB, RGBA]) -> CMYK:
    """
    Convert RGB (0..255) to CMYK percentages (0..100, rounded half-up).

    Pure black has no defined chroma, so c, m and y are 0 when k is 100.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    k = min(1 - r, 1 - g, 1 - b)
    if 1 - k == 0:
        c = m = y = 0
    else:
        c = (1 - r - k) / (1 - k)
        m = (1 - g - k) / (1 - k)
        y = (1 - b - k) / (1 - k)

    return CMYK(
        round_half_up(c * 100),
        round_half_up(m * 100),
        round_half_up(y * 100),
        round_half_up(k * 100),
    )

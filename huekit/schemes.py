"""
Color scheme generation.

A scheme is an ordered list of colors derived from one source color by a
fixed hue, tint or shade rule. All arithmetic happens in HSV; the samples are
converted to the requested output kind at the end.
"""
from __future__ import annotations
import math
import warnings
from typing import Any, Callable, List, Literal, Mapping, Union

import numpy as np

from .colors import HSV, RGB
from .conversions import convert, hsv_to_rgb, rgb_to_hsv, to_hsv
from .exceptions import SchemeWarning
from .normalizers.detect import is_color
from .types.color_types import ColorKind, ColorValue
from .types.scheme_types import DEFAULT_SCHEME_OPTIONS, SchemeName, SchemeOptions, resolve_scheme_name
from .utils.num_utils import clamp, wrap_hue

# Output kinds the samples are converted to; anything else returns raw HSV
SCHEME_OUTPUT_KINDS = {
    ColorKind.HEX,
    ColorKind.RGB,
    ColorKind.RGBA,
    ColorKind.HSL,
    ColorKind.HSLA,
    ColorKind.CMYK,
}


def _shift(h: float, delta: float) -> float:
    return wrap_hue(h + delta)


def _blend(hsv: HSV, mix: Callable[[np.ndarray], np.ndarray]) -> HSV:
    rgb = np.array(hsv_to_rgb(hsv).value, dtype=float)
    mixed = np.clip(np.floor(mix(rgb) + 0.5), 0, 255)
    return rgb_to_hsv(RGB(*(int(c) for c in mixed)))


def _tint(hsv: HSV, amount: float) -> HSV:
    """Blend toward white."""
    return _blend(hsv, lambda rgb: rgb + (255 - rgb) * amount)


def _shade(hsv: HSV, amount: float) -> HSV:
    """Blend toward black."""
    return _blend(hsv, lambda rgb: rgb * amount)


def _monochromatic(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    h, s, v = hsv.value

    if opt.algorithm == 1:
        return [
            _tint(hsv, opt.tint1),
            _tint(hsv, opt.tint2),
            hsv,
            _shade(hsv, opt.shade1),
            _shade(hsv, opt.shade2),
        ]

    if opt.algorithm in (2, 3):
        samples = [hsv]
        for _ in range(int(opt.distance)):
            v = clamp(v - opt.step, 0, 1)
            if opt.algorithm == 2:
                s = clamp(s - opt.step, 0, 1)
            samples.append(HSV(h, s, v))
        return samples

    # brighter pair, the source, darker pair
    lighter_1, lighter_2, darker_1, darker_2 = (
        float(x) for x in np.clip(v + opt.step * np.array([2.0, 1.0, -1.0, -2.0]), 0, 1)
    )
    return [
        HSV(h, s, lighter_1),
        HSV(h, s, lighter_2),
        hsv,
        HSV(h, s, darker_1),
        HSV(h, s, darker_2),
    ]


def _complementary(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    return [hsv, hsv.replace(h=_shift(hsv.h, 180.0))]


def _double_complementary(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    samples = [hsv]
    h = _shift(hsv.h, 180.0)
    samples.append(hsv.replace(h=h))
    h = _shift(h, opt.angle)
    samples.append(hsv.replace(h=h))
    h = _shift(h, 180.0)
    samples.append(hsv.replace(h=h))
    return samples


def _analogous(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    return [
        hsv.replace(h=_shift(hsv.h, opt.angle)),
        hsv,
        hsv.replace(h=_shift(hsv.h, 0.0 - opt.angle)),
    ]


def _rotations(hsv: HSV, step: float, count: int) -> List[HSV]:
    samples = [hsv]
    h = hsv.h
    for _ in range(count - 1):
        h = _shift(h, step)
        samples.append(hsv.replace(h=h))
    return samples


def _triadic(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    return _rotations(hsv, 120.0, 3)


def _square(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    return _rotations(hsv, 90.0, 4)


def _tetradic(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    h = _shift(hsv.h, -1 * opt.angle)
    return [
        hsv,
        hsv.replace(h=_shift(hsv.h, 180.0)),
        hsv.replace(h=h),
        hsv.replace(h=_shift(h, 180.0)),
    ]


def _split_complementary(hsv: HSV, opt: SchemeOptions) -> List[HSV]:
    return [
        hsv.replace(h=_shift(hsv.h, 180.0 - opt.angle)),
        hsv,
        hsv.replace(h=_shift(hsv.h, 180.0 + opt.angle)),
    ]


SCHEME_BUILDERS: dict[SchemeName, Callable[[HSV, SchemeOptions], List[HSV]]] = {
    SchemeName.MONOCHROMATIC: _monochromatic,
    SchemeName.COMPLEMENTARY: _complementary,
    SchemeName.DOUBLE_COMPLEMENTARY: _double_complementary,
    SchemeName.ANALOGOUS: _analogous,
    SchemeName.TRIADIC: _triadic,
    SchemeName.TETRADIC: _tetradic,
    SchemeName.SQUARE: _square,
    SchemeName.SPLIT_COMPLEMENTARY: _split_complementary,
}


def _convert_samples(samples: List[HSV], fmt: Union[str, ColorKind, None], alpha: float) -> List[ColorValue]:
    kind = ColorKind.from_name(fmt) if fmt is not None else ColorKind.UNKNOWN
    if kind not in SCHEME_OUTPUT_KINDS:
        return list(samples)
    return [convert(sample, kind, alpha) for sample in samples]


def generate_scheme(
    color: Any,
    name: Union[str, SchemeName],
    fmt: Union[str, ColorKind, None] = None,
    options: Union[SchemeOptions, Mapping[str, Any], None] = None,
) -> Union[List[ColorValue], Literal[False]]:
    """
    Create a color scheme around ``color``.

    Args:
        color: Source color of any kind
        name: Scheme name or alias (``"triad"``, ``"split"``, ...)
        fmt: Output kind (hex, rgb, rgba, hsl, hsla, cmyk); anything else
            returns the raw HSV samples
        options: Overrides for :class:`SchemeOptions`

    Returns:
        List of colors; an empty list plus a SchemeWarning for an unknown
        scheme name; False plus a SchemeWarning when ``color`` cannot be
        read as HSV
    """
    opt = DEFAULT_SCHEME_OPTIONS.merged(options)

    if not is_color(color):
        warnings.warn("The value is not a supported color format", SchemeWarning, stacklevel=2)
        return False
    hsv = to_hsv(color)
    if not all(math.isfinite(channel) for channel in hsv.value):
        warnings.warn(f"Cannot build a scheme from {hsv!r}", SchemeWarning, stacklevel=2)
        return False

    scheme_name = resolve_scheme_name(name)
    if scheme_name is None:
        warnings.warn(f"Unknown scheme name: {name!r}", SchemeWarning, stacklevel=2)
        return []

    samples = SCHEME_BUILDERS[scheme_name](hsv, opt)
    return _convert_samples(samples, fmt, opt.alpha)

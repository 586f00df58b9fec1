import math

import pytest

from huekit.types import ColorKind, SchemeName, SchemeOptions, DEFAULT_SCHEME_OPTIONS, resolve_scheme_name
from huekit.exceptions import SchemeWarning
from huekit.utils import (
    round_half_up,
    floor_int,
    ceil_int,
    clamp,
    wrap_hue,
    format_number,
    value_or_default,
)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-0.5) == 0
    assert round_half_up(1.49) == 1
    assert isinstance(round_half_up(1.7), int)
    assert math.isnan(round_half_up(float("nan")))


def test_floor_and_ceil():
    assert floor_int(127.5) == 127
    assert ceil_int(127.5) == 128
    assert math.isinf(ceil_int(float("inf")))


def test_clamp_keeps_type():
    assert clamp(300, 0, 255) == 255
    assert isinstance(clamp(300, 0, 255), int)
    assert clamp(-0.5, 0, 1) == 0.0
    assert isinstance(clamp(-0.5, 0, 1), float)
    assert clamp(0.25, 0, 1) == 0.25


@pytest.mark.parametrize("hue, expected", [
    (0, 0),
    (360, 0),
    (720, 0),
    (-480, 240),
    (370.5, 10.5),
    (359.9, 359.9),
])
def test_wrap_hue(hue, expected):
    assert wrap_hue(hue) == pytest.approx(expected)


def test_wrap_hue_huge_and_non_finite():
    assert wrap_hue(360 * 5000 + 10) == pytest.approx(10)
    assert wrap_hue(-360 * 5000 - 10) == pytest.approx(350)
    assert math.isinf(wrap_hue(float("inf")))
    assert math.isnan(wrap_hue(float("nan")))


def test_format_number():
    assert format_number(120.0) == "120"
    assert format_number(0.5) == "0.5"
    assert format_number(7) == "7"
    assert format_number(float("nan")) == "NaN"
    assert format_number(float("-inf")) == "-Infinity"


def test_value_or_default():
    assert value_or_default(None, 1) == 1
    assert value_or_default(0, 1) == 0


def test_color_kind_from_name():
    assert ColorKind.from_name("RGBA") is ColorKind.RGBA
    assert ColorKind.from_name(ColorKind.HSV) is ColorKind.HSV
    assert ColorKind.from_name("lab") is ColorKind.UNKNOWN


def test_resolve_scheme_name():
    assert resolve_scheme_name("Triadic") is SchemeName.TRIADIC
    assert resolve_scheme_name("split") is SchemeName.SPLIT_COMPLEMENTARY
    assert resolve_scheme_name("comp") is SchemeName.COMPLEMENTARY
    assert resolve_scheme_name(SchemeName.SQUARE) is SchemeName.SQUARE
    assert resolve_scheme_name("rainbow") is None


def test_scheme_options_merge():
    assert DEFAULT_SCHEME_OPTIONS.merged(None) is DEFAULT_SCHEME_OPTIONS
    merged = DEFAULT_SCHEME_OPTIONS.merged({"angle": 45})
    assert merged.angle == 45
    assert merged.step == DEFAULT_SCHEME_OPTIONS.step
    custom = SchemeOptions(algorithm=3)
    assert DEFAULT_SCHEME_OPTIONS.merged(custom) is custom


def test_scheme_options_unknown_keys_warn():
    with pytest.warns(SchemeWarning, match="bogus"):
        merged = DEFAULT_SCHEME_OPTIONS.merged({"bogus": 1, "alpha": 0.5})
    assert merged.alpha == 0.5

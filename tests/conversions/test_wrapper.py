import pytest

from huekit.colors import RGB, RGBA, HSV, HSL, HSLA, CMYK
from huekit.conversions import to_rgb, to_rgba, to_hex, to_hsv, to_hsl, to_hsla, to_cmyk, convert
from huekit.exceptions import UnknownFormatError
from huekit.types import ColorKind
from ..samples import samples_rgb_hex, samples_rgb_cmyk


def test_to_rgb_from_every_kind():
    assert to_rgb("#ff0000") == RGB(255, 0, 0)
    assert to_rgb(RGB(255, 0, 0)) == RGB(255, 0, 0)
    assert to_rgb(RGBA(255, 0, 0, 0.5)) == RGB(255, 0, 0)
    assert to_rgb(HSV(0, 1, 1)) == RGB(255, 0, 0)
    assert to_rgb(HSL(0, 1, 0.5)) == RGB(255, 0, 0)
    assert to_rgb(HSLA(0, 1, 0.5, 0.1)) == RGB(255, 0, 0)
    assert to_rgb(CMYK(0, 100, 100, 0)) == RGB(255, 0, 0)


@pytest.mark.parametrize("value", ["red", "rgb(1,2,3)", None, 42, (255, 0, 0)])
def test_to_rgb_rejects_non_colors(value):
    with pytest.raises(UnknownFormatError):
        to_rgb(value)


def test_to_rgba_defaults_alpha_to_one():
    assert to_rgba("#ff0000") == RGBA(255, 0, 0, 1)
    assert to_rgba(HSV(120, 1, 1), 0.25) == RGBA(0, 255, 0, 0.25)


def test_to_rgba_keeps_carried_alpha():
    source = RGBA(1, 2, 3, 0.5)
    assert to_rgba(source) is source
    assert to_rgba(source, 0) == RGBA(1, 2, 3, 0.5)
    assert to_rgba(source, 0.8) == RGBA(1, 2, 3, 0.8)
    assert source.a == 0.5
    assert to_rgba(HSLA(0, 1, 0.5, 0.3)) == RGBA(255, 0, 0, 0.3)


def test_to_hsla_alpha_rules():
    source = HSLA(10, 0.5, 0.5, 0.3)
    assert to_hsla(source) is source
    assert to_hsla(source, 0.9).a == 0.9
    assert to_hsla("#ff0000") == HSLA(0.0, 1.0, 0.5, 1)
    assert to_hsla(RGBA(255, 0, 0, 0.2)).a == 0.2


def test_to_hex():
    for rgb, hex_value in samples_rgb_hex.items():
        assert to_hex(RGB(*rgb)) == hex_value
    assert to_hex("#ABC") == "#aabbcc"
    assert to_hex("#FF0000") == "#ff0000"
    assert to_hex(HSV(240, 1, 1)) == "#0000ff"


def test_to_hex_clamps_and_zero_pads():
    assert to_hex(RGB(300, -4, 5)) == "#ff0005"
    assert to_hex(RGB(float("nan"), 0, 0)) == "#000000"


def test_to_hex_rejects_other_strings():
    with pytest.raises(UnknownFormatError):
        to_hex("not a color")


def test_same_kind_is_identity():
    hsv = HSV(400, 2, 2)
    hsl = HSL(10, 0.5, 0.5)
    cmyk = CMYK(1, 2, 3, 4)
    assert to_hsv(hsv) is hsv
    assert to_hsl(hsl) is hsl
    assert to_cmyk(cmyk) is cmyk


def test_to_hsv_from_hsl_goes_direct():
    h, s, v = to_hsv(HSL(120, 1 / 3, 0.375))
    assert h == 120
    assert s == pytest.approx(0.5)
    assert v == pytest.approx(0.5)


def test_to_hsl_strips_alpha():
    assert to_hsl(HSLA(10, 0.5, 0.5, 0.3)) == HSL(10, 0.5, 0.5)


def test_to_cmyk():
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert to_cmyk(RGB(*rgb)) == CMYK(*cmyk)
    assert to_cmyk("#ff0000") == CMYK(0, 100, 100, 0)


def test_convert_dispatch():
    assert convert("#ff0000", "cmyk") == CMYK(0, 100, 100, 0)
    assert convert("#ff0000", "HSV") == HSV(0.0, 1.0, 1.0)
    assert convert(RGB(0, 0, 255), ColorKind.HEX) == "#0000ff"
    assert convert("#ff0000", "rgba", 0.5) == RGBA(255, 0, 0, 0.5)
    assert convert("#ff0000") == RGB(255, 0, 0)


def test_convert_unknown_kind_returns_input():
    assert convert("#ff0000", "lab") == "#ff0000"

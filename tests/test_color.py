import pytest

from huekit import Color
from huekit.colors import RGB, RGBA, HSV, HSL, HSLA, CMYK
from huekit.exceptions import SchemeWarning
from huekit.types import ColorKind, SchemeOptions


def test_default_value_is_black():
    assert Color().value == "#000000"
    assert Color("").value == "#000000"
    assert Color(None).value == "#000000"


def test_value_is_parsed():
    assert Color("#F00").value == "#ff0000"
    assert Color("rgb(255, 0, 0)").value == RGB(255, 0, 0)
    assert Color(HSV(0, 1, 1)).kind is ColorKind.HSV


def test_invalid_value_leaves_color_empty():
    color = Color("junk")
    assert color.value is None
    assert color.kind is ColorKind.UNKNOWN
    assert color.to_rgb() is None
    assert color.darken() is None
    assert color.hex is None
    assert color.rgba is None
    assert color.is_dark() is None
    assert color.scheme("triadic") is None
    assert str(color) == ""


def test_value_setter():
    color = Color()
    color.value = "hsl(120, 1, 0.5)"
    assert color.value == HSL(120.0, 1.0, 0.5)


def test_in_place_conversions_chain():
    color = Color("#ff0000")
    assert color.to_rgb() is color
    assert color.value == RGB(255, 0, 0)
    assert color.to_cmyk().value == CMYK(0, 100, 100, 0)
    assert color.to_hsv().value == HSV(0.0, 1.0, 1.0)
    assert color.to_hsl().value == HSL(0.0, 1.0, 0.5)
    assert color.to_hex().value == "#ff0000"


def test_to_rgba_and_to_hsla_alpha():
    color = Color(RGBA(255, 0, 0, 0.5))
    assert color.to_rgba().value.a == 0.5
    assert color.to_rgba(0).value.a == 0.5
    assert color.to_rgba(0.8).value.a == 0.8
    assert Color("#ff0000").to_rgba().value == RGBA(255, 0, 0, 1)
    assert Color("#ff0000").to_hsla(0.3).value == HSLA(0.0, 1.0, 0.5, 0.3)


def test_properties_do_not_mutate():
    color = Color("#ff0000")
    assert color.rgb == RGB(255, 0, 0)
    assert color.hsv == HSV(0.0, 1.0, 1.0)
    assert color.hsl == HSL(0.0, 1.0, 0.5)
    assert color.cmyk == CMYK(0, 100, 100, 0)
    assert color.websafe == "#ff0000"
    assert color.value == "#ff0000"


def test_alpha_properties_use_options():
    assert Color("#ff0000").rgba == RGBA(255, 0, 0, 1)
    assert Color("#ff0000", {"alpha": 0.5}).rgba == RGBA(255, 0, 0, 0.5)
    assert Color("#ff0000", SchemeOptions(alpha=0.2)).hsla.a == 0.2
    held = RGBA(1, 2, 3, 0.7)
    assert Color(held, {"alpha": 0.5}).rgba is held


def test_options_layer_over_defaults():
    color = Color("#ff0000", {"angle": 45})
    assert color.options.angle == 45
    color.options = {"step": 0.2}
    assert color.options.angle == 30
    assert color.options.step == 0.2


def test_adjustments():
    assert Color("#ff0000").hue_shift(120).hex == "#00ff00"
    assert Color("#ff0000").darken().value == "#f50000"
    assert Color("#000000").lighten(10).value == "#0a0a0a"
    assert Color("#ff0000").grayscale().value == "#363636"
    assert Color(RGB(100, 30, 200)).to_websafe().value == RGB(102, 51, 204)


def test_queries():
    assert Color("#000000").is_dark() is True
    assert Color("#ffffff").is_light() is True
    assert Color("#f00").equal("#ff0000")
    assert Color("#f00").equal(Color(RGB(255, 0, 0)))
    assert not Color("#f00").equal("#00f")


def test_scheme():
    color = Color("#ff0000")
    assert color.scheme("triadic", "hex") == ["#ff0000", "#00ff00", "#0000ff"]
    assert [c.h for c in color.scheme("analogous")] == pytest.approx([30, 0, 330])


def test_scheme_uses_held_options():
    color = Color("#ff0000", {"angle": 60})
    assert [c.h for c in color.scheme("analogous")] == pytest.approx([60, 0, 300])
    assert [c.h for c in color.scheme("analogous", options={"angle": 10})] == pytest.approx([10, 0, 350])


def test_scheme_unknown_name():
    with pytest.warns(SchemeWarning):
        assert Color("#ff0000").scheme("rainbow") == []


def test_str():
    assert str(Color("#ABC")) == "#aabbcc"
    assert str(Color("rgb(1, 2, 3)")) == "rgb(1,2,3)"


def test_random():
    color = Color()
    assert color.random("hsl") is color
    assert color.kind is ColorKind.HSL
    assert isinstance(Color.random_color("rgba", 0.5), RGBA)


def test_static_is_color():
    assert Color.is_color("rgb(1, 2, 3)")
    assert Color.is_color("#abc")
    assert Color.is_color(CMYK(0, 0, 0, 0))
    assert not Color.is_color("junk")
    assert not Color.is_color(None)

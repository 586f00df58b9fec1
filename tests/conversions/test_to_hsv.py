import pytest

from huekit.colors import RGB, RGBA, HSV, HSL, HSLA
from huekit.conversions import rgb_to_hsv, hsl_to_hsv, hex_to_hsv, hsv_to_hsl
from ..samples import samples_rgb_hsv, samples_hsv_hsl


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(RGB(r, g, b))

        assert h == pytest.approx(h_exp)
        assert s == pytest.approx(s_exp)
        assert v == pytest.approx(v_exp)


def test_rgb_to_hsv_hue_stays_below_360():
    # red branch with g < b adds 360
    h, _, _ = rgb_to_hsv(RGB(255, 0, 1))
    assert 0 <= h < 360
    assert h == pytest.approx(360 - 60 / 255)


def test_rgb_to_hsv_accepts_rgba():
    assert rgb_to_hsv(RGBA(0, 0, 255, 0.5)) == rgb_to_hsv(RGB(0, 0, 255))


def test_hsv_to_hsl():
    for hsv, (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h, s, l = hsv_to_hsl(HSV(*hsv))

        assert h == h_exp
        assert s == pytest.approx(s_exp)
        assert l == pytest.approx(l_exp)


def test_hsl_to_hsv():
    for (h_exp, s_exp, v_exp), hsl in samples_hsv_hsl.items():
        if hsl[2] in (0, 1):
            # black and white lose saturation on the way to HSL
            continue
        h, s, v = hsl_to_hsv(HSL(*hsl))

        assert h == h_exp
        assert s == pytest.approx(s_exp)
        assert v == pytest.approx(v_exp)


def test_hsl_to_hsv_ignores_alpha():
    assert hsl_to_hsv(HSLA(120, 1 / 3, 0.375, 0.2)) == hsl_to_hsv(HSL(120, 1 / 3, 0.375))


def test_hex_to_hsv():
    assert hex_to_hsv("#00ff00") == HSV(120.0, 1.0, 1.0)
    assert hex_to_hsv("#fff") == HSV(0, 0.0, 1.0)

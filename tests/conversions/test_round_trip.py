from huekit.colors import RGB
from huekit.conversions import (
    rgb_to_hsv,
    hsv_to_rgb,
    hsv_to_hsl,
    hsl_to_rgb,
    rgb_to_hex,
    hex_to_rgb,
    to_hsv,
    to_hex,
)
from ..samples import samples_rgb_grid


def test_rgb_hsv_rgb():
    for rgb in samples_rgb_grid:
        assert hsv_to_rgb(rgb_to_hsv(RGB(*rgb))) == RGB(*rgb)


def test_rgb_hsl_rgb():
    for rgb in samples_rgb_grid:
        assert hsl_to_rgb(hsv_to_hsl(rgb_to_hsv(RGB(*rgb)))) == RGB(*rgb)


def test_rgb_hex_rgb():
    for rgb in samples_rgb_grid:
        assert hex_to_rgb(rgb_to_hex(RGB(*rgb))) == RGB(*rgb)


def test_hex_hsv_hex():
    for rgb in samples_rgb_grid:
        hex_value = rgb_to_hex(RGB(*rgb))
        assert to_hex(to_hsv(hex_value)) == hex_value

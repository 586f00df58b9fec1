from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

Scalar = int | float
# A color is either a hex string or one of the typed records
ColorValue = Union[str, "ColorBase"]


class ColorKind(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSV = "hsv"
    HSL = "hsl"
    HSLA = "hsla"
    CMYK = "cmyk"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str | ColorKind) -> ColorKind:
        """
        Look up a kind case-insensitively.

        Args:
            name: Kind name such as ``"RGB"`` or a ColorKind member

        Returns:
            The matching ColorKind, or ColorKind.UNKNOWN
        """
        if isinstance(name, ColorKind):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            return cls.UNKNOWN


ALPHA_KINDS = {ColorKind.RGBA, ColorKind.HSLA}
HUE_KINDS = {ColorKind.HSV, ColorKind.HSL, ColorKind.HSLA}

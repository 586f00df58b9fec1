from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, WithAlpha, build_registry


class RGB(ColorBase):
    """Red, green, blue as integers in 0..255."""
    num_channels: ClassVar[int] = 3
    kind:       ClassVar[ColorKind] = ColorKind.RGB
    channels:   ClassVar[Tuple[str, str, str]] = ("r", "g", "b")
    defaults:   ClassVar[Tuple[int, int, int]] = (0, 0, 0)


class RGBA(ColorBase, WithAlpha):
    """RGB plus an alpha float in 0..1."""
    num_channels: ClassVar[int] = 4
    kind:       ClassVar[ColorKind] = ColorKind.RGBA
    channels:   ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "a")
    defaults:   ClassVar[Tuple[int, int, int, float]] = (0, 0, 0, 1)
    base_class: ClassVar[type[ColorBase]] = RGB


rgb_kind_to_class = build_registry(RGB, RGBA)

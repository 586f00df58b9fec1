from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, WithAlpha, build_registry


class HSL(ColorBase):
    num_channels: ClassVar[int] = 3
    kind:       ClassVar[ColorKind] = ColorKind.HSL
    channels:   ClassVar[Tuple[str, str, str]] = ("h", "s", "l")
    defaults:   ClassVar[Tuple[float, float, float]] = (0, 0, 0)


class HSLA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    kind:       ClassVar[ColorKind] = ColorKind.HSLA
    channels:   ClassVar[Tuple[str, str, str, str]] = ("h", "s", "l", "a")
    defaults:   ClassVar[Tuple[float, float, float, float]] = (0, 0, 0, 1)
    base_class: ClassVar[type[ColorBase]] = HSL


hsl_kind_to_class = build_registry(HSL, HSLA)

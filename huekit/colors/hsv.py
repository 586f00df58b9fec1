from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, build_registry


class HSV(ColorBase):
    num_channels: ClassVar[int] = 3
    kind:       ClassVar[ColorKind] = ColorKind.HSV
    channels:   ClassVar[Tuple[str, str, str]] = ("h", "s", "v")
    defaults:   ClassVar[Tuple[float, float, float]] = (0, 0, 0)


hsv_kind_to_class = build_registry(HSV)

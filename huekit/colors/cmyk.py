from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, build_registry


class CMYK(ColorBase):
    """Cyan, magenta, yellow, key as integer percentages in 0..100."""
    num_channels: ClassVar[int] = 4
    kind:       ClassVar[ColorKind] = ColorKind.CMYK
    channels:   ClassVar[Tuple[str, str, str, str]] = ("c", "m", "y", "k")
    defaults:   ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)


cmyk_kind_to_class = build_registry(CMYK)

"""Classify arbitrary values into color kinds."""
from __future__ import annotations
import re
from typing import Any

from ..colors import RGB, RGBA, HSV, HSL, HSLA, CMYK, unified_kind_to_class
from ..types.color_types import ColorKind

HEX_PATTERN = re.compile(r"(^#[0-9A-F]{6}$)|(^#[0-9A-F]{3}$)", re.IGNORECASE)


def is_hex(color: Any) -> bool:
    """True for ``#RGB`` / ``#RRGGBB`` strings, case-insensitive."""
    return isinstance(color, str) and HEX_PATTERN.match(color) is not None


def is_rgb(color: Any) -> bool:
    return type(color) is RGB


def is_rgba(color: Any) -> bool:
    return type(color) is RGBA


def is_hsv(color: Any) -> bool:
    return type(color) is HSV


def is_hsl(color: Any) -> bool:
    return type(color) is HSL


def is_hsla(color: Any) -> bool:
    return type(color) is HSLA


def is_cmyk(color: Any) -> bool:
    return type(color) is CMYK


_RECORD_KINDS: dict[type, ColorKind] = {cls: kind for kind, cls in unified_kind_to_class.items()}


def color_kind(color: Any) -> ColorKind:
    """
    Return the kind of a value.

    Hex strings are checked first, then the typed records.

    Args:
        color: Any value

    Returns:
        The matching ColorKind, ColorKind.UNKNOWN when nothing matches
    """
    if is_hex(color):
        return ColorKind.HEX
    return _RECORD_KINDS.get(type(color), ColorKind.UNKNOWN)


def is_color(color: Any) -> bool:
    """Check if value is a supported color; empty or None values never are."""
    if not color:
        return False
    return color_kind(color) is not ColorKind.UNKNOWN

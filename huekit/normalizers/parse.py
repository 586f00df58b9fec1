"""Turn text into colors: hex expansion, CSS-like function parsing, construction."""
from __future__ import annotations
import math
import re
from typing import Any, List, Union

from ..colors import ColorBase, RGB, RGBA, HSV, HSL, HSLA, CMYK
from ..exceptions import InvalidInputError
from ..types.color_types import ColorKind, ColorValue, Scalar
from ..utils.default import DEFAULT_ALPHA, DEFAULT_COLOR
from .detect import is_color

_SHORTHAND_HEX = re.compile(r"^#([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?|-?\.\d+")
_LEADING_NAME = re.compile(r"^[a-z]+")


def expand_hex(hex_value: Any) -> Any:
    """
    Expand shorthand form (e.g. "#03F") to full form (e.g. "#0033FF").

    A bare string gets a leading ``#``. Case is left alone. Typed color
    records pass through untouched.

    Raises:
        InvalidInputError: for anything that is neither a string nor a color
    """
    if not isinstance(hex_value, str):
        if is_color(hex_value):
            return hex_value
        raise InvalidInputError(f"Value is not a string: {hex_value!r}")
    if not hex_value.startswith("#"):
        hex_value = "#" + hex_value
    match = _SHORTHAND_HEX.match(hex_value)
    if match:
        return "#" + "".join(digit * 2 for digit in match.groups())
    return hex_value


def _argument_parts(text: str) -> List[str]:
    start = text.find("(")
    if start == -1:
        body = _LEADING_NAME.sub("", text)
    else:
        end = text.find(")", start)
        body = text[start + 1:end] if end != -1 else text[start + 1:]
    if "," in body:
        return body.split(",")
    # CSS 4 space separated syntax, optionally with "/ alpha"
    return re.split(r"[\s/]+", body.strip())


def _number(parts: List[str], index: int, as_float: bool, missing: Scalar = math.nan) -> Scalar:
    if index >= len(parts):
        return missing
    match = _NUMBER.search(parts[index])
    if match is None:
        return math.nan
    number = float(match.group())
    return number if as_float else int(number)


def parse_color(text: str) -> Union[ColorValue, str]:
    """
    Parse from string to color kind.

    ``#...`` strings come back as expanded lowercase hex. Function forms such
    as ``rgb(255, 0, 0)`` or ``hsla(120, 0.5, 0.5, 0.3)`` become records;
    numbers are floats for the hs* kinds and truncated integers otherwise
    (rgba alpha is always a float). Malformed or missing channels are NaN,
    a missing alpha is 1. Anything else is returned lower-cased, which
    callers must treat as "not a color".

    Args:
        text: Color text

    Returns:
        Hex string, a color record, or the unrecognized lower-cased input
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Value is not a string: {text!r}")
    color = text.strip().lower()

    if color.startswith("#"):
        return expand_hex(color)

    as_float = "hs" in color
    parts = _argument_parts(color)

    def n(index: int) -> Scalar:
        return _number(parts, index, as_float)

    def alpha() -> Scalar:
        return _number(parts, 3, True, missing=DEFAULT_ALPHA)

    # longer keywords first: "rgba" contains "rgb", "hsla" contains "hsl"
    if "rgba" in color:
        return RGBA(n(0), n(1), n(2), alpha())
    if "rgb" in color:
        return RGB(n(0), n(1), n(2))
    if "cmyk" in color:
        return CMYK(n(0), n(1), n(2), n(3))
    if "hsv" in color:
        return HSV(n(0), n(1), n(2))
    if "hsla" in color:
        return HSLA(n(0), n(1), n(2), alpha())
    if "hsl" in color:
        return HSL(n(0), n(1), n(2))
    return color


def create_color(kind: Union[str, ColorKind] = ColorKind.HEX, source: Union[str, ColorBase] = DEFAULT_COLOR) -> ColorValue:
    """
    Create color in specified kind.

    Args:
        kind: Target kind name, case-insensitive
        source: Color text or record; anything that is not a color becomes black

    Returns:
        The source color converted to ``kind``
    """
    from ..conversions.wrapper import convert  # local import to avoid cycles

    base_color = parse_color(source) if isinstance(source, str) else source
    if not is_color(base_color):
        base_color = DEFAULT_COLOR
    return convert(base_color, kind)

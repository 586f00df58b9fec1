"""
Stateful color wrapper.

:class:`Color` holds one current value and a set of scheme options. The
``to_*`` and adjustment methods replace the held value and return ``self``
so calls can be chained; the properties of the same names return converted
copies and leave the held value alone.

    >>> Color("#ff0000").hue_shift(120).hex
    '#00ff00'

A Color is meant to have a single owner; it is not safe to share between
threads without outside locking.
"""
from __future__ import annotations
from typing import Any, List, Mapping, Optional, Union

from . import routines
from .conversions import to_cmyk, to_hex, to_hsl, to_hsla, to_hsv, to_rgb, to_rgba, websafe
from .colors import CMYK, HSL, HSLA, HSV, RGB, RGBA
from .normalizers.detect import color_kind, is_color
from .normalizers.parse import parse_color
from .schemes import generate_scheme
from .types.color_types import ColorKind, ColorValue, Scalar
from .types.scheme_types import DEFAULT_SCHEME_OPTIONS, SchemeName, SchemeOptions
from .utils.default import DEFAULT_ALPHA, DEFAULT_COLOR

OptionsLike = Union[SchemeOptions, Mapping[str, Any], None]


class Color:
    __slots__ = ('_value', '_options')

    def __init__(self, value: Any = DEFAULT_COLOR, options: OptionsLike = None) -> None:
        """
        Args:
            value: Hex or CSS-like string, or a color record. Empty values
                fall back to black; anything unreadable leaves the Color empty.
            options: Scheme options overriding the defaults
        """
        self._value: Optional[ColorValue] = None
        self._options: SchemeOptions = DEFAULT_SCHEME_OPTIONS
        self.value = value
        self.options = options

    # ------------------ STATE ------------------
    @property
    def value(self) -> Optional[ColorValue]:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if not value:
            value = DEFAULT_COLOR
        if isinstance(value, str):
            value = parse_color(value)
        self._value = value if is_color(value) else None

    @property
    def options(self) -> SchemeOptions:
        return self._options

    @options.setter
    def options(self, options: OptionsLike) -> None:
        # Always layered over the defaults, never over the previous options
        self._options = DEFAULT_SCHEME_OPTIONS.merged(options)

    @property
    def kind(self) -> ColorKind:
        return color_kind(self._value)

    # ------------------ IN-PLACE CONVERSIONS ------------------
    def to_rgb(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_rgb(self._value)
        return self

    def to_rgba(self, alpha: Optional[Scalar] = None) -> Optional[Color]:
        """Convert to RGBA; a held RGBA keeps its alpha unless a non-zero one is given."""
        if self._value is None:
            return None
        self._value = to_rgba(self._value, alpha)
        return self

    def to_hex(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_hex(self._value)
        return self

    def to_hsv(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_hsv(self._value)
        return self

    def to_hsl(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_hsl(self._value)
        return self

    def to_hsla(self, alpha: Optional[Scalar] = None) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_hsla(self._value, alpha)
        return self

    def to_cmyk(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = to_cmyk(self._value)
        return self

    def to_websafe(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = websafe(self._value)
        return self

    # ------------------ IN-PLACE ADJUSTMENTS ------------------
    def darken(self, amount: Scalar = 10) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = routines.darken(self._value, amount)
        return self

    def lighten(self, amount: Scalar = 10) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = routines.lighten(self._value, amount)
        return self

    def hue_shift(self, angle: Scalar) -> Optional[Color]:
        """Rotate the held color by ``angle`` degrees."""
        if self._value is None:
            return None
        self._value = routines.hue_shift(self._value, angle)
        return self

    def grayscale(self) -> Optional[Color]:
        if self._value is None:
            return None
        self._value = routines.grayscale(self._value)
        return self

    def random(self, kind: Union[str, ColorKind] = ColorKind.HEX, alpha: Scalar = DEFAULT_ALPHA) -> Color:
        """Replace the held value with a random color."""
        self._value = routines.random_color(kind, alpha)
        return self

    # ------------------ CONVERTED COPIES ------------------
    @property
    def rgb(self) -> Optional[RGB]:
        return to_rgb(self._value) if self._value is not None else None

    @property
    def rgba(self) -> Optional[RGBA]:
        """Held value as RGBA; ``options.alpha`` fills in a missing alpha."""
        if self._value is None:
            return None
        if isinstance(self._value, RGBA):
            return self._value
        return to_rgba(self._value, self._options.alpha)

    @property
    def hex(self) -> Optional[str]:
        return to_hex(self._value) if self._value is not None else None

    @property
    def hsv(self) -> Optional[HSV]:
        return to_hsv(self._value) if self._value is not None else None

    @property
    def hsl(self) -> Optional[HSL]:
        return to_hsl(self._value) if self._value is not None else None

    @property
    def hsla(self) -> Optional[HSLA]:
        if self._value is None:
            return None
        if isinstance(self._value, HSLA):
            return self._value
        return to_hsla(self._value, self._options.alpha)

    @property
    def cmyk(self) -> Optional[CMYK]:
        return to_cmyk(self._value) if self._value is not None else None

    @property
    def websafe(self) -> Optional[ColorValue]:
        return websafe(self._value) if self._value is not None else None

    # ------------------ QUERIES ------------------
    def is_dark(self) -> Optional[bool]:
        return routines.is_dark(self._value) if self._value is not None else None

    def is_light(self) -> Optional[bool]:
        return routines.is_light(self._value) if self._value is not None else None

    def scheme(
        self,
        name: Union[str, SchemeName],
        fmt: Union[str, ColorKind, None] = None,
        options: OptionsLike = None,
    ) -> Union[List[ColorValue], bool, None]:
        """
        Build a color scheme around the held value.

        Args:
            name: Scheme name or alias
            fmt: Output kind of the samples
            options: Per-call overrides layered over this Color's options

        Returns:
            The scheme (see :func:`huekit.schemes.generate_scheme`), or None
            when no value is held
        """
        if self._value is None:
            return None
        opt = self._options.merged(options)
        return generate_scheme(self._value, name, fmt, opt)

    def equal(self, other: Any) -> bool:
        if isinstance(other, Color):
            other = other.value
        return routines.equal(self._value, other)

    def __str__(self) -> str:
        if self._value is None:
            return ""
        return routines.to_display_string(self._value)

    def __repr__(self) -> str:
        return f"Color({self._value!r})"

    # ------------------ STATIC HELPERS ------------------
    @staticmethod
    def is_color(value: Any) -> bool:
        """Check if a string or record can be read as a color."""
        if isinstance(value, str):
            value = parse_color(value)
        return is_color(value)

    @staticmethod
    def random_color(kind: Union[str, ColorKind] = ColorKind.HEX, alpha: Scalar = DEFAULT_ALPHA) -> ColorValue:
        return routines.random_color(kind, alpha)

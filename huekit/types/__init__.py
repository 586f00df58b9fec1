from .color_types import ColorKind, ColorValue, Scalar, ALPHA_KINDS, HUE_KINDS
from .scheme_types import SchemeName, SchemeOptions, DEFAULT_SCHEME_OPTIONS, SCHEME_ALIASES, resolve_scheme_name

__all__ = [
    "ColorKind",
    "ColorValue",
    "Scalar",
    "ALPHA_KINDS",
    "HUE_KINDS",
    "SchemeName",
    "SchemeOptions",
    "DEFAULT_SCHEME_OPTIONS",
    "SCHEME_ALIASES",
    "resolve_scheme_name",
]

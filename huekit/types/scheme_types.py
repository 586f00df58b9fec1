from __future__ import annotations
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional, Union
import warnings

from ..exceptions import SchemeWarning


class SchemeName(str, Enum):
    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    DOUBLE_COMPLEMENTARY = "double-complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SQUARE = "square"
    SPLIT_COMPLEMENTARY = "split-complementary"


SCHEME_ALIASES: dict[str, SchemeName] = {
    "mono": SchemeName.MONOCHROMATIC,
    "complement": SchemeName.COMPLEMENTARY,
    "comp": SchemeName.COMPLEMENTARY,
    "double-complement": SchemeName.DOUBLE_COMPLEMENTARY,
    "double": SchemeName.DOUBLE_COMPLEMENTARY,
    "analog": SchemeName.ANALOGOUS,
    "triad": SchemeName.TRIADIC,
    "tetra": SchemeName.TETRADIC,
    "split-complement": SchemeName.SPLIT_COMPLEMENTARY,
    "split": SchemeName.SPLIT_COMPLEMENTARY,
}


def resolve_scheme_name(name: Union[str, SchemeName]) -> Optional[SchemeName]:
    """Map a scheme name or alias to its SchemeName, or None if unknown."""
    if isinstance(name, SchemeName):
        return name
    key = str(name).lower()
    try:
        return SchemeName(key)
    except ValueError:
        return SCHEME_ALIASES.get(key)


@dataclass(frozen=True)
class SchemeOptions:
    """Tuning knobs for scheme generation."""
    angle: float = 30
    algorithm: int = 1
    step: float = 0.1
    distance: int = 5
    tint1: float = 0.8
    tint2: float = 0.4
    shade1: float = 0.6
    shade2: float = 0.3
    alpha: float = 1

    def merged(self, options: Union[SchemeOptions, Mapping[str, Any], None] = None) -> SchemeOptions:
        """
        Return a copy of these options with ``options`` laid over them.

        Keys that are not option names are dropped with a SchemeWarning.

        Args:
            options: Another SchemeOptions, a mapping of overrides, or None

        Returns:
            New SchemeOptions instance
        """
        if options is None:
            return self
        if isinstance(options, SchemeOptions):
            return options
        known = {f.name for f in fields(self)}
        unknown = sorted(set(options) - known)
        if unknown:
            warnings.warn(
                f"Ignoring unknown scheme options: {', '.join(unknown)}",
                SchemeWarning,
                stacklevel=3,
            )
        return replace(self, **{k: v for k, v in options.items() if k in known})


DEFAULT_SCHEME_OPTIONS = SchemeOptions()

from __future__ import annotations
from abc import ABC
from typing import Any, ClassVar, Iterator, Self, Tuple

from ..types.color_types import ColorKind, Scalar, ALPHA_KINDS, HUE_KINDS
from ..utils.num_utils import format_number


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    kind:       ClassVar[ColorKind]
    channels:   ClassVar[Tuple[str, ...]]
    defaults:   ClassVar[Tuple[Scalar, ...]]
    _is_frozen: bool = False   # class-level default (instance gets its own attribute)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Expose every channel declared on the subclass as a read-only attribute
        for index, name in enumerate(cls.__dict__.get('channels', ())):
            setattr(cls, name, property(lambda self, i=index: self._value[i]))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Scalar, **named: Scalar) -> None:
        """
        Build a record from positional and/or named channel values.

        Values are stored as given: no clamping and no type coercion, so
        out-of-range or NaN channels survive until an algorithm looks at them.
        """
        if len(values) > self.num_channels:
            raise ValueError(
                f"{self.kind.value} expects at most {self.num_channels} channels, got {len(values)}"
            )
        channel_values = list(values) + list(self.defaults[len(values):])
        for name, value in named.items():
            if name not in self.channels:
                raise TypeError(f"{self.__class__.__name__} has no channel {name!r}")
            index = self.channels.index(name)
            if index < len(values):
                raise TypeError(f"{self.__class__.__name__} got channel {name!r} twice")
            channel_values[index] = value

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(channel_values)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color kind includes an alpha channel."""
        return self.kind in ALPHA_KINDS

    @property
    def has_hue(self) -> bool:
        """Check if this color kind includes a hue channel."""
        return self.kind in HUE_KINDS

    def replace(self, **changes: Scalar) -> Self:
        """Return a new record of the same kind with some channels swapped out."""
        current = dict(zip(self.channels, self._value))
        current.update(changes)
        return self.__class__(**current)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({parts})"

    def __str__(self) -> str:
        return f"{self.kind.value}({','.join(format_number(v) for v in self._value)})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    value: Tuple[Scalar, ...]
    base_class: ClassVar[type[ColorBase]]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, stored as given

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(*self.value[:self.alpha_index], alpha)  # type: ignore

    def without_alpha(self) -> ColorBase:
        """Return the alpha-free sibling record (RGBA → RGB, HSLA → HSL)."""
        return self.base_class(*self.value[:self.alpha_index])


def build_registry(*classes: type[ColorBase]) -> dict[ColorKind, type[ColorBase]]:
    return {cls.kind: cls for cls in classes}

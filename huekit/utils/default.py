from typing import Optional, TypeVar

T = TypeVar('T')

DEFAULT_ALPHA = 1
DEFAULT_COLOR = "#000000"
WEBSAFE_STEP = 51


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

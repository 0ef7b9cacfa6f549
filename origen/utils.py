"""Small helpers shared by the tool modules."""

from enum import Enum
from typing import Optional, TypeVar

from origen.exceptions import InvalidOptionError

E = TypeVar("E", bound=Enum)


def coerce_option(enum_cls: type[E], value, option: str, default: Optional[E] = None) -> E:
    """Turn a caller-supplied string into an enum member.

    ``None`` falls back to ``default``. Anything outside the enum raises
    InvalidOptionError naming the accepted values.
    """
    if value is None and default is not None:
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidOptionError(
            f"Invalid {option}: {value!r}. Expected one of: {allowed}",
            option=option,
        ) from None

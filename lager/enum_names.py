"""Conversion between enumeration members and their names."""

from __future__ import annotations

import enum
from typing import TypeVar

E = TypeVar("E", bound=enum.Enum)


def to_string(value: enum.Enum) -> str:
    """Return the name of an enumeration member.

    Aliases resolve to the name declared first for the value.
    """
    if not isinstance(value, enum.Enum):
        raise ValueError("unknown enum value")
    return value.name


def to_enum(enum_cls: type[E], name: str) -> E:
    """Return the member of ``enum_cls`` called ``name``."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
        raise TypeError(f"expected an enumeration class, got {enum_cls!r}")
    try:
        return enum_cls.__members__[name]
    except KeyError:
        raise ValueError("unknown enum name") from None
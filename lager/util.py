"""Small helpers shared across the library: tags, errors and visitors."""

from __future__ import annotations

import enum
import functools
from typing import Any, Callable, Mapping, TypeVar

T = TypeVar("T")


class Tag(enum.Enum):
    """How a value written into a node becomes visible."""

    TRANSACTIONAL = "transactional"
    AUTOMATIC = "automatic"


class NoValueError(Exception):
    """Raised when a view has not produced any value yet."""

    def __init__(self, message: str = "no_value_error") -> None:
        super().__init__(message)


def match(value: Any, cases: Mapping[type, Callable[[Any], T]]) -> T:
    """Call the handler registered for the type of ``value``.

    Handlers are tried in order and the first whose type ``value`` is an
    instance of wins.
    """
    for kind, handler in cases.items():
        if isinstance(value, kind):
            return handler(value)
    raise TypeError(f"no handler for value of type {type(value).__name__}")


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept any arguments, discard them and return ``None``."""
    del args, kwargs


def identity(x: T) -> T:
    """Return the argument unchanged: the composition of no functions."""
    return functools.reduce(lambda acc, fn: fn(acc), (), x)


def unwrap(x: Any) -> Any:
    """Strip state wrappers added by store enhancers.

    Wrappers expose an ``unwrap()`` method returning the value they wrap;
    layers are peeled until a plain value is reached, which is returned as is.
    """
    while True:
        peel = getattr(x, "unwrap", None)
        if not callable(peel):
            return x
        inner = peel()
        if inner is x:
            return x
        x = inner
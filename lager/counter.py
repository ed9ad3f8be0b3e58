"""A small counter application driven by single-character commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence, Union

from lager.nodes import RootNode
from lager.reader import Cursor
from lager.util import Tag, match


@dataclass(frozen=True)
class Model:
    """State of the counter."""

    value: int = 0


@dataclass(frozen=True)
class IncrementAction:
    """Raise the counter by one."""


@dataclass(frozen=True)
class DecrementAction:
    """Lower the counter by one."""


@dataclass(frozen=True)
class ResetAction:
    """Set the counter to ``new_value``."""

    new_value: int = 0


Action = Union[IncrementAction, DecrementAction, ResetAction]


def update(model: Model, action: Action) -> Model:
    """Return the model that results from applying ``action``."""
    return match(
        action,
        {
            IncrementAction: lambda _: replace(model, value=model.value + 1),
            DecrementAction: lambda _: replace(model, value=model.value - 1),
            ResetAction: lambda a: Model(a.new_value),
        },
    )


_INTENTS = {
    "+": IncrementAction,
    "-": DecrementAction,
    ".": ResetAction,
}


def intent(event: str) -> Optional[Action]:
    """Map an input character to an action, or ``None`` if it means nothing."""
    kind = _INTENTS.get(event)
    return kind() if kind is not None else None


def draw(model: Model) -> None:
    """Print the current value of the counter."""
    print(f"current value: {model.value}")


def _characters(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        yield from (ch for ch in line if not ch.isspace())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input and print each new counter value."""
    argparse.ArgumentParser(
        prog="counter",
        description="Counter driven by '+', '-' and '.' read from standard input.",
    ).parse_args(argv)

    store = Cursor(RootNode(Model(), Tag.AUTOMATIC))
    store.watch(draw)
    for event in _characters(sys.stdin):
        action = intent(event)
        if action is not None:
            store.update(lambda model: update(model, action))
    return 0
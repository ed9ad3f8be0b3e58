"""Nodes forming the graph through which values flow down and up.

Values are written into a node with ``push_down`` and become visible in two
phases: ``send_down`` makes the new value the last one of every affected node,
and ``notify`` then calls the observers, so that observers always see a
consistent graph.
"""

from __future__ import annotations

import abc
import weakref
from typing import Any, Callable, Iterable

from lager.util import Tag


def has_changed(a: Any, b: Any) -> bool:
    """Tell whether ``a`` differs from ``b``; incomparable values count as changed."""
    try:
        return not (a == b)
    except Exception:
        return True


class ReaderNode(abc.ABC):
    """A node holding a current value and the last value sent down."""

    def __init__(self, value: Any) -> None:
        self._current = value
        self._last = value
        self._children: list[weakref.ReferenceType[ReaderNode]] = []
        self._observers: list[Callable[[Any], Any]] = []
        self._needs_send_down = False
        self._needs_notify = False
        self._notifying = False

    @abc.abstractmethod
    def recompute(self) -> None:
        """Derive the current value from the parents."""

    @abc.abstractmethod
    def refresh(self) -> None:
        """Recompute this node and everything it depends on."""

    @property
    def current(self) -> Any:
        """The most recently pushed value, maybe not yet visible."""
        return self._current

    @property
    def last(self) -> Any:
        """The value visible to readers."""
        return self._last

    def link(self, child: ReaderNode) -> None:
        """Register ``child`` to receive values; it is held weakly."""
        if any(ref() is child for ref in self._children):
            raise ValueError("child node must not be linked twice")
        self._children.append(weakref.ref(child))

    def push_down(self, value: Any) -> None:
        """Store a new current value if it differs from the old one."""
        if has_changed(value, self._current):
            self._current = value
            self._needs_send_down = True

    def send_down(self) -> None:
        """Make the current value the last one and propagate to children."""
        self.recompute()
        if self._needs_send_down:
            self._last = self._current
            self._needs_send_down = False
            self._needs_notify = True
            for ref in list(self._children):
                child = ref()
                if child is not None:
                    child.send_down()

    def notify(self) -> None:
        """Call observers with the last value, then notify children."""
        if not self._needs_notify or self._needs_send_down:
            return
        self._needs_notify = False
        was_notifying = self._notifying
        self._notifying = True
        garbage = False
        try:
            for observer in list(self._observers):
                observer(self._last)
            for ref in self._children[: len(self._children)]:
                child = ref()
                if child is None:
                    garbage = True
                else:
                    child.notify()
        finally:
            self._notifying = was_notifying
        if garbage and not was_notifying:
            self._children = [ref for ref in self._children if ref() is not None]

    def observe(self, callback: Callable[[Any], Any]) -> Callable[[], None]:
        """Call ``callback`` with every notified value; return a disconnector."""
        self._observers.append(callback)

        def disconnect() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return disconnect

    @property
    def observer_count(self) -> int:
        """Number of connected observers."""
        return len(self._observers)


class CursorNode(ReaderNode):
    """A node that can also send values back up to its parents."""

    @abc.abstractmethod
    def send_up(self, value: Any) -> None:
        """Write ``value`` back towards the roots of the graph."""


class RootNode(CursorNode):
    """A node without parents that stores the value written into it."""

    def __init__(self, value: Any, tag: Tag = Tag.TRANSACTIONAL) -> None:
        super().__init__(value)
        self.tag = tag

    def recompute(self) -> None:
        """Roots have nothing to derive from."""

    def refresh(self) -> None:
        """Roots depend on nothing, so refreshing only recomputes this node."""
        self.recompute()

    def send_up(self, value: Any) -> None:
        """Store the value; automatic roots also publish it at once."""
        self.push_down(value)
        if self.tag is Tag.AUTOMATIC:
            self.send_down()
            self.notify()


class InnerNode(ReaderNode):
    """A node whose value is derived from one or more parent nodes."""

    def __init__(self, value: Any, parents: Iterable[ReaderNode]) -> None:
        super().__init__(value)
        self._parents = tuple(parents)

    @property
    def parents(self) -> tuple[ReaderNode, ...]:
        """The parent nodes, in order."""
        return self._parents

    def refresh(self) -> None:
        for parent in self._parents:
            parent.refresh()
        self.recompute()

    def push_up(self, value: Any) -> None:
        """Send ``value`` to the parent, or its items to each of the parents."""
        if len(self._parents) == 1:
            self._parents[0].send_up(value)
            return
        values = tuple(value)
        if len(values) != len(self._parents):
            raise ValueError(
                f"expected {len(self._parents)} values, got {len(values)}"
            )
        for parent, item in zip(self._parents, values):
            parent.send_up(item)


def current_from(parents: Iterable[ReaderNode]) -> Any:
    """The current value of a single parent, or a tuple of them for several."""
    values = tuple(parent.current for parent in parents)
    return values[0] if len(values) == 1 else values


def link_to_parents(node: InnerNode) -> InnerNode:
    """Link ``node`` as a child of each of its parents and return it."""
    for parent in node.parents:
        parent.link(node)
    return node
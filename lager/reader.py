"""Readers and cursors: handles to nodes for reading, watching and writing."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Iterable

from lager.lens import Lens
from lager.lens_nodes import make_lens_cursor_node, make_lens_reader_node
from lager.nodes import CursorNode, ReaderNode
from lager.setter import make_setter_node
from lager.util import Tag


def _disconnect_all(connections: list[Callable[[], None]]) -> None:
    for disconnect in connections:
        disconnect()
    connections.clear()


class Reader:
    """Read access to the value of a node.

    Watchers registered through a reader are disconnected when the reader is
    garbage collected.
    """

    def __init__(self, node: ReaderNode | Reader) -> None:
        if isinstance(node, Reader):
            node = node.node
        if not isinstance(node, ReaderNode):
            raise TypeError(f"expected a node, got {type(node).__name__}")
        self._node = node
        self._connections: list[Callable[[], None]] = []
        weakref.finalize(self, _disconnect_all, self._connections)

    @property
    def node(self) -> ReaderNode:
        """The node this handle reads from."""
        return self._node

    def get(self) -> Any:
        """The value currently visible through this reader."""
        return self._node.last

    def watch(self, callback: Callable[[Any], Any]) -> Callable[[], None]:
        """Call ``callback`` on every notified change; return a disconnector."""
        disconnect = self._node.observe(callback)
        self._connections.append(disconnect)

        def stop() -> None:
            disconnect()
            if disconnect in self._connections:
                self._connections.remove(disconnect)

        return stop

    def bind(self, callback: Callable[[Any], Any]) -> Callable[[], None]:
        """Watch with ``callback`` and call it right away with the value."""
        stop = self.watch(callback)
        callback(self.get())
        return stop

    def zoom(self, lens: Lens) -> WithExpr:
        """Describe a view of this reader's value through ``lens``."""
        return with_(self).zoom(lens)

    def setter(
        self, fn: Callable[[Any], Any], tag: Tag = Tag.TRANSACTIONAL
    ) -> Cursor:
        """A cursor reading this value whose writes go to ``fn``."""
        return with_setter(self, fn, tag)

    def make(self) -> Reader:
        """Return this handle; expressions return the handle they build."""
        return self


class Cursor(Reader):
    """Read and write access to the value of a node."""

    def __init__(self, node: CursorNode | Cursor) -> None:
        if isinstance(node, Reader):
            node = node.node
        if not isinstance(node, CursorNode):
            raise TypeError(f"expected a cursor node, got {type(node).__name__}")
        super().__init__(node)

    def set(self, value: Any) -> None:
        """Write ``value`` back through the node graph."""
        self._node.send_up(value)

    def update(self, fn: Callable[[Any], Any]) -> None:
        """Write the result of ``fn`` applied to the latest value."""
        self._node.refresh()
        self._node.send_up(fn(self._node.current))


class WithExpr:
    """A lazy description of a view over one or more nodes.

    Zooming composes lenses without creating nodes; ``make`` creates the node
    and returns a reader, or a cursor when every source is writable.
    """

    def __init__(
        self,
        nodes: Iterable[ReaderNode],
        lens: Lens | None = None,
        writable: bool = False,
    ) -> None:
        self._nodes = tuple(nodes)
        if not self._nodes:
            raise ValueError("at least one node is required")
        self._lens = lens
        self._writable = writable

    def zoom(self, lens: Lens) -> WithExpr:
        """Focus further on a part of the value through ``lens``."""
        combined = lens if self._lens is None else self._lens | lens
        return WithExpr(self._nodes, combined, self._writable)

    def make(self) -> Reader:
        """Create the node described and return a handle to it."""
        lens = self._lens if self._lens is not None else Lens(
            lambda whole: whole, lambda whole, part: part
        )
        if self._writable:
            return Cursor(make_lens_cursor_node(lens, self._nodes))
        return Reader(make_lens_reader_node(lens, self._nodes))


def with_(*args: Reader) -> WithExpr:
    """Start describing a view combining the given readers or cursors.

    With several sources the value is the tuple of their values.
    """
    if not args:
        raise ValueError("with_ needs at least one reader")
    for arg in args:
        if not isinstance(arg, Reader):
            raise TypeError(f"expected a reader, got {type(arg).__name__}")
    handles = [arg.make() for arg in args]
    writable = all(isinstance(handle, Cursor) for handle in handles)
    return WithExpr((handle.node for handle in handles), None, writable)


def with_setter(
    reader: Reader, fn: Callable[[Any], Any], tag: Tag = Tag.TRANSACTIONAL
) -> Cursor:
    """A cursor that reads ``reader`` and sends written values to ``fn``."""
    return Cursor(make_setter_node(reader.make().node, fn, tag))
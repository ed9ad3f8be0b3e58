"""Nodes that route writes through a user supplied function."""

from __future__ import annotations

from typing import Any, Callable

from lager.nodes import CursorNode, ReaderNode
from lager.util import Tag


class SetterNode(CursorNode):
    """Mirror a parent's value and hand every written value to a function.

    With a transactional tag the written value only becomes visible once the
    graph is sent down. With an automatic tag it is published at once.
    """

    def __init__(
        self,
        parent: ReaderNode,
        fn: Callable[[Any], Any],
        tag: Tag = Tag.TRANSACTIONAL,
    ) -> None:
        super().__init__(parent.current)
        self._parent = parent
        self._fn = fn
        self._tag = tag
        self._recomputed = False

    @property
    def parent(self) -> ReaderNode:
        """The node whose value this node mirrors."""
        return self._parent

    def recompute(self) -> None:
        if self._recomputed:
            self._recomputed = False
        else:
            self.push_down(self._parent.current)

    def refresh(self) -> Any:
        """Leave the parent alone and return the value this node holds.

        Setter nodes keep the value last written or pushed into them, so a
        refresh does not pull a new one from the parent.
        """
        return self._current

    def send_up(self, value: Any) -> None:
        self._fn(value)
        self.push_down(value)
        if self._tag is Tag.AUTOMATIC:
            self._recomputed = True
            self.send_down()
            self.notify()


def make_setter_node(
    parent: ReaderNode,
    fn: Callable[[Any], Any],
    tag: Tag = Tag.TRANSACTIONAL,
) -> SetterNode:
    """Create a setter node and link it as a child of ``parent``."""
    node = SetterNode(parent, fn, tag)
    parent.link(node)
    return node
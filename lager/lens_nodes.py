"""Nodes that derive their value from parents through a lens."""

from __future__ import annotations

from typing import Any, Iterable

from lager.lens import Lens
from lager.nodes import CursorNode, InnerNode, ReaderNode, current_from, link_to_parents


class LensReaderNode(InnerNode):
    """Read-only view of its parents' values through a lens."""

    def __init__(self, lens: Lens, parents: Iterable[ReaderNode]) -> None:
        parents = tuple(parents)
        super().__init__(lens.view(current_from(parents)), parents)
        self._lens = lens

    def recompute(self) -> None:
        self.push_down(self._lens.view(current_from(self.parents)))


class LensCursorNode(LensReaderNode, CursorNode):
    """Lens view that writes changes back into its parents."""

    def send_up(self, value: Any) -> None:
        self.refresh()
        self.push_up(self._lens.set(current_from(self.parents), value))


def make_lens_reader_node(lens: Lens, parents: Iterable[ReaderNode]) -> LensReaderNode:
    """Create a lens reader node linked to its parents."""
    return link_to_parents(LensReaderNode(lens, parents))


def make_lens_cursor_node(lens: Lens, parents: Iterable[ReaderNode]) -> LensCursorNode:
    """Create a lens cursor node linked to its parents."""
    return link_to_parents(LensCursorNode(lens, parents))
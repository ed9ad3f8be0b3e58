"""Composable lenses: a focus on a part of a larger immutable value."""

from __future__ import annotations

from typing import Any, Callable


class Lens:
    """A pair of functions to view and to replace a part of a whole."""

    def __init__(
        self,
        getter: Callable[[Any], Any],
        setter: Callable[[Any, Any], Any],
    ) -> None:
        self._getter = getter
        self._setter = setter

    def view(self, whole: Any) -> Any:
        """Return the part that the lens focuses on."""
        return self._getter(whole)

    def set(self, whole: Any, part: Any) -> Any:
        """Return a new whole with the focused part replaced."""
        return self._setter(whole, part)

    def over(self, whole: Any, fn: Callable[[Any], Any]) -> Any:
        """Return a new whole with ``fn`` applied to the focused part."""
        return self.set(whole, fn(self.view(whole)))

    def compose(self, other: Lens) -> Lens:
        """Focus with ``other`` inside the part this lens focuses on."""
        outer, inner = self, other

        def getter(whole: Any) -> Any:
            return inner.view(outer.view(whole))

        def setter(whole: Any, part: Any) -> Any:
            return outer.set(whole, inner.set(outer.view(whole), part))

        return Lens(getter, setter)

    def __or__(self, other: Lens) -> Lens:
        if not isinstance(other, Lens):
            return NotImplemented
        return self.compose(other)


def identity_lens() -> Lens:
    """A lens that focuses on the whole value."""
    return Lens(lambda whole: whole, lambda whole, part: part)
"""Reactive value nodes, readers and cursors, lenses and a small counter application."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "nodes",
    "lens",
    "lens_nodes",
    "setter",
    "reader",
    "enum_names",
    "counter",
]
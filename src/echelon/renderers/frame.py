"""Render a whole scope tree into one frame of display lines."""

from __future__ import annotations

from echelon.renderers.node import Node


def render_frame(root: Node, width: int = 0) -> list[str]:
    """Return the lines for every child of *root*; the root itself is hidden.

    Safe to call while other threads mutate the tree.
    """
    lines: list[str] = []
    for child in root.children:
        lines.extend(child.render(width))
    return lines

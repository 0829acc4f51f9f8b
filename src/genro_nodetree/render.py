# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Plain-text drawing of node trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node

UNNAMED_LABEL = "(unnamed)"


def draw_tree(node: Node, depth: int = 0) -> str:
    """Draw node and its descendants, one bracketed line per node.

    Each line is indented by its depth: ``[root]``, ``[ child]``,
    ``[  grandchild]``. Unnamed nodes with children are drawn as
    ``(unnamed)``; unnamed leaves are left out. Sibling order is
    unspecified.

    Args:
        node: The node to draw.
        depth: Indentation of node's own line.

    Returns:
        The drawing, each line terminated by a newline.
    """
    lines = []
    stack: list[tuple[Node, int]] = [(node, depth)]
    while stack:
        current, level = stack.pop()
        name = current.name
        if name:
            lines.append(_format_by_depth(name, level))
        elif len(current):
            lines.append(_format_by_depth(UNNAMED_LABEL, level))
        stack.extend((child, level + 1) for child in reversed(list(current)))
    return ''.join(lines)


def _format_by_depth(value: str, depth: int) -> str:
    return f"[{value.rjust(depth + len(value))}]\n"

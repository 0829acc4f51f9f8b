# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Factory functions for building node trees.

Example:
    >>> root = named_root('root data', 'root')
    >>> alice = named_child('alice data', 'alice', root)
    >>> snapshot = to_immutable(root)
    >>> snapshot.get_child_by_name('alice').data
    'alice data'
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import NodeArgumentError
from .immutable import ImmutableNode
from .mutable import MutableNode
from .node import Node, _require

logger = logging.getLogger(__name__)


def unnamed_root(data: Any = None) -> MutableNode:
    """Create a new root node without an explicit name."""
    return MutableNode(data)


def named_root(data: Any, name: str) -> MutableNode:
    """Create a new root node with an explicit name."""
    return MutableNode(data, name)


def unnamed_child(data: Any, parent: MutableNode) -> MutableNode:
    """Create a new unnamed node as a child of parent."""
    _require(parent, 'parent')
    return MutableNode(data, parent=parent)


def named_child(data: Any, name: str, parent: MutableNode) -> MutableNode:
    """Create a new named node as a child of parent.

    Raises:
        NodeStructureError: If parent already has a child with this name.
    """
    _require(parent, 'parent')
    return MutableNode(data, name, parent=parent)


def to_immutable(root: Node) -> ImmutableNode:
    """Create an immutable snapshot of the tree below root.

    Children are converted before their parent so that each immutable
    node is built with its final set of children. The snapshot shares no
    structure with the source: later changes to the source tree are not
    visible in it.

    Args:
        root: The root of the source tree.

    Returns:
        The root of the immutable copy.

    Raises:
        NodeArgumentError: If root has a parent.
    """
    _require(root, 'root')
    if not root.is_root:
        raise NodeArgumentError("source must be the root node")
    snapshot = _snapshot(root)
    logger.debug("Built immutable snapshot of %r", root)
    return snapshot


def _snapshot(source: Node) -> ImmutableNode:
    """Convert the tree below source bottom-up, without recursion."""
    built: dict[Node, ImmutableNode] = {}
    stack: list[tuple[Node, list[Node] | None]] = [(source, None)]
    while stack:
        node, children = stack.pop()
        if children is None:
            children = list(node)
            stack.append((node, children))
            stack.extend((child, None) for child in children)
        else:
            built[node] = ImmutableNode(
                node.data, node.name, [built.pop(child) for child in children]
            )
    return built[source]

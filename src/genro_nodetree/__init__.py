# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-NodeTree - Generic named trees with mutable and immutable nodes.

A lightweight, zero-dependency library providing in-memory trees where
each node holds optional data, an optional name and a set of children.

Example:
    >>> from genro_nodetree import named_root, to_immutable
    >>> root = named_root(None, 'root')
    >>> _ = root.create_child('alice data', 'alice')
    >>> print(root.draw_tree(), end='')
    [root]
    [ alice]
"""

__version__ = "0.1.0"

from .exceptions import (
    EmptyNodeError,
    ImmutableNodeError,
    InvalidArgumentError,
    NodeArgumentError,
    NodeNotFoundError,
    NodeStructureError,
    NodeTreeError,
    OrphanedNodeError,
)
from .factory import named_child, named_root, to_immutable, unnamed_child, unnamed_root
from .immutable import ImmutableNode
from .mutable import MutableNode
from .naming import (
    NameSupplier,
    counter_name_supplier,
    data_name_supplier,
    null_name_supplier,
)
from .node import Node
from .render import draw_tree

__all__ = [
    # Core classes
    "Node",
    "MutableNode",
    "ImmutableNode",
    # Factory
    "unnamed_root",
    "named_root",
    "unnamed_child",
    "named_child",
    "to_immutable",
    # Drawing
    "draw_tree",
    # Naming
    "NameSupplier",
    "null_name_supplier",
    "data_name_supplier",
    "counter_name_supplier",
    # Exceptions
    "NodeTreeError",
    "InvalidArgumentError",
    "NodeStructureError",
    "NodeNotFoundError",
    "EmptyNodeError",
    "OrphanedNodeError",
    "ImmutableNodeError",
    "NodeArgumentError",
]

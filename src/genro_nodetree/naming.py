# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Name suppliers for nodes without an explicit name.

A name supplier is a plain callable receiving the node and returning its
name, or None. Suppliers are inherited down the tree: a node without its
own supplier uses the one of its nearest ancestor, and a root without one
falls back to :func:`null_name_supplier`.

Suppliers are called again on every name lookup, so stateful suppliers
(counters, clocks) are allowed.

Example:
    >>> root = MutableNode('root data', name_supplier=data_name_supplier)
    >>> root.create_child('child data').name
    'child data'
"""

from __future__ import annotations

from itertools import count
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node

NameSupplier = Callable[["Node"], "str | None"]


def null_name_supplier(node: Node) -> str | None:
    """Supply no name at all. Default for roots without a supplier."""
    return None


def data_name_supplier(node: Node) -> str | None:
    """Name a node after its data, or None for empty nodes."""
    if node.is_empty:
        return None
    return str(node.data)


def counter_name_supplier(prefix: str = 'node') -> NameSupplier:
    """Create a supplier returning prefix_0, prefix_1, ... on each call.

    Args:
        prefix: Text placed before the sequence number.

    Returns:
        A new stateful supplier with its own counter.

    Example:
        >>> supplier = counter_name_supplier('item')
        >>> supplier(node), supplier(node)
        ('item_0', 'item_1')
    """
    counter = count()

    def supplier(node: Node) -> str:
        return f"{prefix}_{next(counter)}"

    return supplier

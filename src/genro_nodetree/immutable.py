# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ImmutableNode - a frozen tree node built from a snapshot.

Immutable trees are built by :func:`~genro_nodetree.factory.to_immutable`.
Names are the effective names captured when the snapshot was taken, and
every mutator raises :class:`ImmutableNodeError`.

The data objects themselves are shared with the source tree, not copied:
mutating a data object in place is visible through both trees, but the
shape of the snapshot never changes.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .exceptions import ImmutableNodeError, NodeArgumentError
from .node import Node

IMMUTABLE_OBJECT = "Immutable object"


class ImmutableNode(Node):
    """A read-only tree node.

    Children are fixed at construction; the parent link is assigned once
    by the parent's constructor and never changes afterwards.
    """

    __slots__ = ('_children_set',)

    def __init__(
        self,
        data: Any = None,
        name: str | None = None,
        children: Iterable[ImmutableNode] = (),
    ) -> None:
        """Initialize an ImmutableNode and adopt its children.

        Args:
            data: The node's data.
            name: The node's fixed name.
            children: Freshly built, parentless immutable nodes.

        Raises:
            NodeArgumentError: If a child is not an ImmutableNode, already
                has a parent, or is given twice. No child is adopted then.
        """
        children = tuple(children)
        for child in children:
            if not isinstance(child, ImmutableNode):
                raise NodeArgumentError("children must be immutable nodes")
            if child._parent is not None:
                raise NodeArgumentError("child already has a parent")
        if len(set(children)) != len(children):
            raise NodeArgumentError("child given more than once")
        self._data = data
        self._name = name
        self._parent: ImmutableNode | None = None
        self._children: tuple[ImmutableNode, ...] = children
        self._children_set = frozenset(children)
        for child in self._children:
            child._parent = self

    @property
    def children(self) -> frozenset[Node]:
        """The frozen set of direct children."""
        return self._children_set

    def set_name(self, name: str | None) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def set_data(self, data: Any) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def set_parent(self, parent: Node) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def add_child(self, child: Node) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def create_child(self, data: Any, name: str | None = None) -> Node:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def create_descendant_line(self, descendants: Sequence[Any]) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def find_or_create_child(self, data: Any) -> Node:
        """Return the existing child holding data.

        Raises:
            ImmutableNodeError: If the child would have to be created.
        """
        node = self.find_child(data)
        if node is None:
            raise ImmutableNodeError(IMMUTABLE_OBJECT)
        return node

    def insert_in_path(self, node: Node, *path: str) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def remove_child(self, node: Node) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

    def remove_parent(self) -> None:
        raise ImmutableNodeError(IMMUTABLE_OBJECT)

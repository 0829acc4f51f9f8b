# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - the contract shared by mutable and immutable nodes.

A node holds optional data, an optional name, at most one parent and an
unordered collection of children. This module defines the full contract
and implements every read-only operation on top of four slots:

- ``_data``: the payload, or None for an empty node
- ``_name``: the explicit name, or None
- ``_parent``: the parent node, or None for a root
- ``_children``: an iterable of child nodes (identity keyed)

Subclasses supply the mutators (:class:`~genro_nodetree.mutable.MutableNode`)
or refuse them (:class:`~genro_nodetree.immutable.ImmutableNode`).

Nodes never override ``__eq__``/``__hash__``, so children containers and
lookups always work on node identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Sequence, TYPE_CHECKING

from .exceptions import (
    EmptyNodeError,
    InvalidArgumentError,
    NodeNotFoundError,
    OrphanedNodeError,
)

if TYPE_CHECKING:
    from collections.abc import Set


def _require(value: Any, argname: str) -> None:
    """Raise InvalidArgumentError if a required argument is None."""
    if value is None:
        raise InvalidArgumentError(f"'{argname}' must not be None")


class Node(ABC):
    """Abstract tree node.

    Example:
        >>> root = named_root('root data', 'root')
        >>> child = root.create_child('child data', 'child')
        >>> root.get_child_by_name('child') is child
        True
        >>> child.parent is root
        True
    """

    __slots__ = ('_data', '_name', '_parent', '_children')

    # ==================== Identity ====================

    @property
    def name(self) -> str | None:
        """The effective name of the node."""
        return self._name

    @name.setter
    def name(self, name: str | None) -> None:
        self.set_name(name)

    @abstractmethod
    def set_name(self, name: str | None) -> None:
        """Set the explicit name. None reverts to the supplied name."""

    @property
    def data(self) -> Any:
        """The node's data, or None if the node is empty."""
        return self._data

    @data.setter
    def data(self, data: Any) -> None:
        self.set_data(data)

    @abstractmethod
    def set_data(self, data: Any) -> None:
        """Replace the node's data."""

    def get_data(self) -> Any:
        """Return the node's data.

        Raises:
            EmptyNodeError: If the node has no data.
        """
        if self._data is None:
            raise EmptyNodeError("Node is empty")
        return self._data

    @property
    def is_empty(self) -> bool:
        """True if the node holds no data."""
        return self._data is None

    @property
    def is_named(self) -> bool:
        """True if the effective name is neither None nor empty."""
        return bool(self.name)

    # ==================== Structure ====================

    @property
    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self._parent is None

    @property
    def parent(self) -> Node | None:
        """The parent node, or None for a root."""
        return self._parent

    @parent.setter
    def parent(self, parent: Node) -> None:
        self.set_parent(parent)

    @abstractmethod
    def set_parent(self, parent: Node) -> None:
        """Make this node a direct child of parent."""

    def get_parent(self) -> Node:
        """Return the parent node.

        Raises:
            OrphanedNodeError: If the node is a root.
        """
        if self._parent is None:
            raise OrphanedNodeError("Node has no parent")
        return self._parent

    @property
    @abstractmethod
    def children(self) -> Set[Node]:
        """The direct children of the node."""

    @abstractmethod
    def add_child(self, child: Node) -> None:
        """Add child to this node, moving it from any previous parent."""

    @abstractmethod
    def create_child(self, data: Any, name: str | None = None) -> Node:
        """Create a new child holding data, optionally named."""

    @abstractmethod
    def create_descendant_line(self, descendants: Sequence[Any]) -> None:
        """Find or create a chain of children, one per item of descendants."""

    @abstractmethod
    def find_or_create_child(self, data: Any) -> Node:
        """Return the child holding data, creating it when missing."""

    @abstractmethod
    def insert_in_path(self, node: Node, *path: str) -> None:
        """Place node below the chain of named children given by path."""

    @abstractmethod
    def remove_child(self, node: Node) -> None:
        """Remove node from the children, making it a root."""

    @abstractmethod
    def remove_parent(self) -> None:
        """Detach this node from its parent, making it a root."""

    # ==================== Lookup ====================

    def find_child(self, data: Any) -> Node | None:
        """Return the first child whose data equals data, or None.

        Empty children never match.
        """
        _require(data, 'child')
        for node in self._children:
            if node._data is not None and node._data == data:
                return node
        return None

    def get_child(self, data: Any) -> Node:
        """Return the child whose data equals data.

        Raises:
            NodeNotFoundError: If there is no such child.
        """
        node = self.find_child(data)
        if node is None:
            raise NodeNotFoundError("Child not found")
        return node

    def find_child_by_name(self, name: str) -> Node | None:
        """Return the child whose effective name equals name, or None."""
        _require(name, 'name')
        for node in self._children:
            if node.name == name:
                return node
        return None

    def get_child_by_name(self, name: str) -> Node:
        """Return the child whose effective name equals name.

        Raises:
            NodeNotFoundError: If there is no such child.
        """
        node = self.find_child_by_name(name)
        if node is None:
            raise NodeNotFoundError("Named child not found")
        return node

    def find_in_path(self, path: Sequence[Any]) -> Node | None:
        """Walk down the tree matching each item of path against child data.

        Args:
            path: Data values, one per level below this node.

        Returns:
            The node at the end of the path, or None if the path is empty
            or any step has no matching child.
        """
        _require(path, 'path')
        if not path:
            return None
        current: Node | None = self
        for item in path:
            current = current.find_child(item)
            if current is None:
                return None
        return current

    def is_descendant_of(self, node: Node) -> bool:
        """True if node is the parent of this node or one of its ancestors."""
        parent = self._parent
        while parent is not None:
            if parent is node:
                return True
            parent = parent._parent
        return False

    # ==================== Iteration ====================

    def stream(self) -> Iterator[Node]:
        """Yield this node and then every descendant, depth-first pre-order.

        Uses an explicit stack, so the depth of the tree is not limited by
        the recursion limit. Each level is copied when it is reached;
        mutating the tree while iterating is not supported.
        """
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node._children)))

    def parent_stream(self) -> Iterator[Node]:
        """Yield the ancestors of this node, nearest first, root last."""
        parent = self._parent
        while parent is not None:
            yield parent
            parent = parent._parent

    def __iter__(self) -> Iterator[Node]:
        """Iterate over the direct children."""
        return iter(list(self._children))

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    def __bool__(self) -> bool:
        # Nodes are always truthy, even without children.
        return True

    # ==================== Navigation ====================

    @property
    def root(self) -> Node:
        """The topmost ancestor, or this node if it is a root."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def depth(self) -> int:
        """Number of ancestors of this node (root=0)."""
        return sum(1 for _ in self.parent_stream())

    def draw_tree(self, depth: int = 0) -> str:
        """Draw this node and its descendants. See :func:`render.draw_tree`."""
        from .render import draw_tree
        return draw_tree(self, depth)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._name!r}, data={self._data!r}, "
            f"children={len(self._children)})"
        )

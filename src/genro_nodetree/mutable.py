# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MutableNode - a live, editable tree node.

MutableNode keeps both ends of every parent/child link consistent:

- adding a child sets the child's parent, and setting a parent adds the
  node to the parent's children
- moving a node detaches it from its previous parent first
- a node can never become its own ancestor
- two distinct children of the same parent never share a name

Every mutator validates before it changes anything, so a failed call
leaves the tree untouched.

Naming:
    A node without an explicit name asks a name supplier for one. The
    supplier is the node's own, or the nearest ancestor's, or
    :func:`~genro_nodetree.naming.null_name_supplier` when no node up to
    the root has one. Suppliers are called on every lookup.

Example:
    >>> root = MutableNode(name='root')
    >>> four = MutableNode('data', name='four')
    >>> root.insert_in_path(four, 'one', 'two', 'three')
    >>> root.get_child_by_name('one').get_child_by_name('two').name
    'two'
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .exceptions import ImmutableNodeError, NodeStructureError
from .immutable import IMMUTABLE_OBJECT
from .naming import NameSupplier, null_name_supplier
from .node import Node, _require

logger = logging.getLogger(__name__)


class MutableNode(Node):
    """A tree node supporting live mutation.

    Children are kept in an insertion-ordered dict used as an identity
    keyed set; callers must not rely on sibling order.
    """

    __slots__ = ('_name_supplier',)

    def __init__(
        self,
        data: Any = None,
        name: str | None = None,
        parent: MutableNode | None = None,
        children: Iterable[MutableNode] | None = None,
        name_supplier: NameSupplier | None = None,
    ) -> None:
        """Initialize a MutableNode.

        Args:
            data: The node's data. None creates an empty node.
            name: Explicit name. None means the name comes from a supplier.
            parent: If given, the node is added as a child of parent.
            children: Nodes to add as children of the new node.
            name_supplier: Supplier used by this node and by descendants
                that have no supplier of their own.

        Raises:
            NodeStructureError: If parent or children would break the
                tree invariants. Nothing is linked in that case.
            ImmutableNodeError: If parent or a child is not a MutableNode.
        """
        self._data = data
        self._name = name
        self._parent: MutableNode | None = None
        self._children: dict[MutableNode, None] = {}
        self._name_supplier = name_supplier
        children = list(children) if children is not None else []
        if parent is not None:
            if not isinstance(parent, MutableNode):
                raise ImmutableNodeError(IMMUTABLE_OBJECT)
            parent._verify_can_adopt(self)
        self._verify_initial_children(children, parent)
        if parent is not None:
            self._link_to(parent)
        for child in children:
            child._link_to(self)

    def _verify_initial_children(
        self, children: list[MutableNode], parent: MutableNode | None
    ) -> None:
        """Check the constructor's children against each other and parent."""
        if self._name_supplier is not None:
            supplier = self._name_supplier
        elif parent is not None:
            supplier = parent.name_supplier
        else:
            supplier = null_name_supplier
        seen: dict[str, MutableNode] = {}
        for child in children:
            _require(child, 'child')
            if not isinstance(child, MutableNode):
                raise ImmutableNodeError(IMMUTABLE_OBJECT)
            if child is parent or (parent is not None and parent.is_descendant_of(child)):
                raise NodeStructureError("Child is an ancestor")
            if child._name is not None:
                name = child._name
            elif child._name_supplier is not None:
                name = child._name_supplier(child)
            else:
                name = supplier(child)
            if name and seen.setdefault(name, child) is not child:
                raise NodeStructureError("Node with that name already exists here")

    # ==================== Naming ====================

    @property
    def name(self) -> str | None:
        """The explicit name, or the one produced by the resolved supplier."""
        if self._name is not None:
            return self._name
        return self.name_supplier(self)

    @name.setter
    def name(self, name: str | None) -> None:
        self.set_name(name)

    def set_name(self, name: str | None) -> None:
        self._name = name

    @property
    def name_supplier(self) -> NameSupplier:
        """The supplier of this node or of its nearest ancestor having one."""
        node: MutableNode | None = self
        while node is not None:
            if node._name_supplier is not None:
                return node._name_supplier
            node = node._parent
        return null_name_supplier

    def set_data(self, data: Any) -> None:
        self._data = data

    # ==================== Structure ====================

    @property
    def children(self) -> set[Node]:
        """A copy of the set of direct children."""
        return set(self._children)

    def set_parent(self, parent: Node) -> None:
        """Make this node a direct child of parent.

        Raises:
            InvalidArgumentError: If parent is None.
            NodeStructureError: If parent is this node or one of its
                descendants, or already has another child with this name.
            ImmutableNodeError: If parent is not a MutableNode.
        """
        _require(parent, 'parent')
        if parent is self or parent.is_descendant_of(self):
            raise NodeStructureError("Parent is a descendant")
        if not isinstance(parent, MutableNode):
            raise ImmutableNodeError(IMMUTABLE_OBJECT)
        parent._verify_can_adopt(self)
        self._link_to(parent)

    def add_child(self, child: Node) -> None:
        """Add child to this node, moving it from any previous parent.

        Raises:
            InvalidArgumentError: If child is None.
            NodeStructureError: If child is this node or one of its
                ancestors, or another child already has the same name.
            ImmutableNodeError: If child is not a MutableNode.
        """
        _require(child, 'child')
        if not isinstance(child, MutableNode):
            raise ImmutableNodeError(IMMUTABLE_OBJECT)
        self._verify_can_adopt(child)
        child._link_to(self)

    def _verify_can_adopt(self, child: MutableNode) -> None:
        """Check that child may become a direct child of this node."""
        if child is self or self.is_descendant_of(child):
            raise NodeStructureError("Child is an ancestor")
        name = self._name_for_child(child)
        if name:
            existing = self.find_child_by_name(name)
            if existing is not None and existing is not child:
                raise NodeStructureError("Node with that name already exists here")

    def _name_for_child(self, child: Node) -> str | None:
        """The name child will have once it is a child of this node."""
        if not isinstance(child, MutableNode):
            return child.name
        if child._name is not None:
            return child._name
        if child._name_supplier is not None:
            return child._name_supplier(child)
        return self.name_supplier(child)

    def _link_to(self, parent: MutableNode) -> None:
        """Move this node under parent. Callers have validated the move."""
        old_parent = self._parent
        if old_parent is not None and old_parent is not parent:
            old_parent._children.pop(self, None)
            logger.debug("Detached %r from %r", self, old_parent)
        self._parent = parent
        if self not in parent._children:
            parent._children[self] = None
            logger.debug("Linked %r under %r", self, parent)

    def create_child(self, data: Any, name: str | None = None) -> MutableNode:
        """Create a new child holding data.

        Args:
            data: The child's data.
            name: Optional explicit name for the child.

        Returns:
            The new child node.
        """
        _require(data, 'child')
        return MutableNode(data, name, parent=self)

    def create_descendant_line(self, descendants: Sequence[Any]) -> None:
        """Find or create a chain of children, one per item of descendants.

        Each item is looked up by data among the children of the previous
        node in the chain, and created there if missing.

        Example:
            >>> root.create_descendant_line(['a', 'b', 'c'])
            >>> root.find_in_path(['a', 'b', 'c']).data
            'c'
        """
        _require(descendants, 'descendants')
        current: Node = self
        for item in descendants:
            current = current.find_or_create_child(item)

    def find_or_create_child(self, data: Any) -> MutableNode:
        node = self.find_child(data)
        if node is None:
            node = self.create_child(data)
        return node

    def insert_in_path(self, node: Node, *path: str) -> None:
        """Place node below the chain of named children given by path.

        Missing path segments are created as empty named nodes. At the end
        of the path:

        - an unnamed node, or one whose name is free, is added as a child
        - if an empty node with the same name exists, node's data is copied
          into it and node itself is not added

        Nothing is created when the insertion fails.

        Args:
            node: The node to place.
            *path: Names of the intermediate nodes, top-down.

        Raises:
            NodeStructureError: If a non-empty node with the same name
                already exists at the end of the path, or node is an
                ancestor of the insertion point.

        Example:
            >>> root.insert_in_path(MutableNode('x', name='leaf'), 'a', 'b')
            >>> root.get_child_by_name('a').get_child_by_name('b').get_child_by_name('leaf').data
            'x'
        """
        _require(node, 'node')
        for segment in path:
            _require(segment, 'path')

        current: MutableNode = self
        remaining = list(path)
        while remaining:
            existing = current.find_child_by_name(remaining[0])
            if existing is None:
                break
            current = existing
            remaining.pop(0)

        if node is current or current.is_descendant_of(node):
            raise NodeStructureError("Child is an ancestor")
        name = current._name_for_child(node)
        target = None
        if name and not remaining:
            target = current.find_child_by_name(name)
            if target is not None and not target.is_empty:
                raise NodeStructureError(
                    f"A non-empty node named '{name}' already exists here"
                )
        if target is None and not isinstance(node, MutableNode):
            raise ImmutableNodeError(IMMUTABLE_OBJECT)

        for segment in remaining:
            current = MutableNode(None, segment, parent=current)
        if target is None:
            current.add_child(node)
        elif not node.is_empty:
            target.set_data(node.data)
            logger.debug("Merged data of %r into %r", node, target)

    def remove_child(self, node: Node) -> None:
        """Remove node from the children. Unknown nodes are ignored."""
        _require(node, 'node')
        if node in self._children:
            node.remove_parent()

    def remove_parent(self) -> None:
        """Detach this node from its parent, making it a root.

        A node that was named by an inherited supplier keeps that supplier.
        Calling this on a root does nothing.
        """
        old_parent = self._parent
        if old_parent is None:
            return
        inherited = self.name_supplier
        self._parent = None
        old_parent._children.pop(self, None)
        if self._name_supplier is None and inherited is not null_name_supplier:
            self._name_supplier = inherited
        logger.debug("Detached %r from %r", self, old_parent)

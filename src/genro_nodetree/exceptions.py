# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NodeTree exceptions."""

from __future__ import annotations


class NodeTreeError(Exception):
    """Base exception for NodeTree errors."""

    pass


class InvalidArgumentError(NodeTreeError, ValueError):
    """Raised when a required argument is None."""

    pass


class NodeStructureError(NodeTreeError):
    """Raised when an operation would create a cycle or a duplicate name."""

    pass


class NodeNotFoundError(NodeTreeError, LookupError):
    """Raised when a lookup-or-fail operation finds nothing."""

    pass


class EmptyNodeError(NodeTreeError):
    """Raised when data is required from a node that has none."""

    pass


class OrphanedNodeError(NodeTreeError):
    """Raised when a parent is required from a root node."""

    pass


class ImmutableNodeError(NodeTreeError):
    """Raised when a mutator is called on an immutable node."""

    pass


class NodeArgumentError(NodeTreeError, ValueError):
    """Raised when an argument node is unsuitable, e.g. not a root."""

    pass

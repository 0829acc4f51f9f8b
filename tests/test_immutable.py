# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ImmutableNode and to_immutable snapshots."""

import pytest

from genro_nodetree import (
    EmptyNodeError,
    ImmutableNode,
    ImmutableNodeError,
    InvalidArgumentError,
    MutableNode,
    NodeArgumentError,
    NodeNotFoundError,
    OrphanedNodeError,
    data_name_supplier,
    named_child,
    named_root,
    to_immutable,
    unnamed_child,
    unnamed_root,
)


@pytest.fixture
def source():
    """A small mutable tree: root -> child -> grandchild."""
    root = named_root('root data', 'root')
    child = named_child('child data', 'child', root)
    named_child('grandchild data', 'grandchild', child)
    return root


@pytest.fixture
def frozen(source):
    """An immutable snapshot of the source tree."""
    return to_immutable(source)


class TestToImmutable:
    """Tests for building snapshots."""

    def test_returns_immutable_root(self, frozen):
        """Test the snapshot root is an ImmutableNode without parent."""
        assert isinstance(frozen, ImmutableNode)
        assert frozen.is_root
        assert frozen.name == 'root'
        assert frozen.data == 'root data'

    def test_non_root_source_raises(self, source):
        """Test only a root can be snapshotted."""
        child = source.get_child_by_name('child')
        with pytest.raises(NodeArgumentError, match="source must be the root node"):
            to_immutable(child)

    def test_non_root_source_is_value_error(self, source):
        """Test NodeArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            to_immutable(source.get_child_by_name('child'))

    def test_none_source_raises(self):
        """Test to_immutable rejects None."""
        with pytest.raises(InvalidArgumentError, match="root"):
            to_immutable(None)

    def test_copies_whole_tree(self, source, frozen):
        """Test every node is mirrored with its data and name."""
        assert len(list(frozen.stream())) == len(list(source.stream())) == 3
        child = frozen.get_child_by_name('child')
        assert child.data == 'child data'
        grandchild = child.get_child_by_name('grandchild')
        assert grandchild.data == 'grandchild data'

    def test_children_have_immutable_parent(self, frozen):
        """Test parent links point inside the snapshot."""
        child = frozen.get_child_by_name('child')
        assert isinstance(child, ImmutableNode)
        assert child.parent is frozen
        grandchild = child.get_child_by_name('grandchild')
        assert grandchild.parent is child
        assert grandchild.root is frozen

    def test_shares_no_nodes_with_source(self, source, frozen):
        """Test no source node appears in the snapshot."""
        assert not set(source.stream()) & set(frozen.stream())

    def test_independent_from_later_changes(self, source, frozen):
        """Test mutating the source does not change the snapshot."""
        child = source.get_child_by_name('child')
        child.set_name('renamed')
        child.set_data('changed')
        source.create_child('new', 'new')
        child.get_child_by_name('grandchild').remove_parent()
        snap_child = frozen.get_child_by_name('child')
        assert snap_child.data == 'child data'
        assert len(frozen) == 1
        assert snap_child.get_child_by_name('grandchild').data == 'grandchild data'

    def test_captures_supplied_names(self):
        """Test supplied names are fixed at snapshot time."""
        root = MutableNode('root', name_supplier=data_name_supplier)
        root.create_child('child')
        frozen = to_immutable(root)
        assert frozen.name == 'root'
        assert frozen.get_child_by_name('child').name == 'child'

    def test_deep_chain(self):
        """Test a chain deeper than the recursion limit is snapshotted."""
        root = unnamed_root(0)
        root.create_descendant_line(list(range(1, 1500)))
        frozen = to_immutable(root)
        assert len(list(frozen.stream())) == 1500
        leaf = frozen.find_in_path(list(range(1, 1500)))
        assert leaf is not None
        assert leaf.root is frozen
        assert leaf.depth == 1499

    def test_empty_and_unnamed_nodes(self):
        """Test dataless and unnamed nodes are preserved."""
        root = unnamed_root(None)
        unnamed_child(None, root)
        frozen = to_immutable(root)
        assert frozen.is_empty
        assert not frozen.is_named
        assert len(frozen) == 1


class TestImmutableConstructor:
    """Tests for building immutable nodes directly."""

    def test_adopts_parentless_children(self):
        """Test fresh immutable children get the new node as parent."""
        child = ImmutableNode('child', 'child')
        node = ImmutableNode('node', 'node', [child])
        assert child.parent is node
        assert node.children == {child}

    def test_child_of_snapshot_is_refused(self, frozen):
        """Test a child of an existing snapshot cannot be taken over."""
        child = next(iter(frozen.children))
        with pytest.raises(NodeArgumentError, match="already has a parent"):
            ImmutableNode('x', 'thief', [child])
        assert child.parent is frozen
        assert child in frozen.children

    def test_mutable_child_is_refused(self, source):
        """Test mutable nodes cannot become immutable children."""
        child = source.get_child_by_name('child')
        with pytest.raises(NodeArgumentError, match="must be immutable"):
            ImmutableNode('x', 'x', [child])
        assert child.parent is source

    def test_repeated_child_is_refused(self):
        """Test the same child cannot be given twice."""
        child = ImmutableNode('child', 'child')
        with pytest.raises(NodeArgumentError, match="more than once"):
            ImmutableNode('x', 'x', [child, child])
        assert child.is_root


class TestImmutableRead:
    """Tests for read operations on an immutable tree."""

    def test_get_data(self, frozen):
        """Test get_data on an immutable node."""
        assert frozen.get_data() == 'root data'

    def test_get_data_when_empty_raises(self):
        """Test get_data raises on an empty immutable node."""
        with pytest.raises(EmptyNodeError):
            to_immutable(unnamed_root(None)).get_data()

    def test_get_parent_on_root_raises(self, frozen):
        """Test get_parent raises on the snapshot root."""
        with pytest.raises(OrphanedNodeError):
            frozen.get_parent()

    def test_children_is_frozen(self, frozen):
        """Test children is a frozenset returned as is."""
        assert isinstance(frozen.children, frozenset)
        assert frozen.children is frozen.children

    def test_find_in_path(self, frozen):
        """Test find_in_path walks the snapshot by data."""
        node = frozen.find_in_path(['child data', 'grandchild data'])
        assert node is not None
        assert node.name == 'grandchild'
        assert frozen.find_in_path(['child data', 'missing']) is None
        assert frozen.find_in_path([]) is None

    def test_find_in_path_none_raises(self, frozen):
        """Test find_in_path rejects None."""
        with pytest.raises(InvalidArgumentError, match="path"):
            frozen.find_in_path(None)

    def test_get_child(self, frozen):
        """Test get_child finds by data and raises when missing."""
        assert frozen.get_child('child data').name == 'child'
        with pytest.raises(NodeNotFoundError, match="Child not found"):
            frozen.get_child('missing')

    def test_get_child_by_name_missing_raises(self, frozen):
        """Test get_child_by_name raises when missing."""
        with pytest.raises(NodeNotFoundError, match="Named child not found"):
            frozen.get_child_by_name('missing')

    def test_find_or_create_child_finds(self, frozen):
        """Test find_or_create_child returns an existing child."""
        assert frozen.find_or_create_child('child data').name == 'child'

    def test_find_or_create_child_missing_raises(self, frozen):
        """Test find_or_create_child cannot create."""
        with pytest.raises(ImmutableNodeError, match="Immutable object"):
            frozen.find_or_create_child('missing')

    def test_is_descendant_of(self, frozen):
        """Test ancestry checks on the snapshot."""
        grandchild = frozen.find_in_path(['child data', 'grandchild data'])
        assert grandchild.is_descendant_of(frozen)
        assert not frozen.is_descendant_of(grandchild)

    def test_parent_stream(self, frozen):
        """Test parent_stream on the snapshot."""
        grandchild = frozen.find_in_path(['child data', 'grandchild data'])
        assert [n.name for n in grandchild.parent_stream()] == ['child', 'root']

    def test_repr(self, frozen):
        """Test string representation."""
        assert 'ImmutableNode' in repr(frozen)
        assert 'root' in repr(frozen)


class TestImmutableMutators:
    """Tests that every mutator refuses to run."""

    @pytest.mark.parametrize(
        'mutate',
        [
            lambda n: n.set_name('other'),
            lambda n: n.set_data('other'),
            lambda n: n.set_parent(unnamed_root(None)),
            lambda n: n.add_child(unnamed_root(None)),
            lambda n: n.create_child('other'),
            lambda n: n.create_child('other', 'other'),
            lambda n: n.create_descendant_line(['a', 'b']),
            lambda n: n.insert_in_path(unnamed_root(None), 'a'),
            lambda n: n.remove_child(next(iter(n.children))),
            lambda n: n.remove_parent(),
        ],
    )
    def test_mutator_raises(self, frozen, mutate):
        """Test the mutator raises and the tree is unchanged."""
        with pytest.raises(ImmutableNodeError, match="Immutable object"):
            mutate(frozen)
        assert frozen.name == 'root'
        assert frozen.data == 'root data'
        assert frozen.is_root
        assert len(list(frozen.stream())) == 3

    def test_property_setters_raise(self, frozen):
        """Test the name, data and parent setters raise."""
        with pytest.raises(ImmutableNodeError):
            frozen.name = 'other'
        with pytest.raises(ImmutableNodeError):
            frozen.data = 'other'
        with pytest.raises(ImmutableNodeError):
            frozen.parent = unnamed_root(None)

    def test_child_remove_parent_raises(self, frozen):
        """Test a snapshot child cannot detach itself."""
        child = frozen.get_child_by_name('child')
        with pytest.raises(ImmutableNodeError, match="Immutable object"):
            child.remove_parent()
        assert child.parent is frozen

import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.measure import (
    balance,
    height,
    internal_nodes,
    is_complete,
    is_full,
    is_perfect,
    leaves,
    size,
)
from treekit.node import Node


def _build(shape, parent=None):
    if shape is None:
        return None
    node = Node(0, parent=parent)
    node.left = _build(shape[0], node)
    node.right = _build(shape[1], node)
    return node


def _complete(count):
    nodes = [Node(i) for i in range(count)]
    for index, node in enumerate(nodes):
        for slot, child_index in (("left", 2 * index + 1), ("right", 2 * index + 2)):
            if child_index < count:
                nodes[child_index].parent = node
                setattr(node, slot, nodes[child_index])
    return nodes[0]


def _chain(count, side):
    root = Node(0)
    node = root
    for value in range(1, count):
        node = node.insert_left(value) if side == "left" else node.insert_right(value)
    return root


shapes = st.recursive(
    st.just((None, None)),
    lambda children: st.tuples(st.none() | children, st.none() | children),
    max_leaves=24,
)


def test_empty_tree_measures():
    assert height(None) == 0
    assert size(None) == 0
    assert leaves(None) == 0
    assert internal_nodes(None) == 0
    assert balance(None) == 0


def test_empty_tree_shapes_are_false():
    assert not is_full(None)
    assert not is_perfect(None)
    assert not is_complete(None)


def test_single_node():
    leaf = Node(1)
    assert height(leaf) == 0
    assert size(leaf) == leaves(leaf) == 1
    assert internal_nodes(leaf) == 0
    assert balance(leaf) == 0
    assert is_full(leaf) and is_perfect(leaf) and is_complete(leaf)


@pytest.mark.parametrize("count", [2, 3, 7])
@pytest.mark.parametrize("side", ["left", "right"])
def test_chain(count, side):
    root = _chain(count, side)
    assert height(root) == count - 1
    assert size(root) == count
    assert leaves(root) == 1
    assert internal_nodes(root) == count - 1
    expected_balance = count - 1 if side == "left" else -(count - 1)
    assert balance(root) == expected_balance
    assert not is_full(root)
    assert not is_perfect(root)


def test_complete_depends_on_side():
    assert is_complete(_chain(2, "left"))
    assert not is_complete(_chain(2, "right"))
    assert not is_complete(_chain(3, "left"))


def test_gap_before_last_level_node_is_incomplete():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    right.insert_left(54)
    assert not is_complete(root)
    left.insert_left(10)
    left.insert_right(15)
    assert is_complete(root)


def test_full_but_not_perfect():
    root = Node(98)
    left = root.insert_left(12)
    root.insert_right(402)
    left.insert_left(6)
    left.insert_right(16)
    assert is_full(root)
    assert not is_perfect(root)
    assert is_complete(root)
    assert balance(root) == 1


@pytest.mark.parametrize("count", range(1, 40))
def test_complete_trees(count):
    root = _complete(count)
    assert size(root) == count
    assert is_complete(root)
    assert is_perfect(root) == ((count + 1) & count == 0)
    assert balance(root) in (0, 1)


@given(shapes)
def test_leaves_and_internal_nodes_partition(shape):
    root = _build(shape)
    assert leaves(root) + internal_nodes(root) == size(root)


@given(shapes)
def test_full_tree_has_one_more_leaf_than_internal(shape):
    root = _build(shape)
    if is_full(root):
        assert leaves(root) == internal_nodes(root) + 1
    else:
        assert not is_perfect(root)


@given(shapes)
def test_perfect_tree_size(shape):
    root = _build(shape)
    if is_perfect(root):
        assert size(root) == 2 ** (height(root) + 1) - 1
        assert is_complete(root) and is_full(root)
    else:
        assert size(root) < 2 ** (height(root) + 1) - 1


@given(shapes)
def test_height_and_balance_follow_subtrees(shape):
    root = _build(shape)
    child_levels = [height(c) + 1 if c is not None else 0 for c in (root.left, root.right)]
    assert height(root) == max(child_levels)
    assert balance(root) == child_levels[0] - child_levels[1]
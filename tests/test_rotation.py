import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.bst import array_to_bst, is_bst
from treekit.node import Node
from treekit.rotation import rotate_left, rotate_right
from treekit.traversal import inorder, preorder


def _chain_right(*values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_right(value)
    return root


def _chain_left(*values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root


def test_rotate_left_promotes_right_child():
    root = _chain_right(1, 2, 3)
    pivot = rotate_left(root)
    assert pivot.value == 2
    assert pivot.left is root
    assert pivot.right.value == 3
    assert pivot.parent is None
    assert root.parent is pivot
    assert root.right is None


def test_rotate_right_promotes_left_child():
    root = _chain_left(3, 2, 1)
    pivot = rotate_right(root)
    assert pivot.value == 2
    assert pivot.right is root
    assert pivot.left.value == 1
    assert pivot.parent is None
    assert root.parent is pivot
    assert root.left is None


def test_rotate_left_moves_inner_subtree():
    root = Node(10)
    root.insert_left(5)
    right = root.insert_right(20)
    inner = right.insert_left(15)
    right.insert_right(25)
    before = list(inorder(root))
    pivot = rotate_left(root)
    assert pivot is right
    assert root.right is inner
    assert inner.parent is root
    assert list(inorder(pivot)) == before


def test_rotate_right_moves_inner_subtree():
    root = Node(20)
    root.insert_right(25)
    left = root.insert_left(10)
    inner = left.insert_right(15)
    left.insert_left(5)
    before = list(inorder(root))
    pivot = rotate_right(root)
    assert pivot is left
    assert root.left is inner
    assert inner.parent is root
    assert list(inorder(pivot)) == before


def test_rotating_a_subtree_relinks_its_parent():
    top = Node(50)
    child = top.insert_left(30)
    grandchild = child.insert_left(20)
    pivot = rotate_right(child)
    assert pivot is grandchild
    assert top.left is grandchild
    assert grandchild.parent is top
    assert child.parent is grandchild


def test_rotations_round_trip():
    root = Node(10)
    root.insert_left(5)
    right = root.insert_right(20)
    right.insert_left(15)
    right.insert_right(25)
    before = list(preorder(root))
    restored = rotate_right(rotate_left(root))
    assert restored is root
    assert restored.parent is None
    assert list(preorder(restored)) == before


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_rotating_a_leaf_raises(rotate):
    with pytest.raises(ValueError):
        rotate(Node(1))


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_rotating_nothing_raises(rotate):
    with pytest.raises(ValueError):
        rotate(None)


def test_rotate_left_without_right_child_raises():
    with pytest.raises(ValueError):
        rotate_left(_chain_left(3, 2))


@given(st.lists(st.integers(min_value=1, max_value=100), min_size=1))
def test_rotate_left_keeps_search_order(values):
    root = array_to_bst([0] + values)
    before = list(inorder(root))
    pivot = rotate_left(root)
    assert list(inorder(pivot)) == before
    assert is_bst(pivot)
    assert pivot.parent is None
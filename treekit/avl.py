"""Self-balancing AVL trees of distinct integers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from treekit.bst import bst_remove, bst_search
from treekit.measure import balance
from treekit.node import Node
from treekit.rotation import rotate_left, rotate_right


def _avl_within(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    if abs(balance(tree)) > 1:
        return False
    return _avl_within(tree.left, low, tree.value) and _avl_within(
        tree.right, tree.value, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a BST whose subtree heights differ by at most one.

    An empty tree is not an AVL tree.
    """
    return tree is not None and _avl_within(tree, None, None)


def _insert(node: Optional[Node], parent: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert below node; return the subtree's new root and the created node."""
    if node is None:
        created = Node(value, parent=parent)
        return created, created
    if value < node.value:
        node.left, created = _insert(node.left, node, value)
    elif value > node.value:
        node.right, created = _insert(node.right, node, value)
    else:
        raise ValueError(f"{value} is already in the tree")

    factor = balance(node)
    if factor > 1 and value < node.left.value:
        node = rotate_right(node)
    elif factor < -1 and value > node.right.value:
        node = rotate_left(node)
    elif factor > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, created


def avl_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert a value, rebalancing on the way up.

    Returns the tree's root after rebalancing and the node created for value.
    Raises ValueError if the value is already present.
    """
    return _insert(root, None, value)


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting the values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        root, _ = avl_insert(root, value)
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    """Rebalance bottom-up with single rotations; return the subtree's root."""
    if node is None or node.is_leaf():
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        node = rotate_right(node)
    elif factor < -1:
        node = rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value if present, rebalance, and return the tree's root.

    A missing value leaves the tree as it was; removing the last node returns None.
    """
    if bst_search(root, value) is not None:
        root = bst_remove(root, value)
    return _rebalance(root)


def _build(values: Sequence[int], start: int, end: int, parent: Optional[Node]) -> Optional[Node]:
    if start > end:
        return None
    middle = (start + end) // 2
    node = Node(values[middle], parent=parent)
    node.left = _build(values, start, middle - 1, node)
    node.right = _build(values, middle + 1, end, node)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values, splitting each range at its middle."""
    return _build(values, 0, len(values) - 1, None)
"""Binary search trees of distinct integers."""

from __future__ import annotations

from typing import Iterable, Optional

from treekit.node import Node


def _within(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    return _within(tree.left, low, tree.value) and _within(tree.right, tree.value, high)


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if every left value is smaller and every right value larger.

    Duplicate values are not allowed. An empty tree is not a BST.
    """
    return tree is not None and _within(tree, None, None)


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert a value and return the node created for it.

    When root is None the created node is the root of a new tree.
    Raises ValueError if the value is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, parent=node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, parent=node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"{value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST by inserting the values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding value, or None if it is absent."""
    node = tree
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


def _delete(root: Node, node: Node) -> Optional[Node]:
    """Unlink node from the tree rooted at root and return the resulting root."""
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        return _delete(root, successor)

    child = node.right if node.left is None else node.left
    parent = node.parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    return root if parent is not None else child


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value from the BST and return the new root (None if it empties).

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises ValueError if the value is absent.
    """
    node = bst_search(root, value)
    if root is None or node is None:
        raise ValueError(f"{value} is not in the tree")
    return _delete(root, node)
"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treekit.node import Node


def _levels(tree: Optional[Node]) -> int:
    """Return the number of levels in the tree; 0 for an empty tree."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest root-to-leaf path; 0 if empty."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right's; 0 for an empty tree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def _full(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return _full(tree.left) and _full(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children; False if empty."""
    return tree is not None and _full(tree)


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one depth; False if empty."""
    if tree is None:
        return False
    level = [tree]
    while level:
        children = [child for node in level for child in (node.left, node.right)]
        present = [child for child in children if child is not None]
        if present and len(present) != len(children):
            return False
        level = present
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except the last, filled from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True
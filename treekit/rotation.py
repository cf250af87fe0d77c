"""Left and right rotations of binary tree nodes."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def _replace_in_parent(parent: Optional[Node], old: Node, new: Node) -> None:
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate the subtree left and return its new root, the former right child.

    The former root's parent, if any, is relinked to the new root.
    Raises ValueError if the node is missing or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = tree.right
    inner = pivot.left
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree.parent, tree, pivot)
    pivot.left = tree
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate the subtree right and return its new root, the former left child.

    The former root's parent, if any, is relinked to the new root.
    Raises ValueError if the node is missing or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = tree.left
    inner = pivot.right
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree.parent, tree, pivot)
    pivot.right = tree
    tree.parent = pivot
    return pivot
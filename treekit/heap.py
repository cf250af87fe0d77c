"""Max binary heaps kept as complete binary trees of linked nodes."""

from __future__ import annotations

from typing import Iterable, Optional

from treekit.measure import is_complete, size
from treekit.node import Node


def _parent_not_smaller(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    for child in (tree.left, tree.right):
        if child is not None and child.value > tree.value:
            return False
    return _parent_not_smaller(tree.left) and _parent_not_smaller(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent.

    Equal values are allowed. An empty tree is not a heap.
    """
    return is_complete(tree) and _parent_not_smaller(tree)


def _path(position: int) -> str:
    """Return the left/right steps ('0'/'1') from the root to a 1-based position."""
    return bin(position)[3:]


def _walk(root: Node, steps: str) -> Node:
    node = root
    for step in steps:
        child = node.right if step == "1" else node.left
        if child is None:
            raise ValueError("the tree is not complete")
        node = child
    return node


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert a value into the max heap.

    The value goes into the next free position and moves up while it is
    larger than its parent. Returns the heap's root and the node that now
    holds the inserted value.
    """
    if root is None:
        created = Node(value)
        return created, created
    steps = _path(size(root) + 1)
    parent = _walk(root, steps[:-1])
    node = Node(value, parent=parent)
    if steps[-1] == "1":
        parent.right = node
    else:
        parent.left = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return root, node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting the values in order; None if there are none."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _sift_down(node: Node) -> None:
    while True:
        best = max(
            child.value
            for child in (node, node.left, node.right)
            if child is not None
        )
        if node.left is not None and node.left.value == best:
            target = node.left
        elif node.right is not None and node.right.value == best:
            target = node.right
        else:
            return
        node.value, target.value = target.value, node.value
        node = target


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the root value of the max heap.

    The last node's value takes the root's place and sinks to its position.
    Returns the extracted value and the heap's root (None once it is empty).
    Raises ValueError for an empty heap.
    """
    if root is None:
        raise ValueError("cannot extract from an empty heap")
    count = size(root)
    extracted = root.value
    if count == 1:
        return extracted, None
    last = _walk(root, _path(count))
    parent = last.parent
    if parent.left is last:
        parent.left = None
    else:
        parent.right = None
    last.parent = None
    root.value = last.value
    _sift_down(root)
    return extracted, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap by repeated extraction and return the values, largest first."""
    values: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        values.append(value)
    return values
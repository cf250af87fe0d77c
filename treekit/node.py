"""Binary tree nodes and the relations between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its parent and children.

    Nodes compare and hash by identity, so they can be kept in sets.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        child = Node(value, parent=self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        child = Node(value, parent=self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in _lineage(self)) - 1


def _lineage(node: Node) -> Iterator[Node]:
    """Yield the node itself, then each of its ancestors up to the root."""
    current: Optional[Node] = node
    while current is not None:
        yield current
        current = current.parent


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes (or either node itself).

    Returns None if either node is None or the nodes are in different trees.
    """
    if first is None or second is None:
        return None
    ancestors = set(_lineage(first))
    return next((node for node in _lineage(second) if node in ancestors), None)
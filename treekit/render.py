"""Text drawings of binary trees."""

from __future__ import annotations

from typing import Optional

from treekit.measure import height
from treekit.node import Node


def render(tree: Optional[Node]) -> str:
    """Draw the tree as lines of text, one line per level; empty for no tree."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]

    def put(depth: int, column: int, text: str) -> None:
        row = rows[depth]
        end = column + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        row[column:end] = text

    def place(node: Optional[Node], offset: int, depth: int) -> int:
        if node is None:
            return 0
        label = f"({node.value:03d})"
        width = len(label)
        is_left = node.parent is not None and node.parent.left is node
        left = place(node.left, offset, depth + 1)
        right = place(node.right, offset + left + width, depth + 1)
        put(depth, offset + left, label)
        if depth:
            if is_left:
                put(depth - 1, offset + left + width // 2, "-" * (width + right))
            else:
                put(depth - 1, offset - width // 2, "-" * (left + width))
            put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    place(tree, 0, 0)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Optional[Node]) -> None:
    """Print the drawing of the tree; print nothing for no tree."""
    if tree is None:
        return
    print(render(tree))
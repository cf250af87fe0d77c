"""Linked binary trees: traversals, measures, rotations, BSTs, AVL trees and max heaps."""

__version__ = "0.1.0"
# treekit

Linked binary trees with parent pointers, and the algorithms that work on
them: traversals, measures, rotations, binary search trees, AVL trees and max
binary heaps. Pure Python, no dependencies.

## Install

```
pip install treekit
```

## Building trees by hand

`treekit.node.Node` is a dataclass with `value`, `parent`, `left` and `right`.
Nodes compare and hash by identity.

```python
from treekit.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

left.is_leaf()        # False
root.is_root()        # True
right.sibling()       # the node holding 12
left.right.uncle()    # the node holding 402
left.right.depth()    # 2
lowest_common_ancestor(left.right, right)  # root
```

`insert_left` and `insert_right` return the new child and push any existing
child one level down, beneath the new node. `lowest_common_ancestor` returns
`None` if either node is `None` or the nodes are in different trees.

## Walking and measuring

The traversals are generators of node values; an empty tree (`None`) yields
nothing.

```python
from treekit.traversal import preorder, inorder, postorder, levelorder
from treekit.measure import height, size, leaves, internal_nodes, balance
from treekit.measure import is_full, is_perfect, is_complete

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(levelorder(root))  # [98, 12, 402, 54]
height(root)            # 2 (edges on the longest root-to-leaf path)
size(root)              # 4
leaves(root)            # 2
internal_nodes(root)    # 2
```

`balance` is the left subtree's height minus the right's. `is_full`,
`is_perfect` and `is_complete` return `False` for an empty tree.

## Rotations

`treekit.rotation.rotate_left` and `rotate_right` rotate a subtree and return
its new root, relinking the former root's parent. They raise `ValueError`
when the node is `None` or lacks the child the rotation needs.

## Binary search trees

```python
from treekit.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

root = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_bst(root)              # True
bst_search(root, 34)      # the node holding 34, or None if absent
bst_insert(root, 50)      # returns the node created for 50
root = bst_remove(root, 79)
```

- `array_to_bst` inserts the values in order and skips repeats.
- `bst_insert(None, value)` returns a new root node; inserting a value that is
  already present raises `ValueError`.
- `bst_remove` returns the new root (`None` once the tree is empty). A node
  with two children takes its in-order successor's value. Removing an absent
  value raises `ValueError`.

## AVL trees

```python
from treekit.avl import array_to_avl, avl_insert, avl_remove, sorted_array_to_avl, is_avl

avl = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
is_avl(avl)                      # True
avl, node = avl_insert(avl, 60)  # new root and the node created for 60
avl = avl_remove(avl, 128)
balanced = sorted_array_to_avl([1, 2, 3, 4, 5, 6, 7])
```

- `avl_insert` returns a tuple of the root after rebalancing and the created
  node; a duplicate value raises `ValueError`.
- `avl_remove` returns the root after rebalancing; an absent value leaves the
  tree as it was.
- `sorted_array_to_avl` builds the tree directly from sorted values by
  splitting each range at its middle.

## Max heaps

```python
from treekit.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_heap(heap)                    # True
heap, node = heap_insert(heap, 100)
value, heap = heap_extract(heap) # 100, and the heap's root
heap_to_sorted_array(heap)       # [91, 87, 84, 79, 68, 47, 34, 32, 21, 2]
```

- `heap_insert` returns the heap's root and the node that now holds the
  inserted value.
- `heap_extract` returns the extracted value and the root (`None` once the
  heap is empty); extracting from an empty heap raises `ValueError`.
- `heap_to_sorted_array` empties the heap and returns its values, largest
  first.

## Drawing a tree

```python
from treekit.render import render, print_tree

print_tree(root)
```

`render` returns the same drawing as a string, one line per level: each value
boxed as `(nnn)`, with dashes and dots linking parents to children. An empty
tree renders as an empty string, and `print_tree(None)` prints nothing.

## What it does not do

treekit is a library only: it has no command-line tool, and it does not save
or load trees.
# bstree

This package provides plain binary trees and binary search trees of integers. Trees are built from `Node` objects, and the package also has a small text menu.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Using the library

Everything is in `bstree.tree`:

```python
from bstree.tree import (
    Node, make_tree, bst_insert, bst_search, in_order, pre_order,
    post_order, depth, level, count_nodes, count_leaves, print_tree,
)

root = None
for value in (50, 30, 70, 20, 40):
    root = bst_insert(root, value)

in_order(root)      # [20, 30, 40, 50, 70]
pre_order(root)     # [50, 30, 20, 40, 70]
post_order(root)    # [20, 40, 30, 70, 50]
bst_search(root, 40)  # True
depth(root)         # 3
level(root, 20)     # 3 (the root is level 1; 0 means not found)
count_nodes(root)   # 5
count_leaves(root)  # 3
print_tree(root)    # one value per line, children indented two more spaces
```

### Trees and roots

A tree is either a `Node` or `None`, and `None` is the empty tree. A `Node` has the fields `info`, `left` and `right`, and an `is_leaf` property.

The functions `bst_insert`, `add_leftmost_leaf` and `add_leaf` return the root. Assign that value back to your variable, because inserting into an empty tree creates a new root. `bst_insert` ignores values that are already in the tree.

### Other functions

- `make_tree(info, left, right)` builds a node from a value and two subtrees.
- `search(node, value)` looks for a value anywhere in the tree and does not rely on ordering. `bst_search` uses the binary-search-tree ordering.
- `is_empty(node)` is true for the empty tree.
- `is_uner_left` and `is_uner_right` are true when the root has only a left subtree or only a right subtree.
- `is_skew_left` and `is_skew_right` are true when no node has a right child, or no node has a left child. The empty tree passes both tests.
- `add_leftmost_leaf(node, value)` attaches a new leaf below the leftmost node.
- `add_leaf(node, parent_value, value, left)` gives every leaf holding `parent_value` a new child. The child goes on the left when `left` is true and on the right otherwise.
- `format_tree(node, indent)` returns the indented listing as a string. `print_tree(node, indent, file)` writes that listing to `file`, or to standard output if no file is given.

## The menu

```
bstree
```

This shows a numbered menu and reads one choice per line from standard input. The menu stops when you enter `0` or when the input ends. Any number outside 0–10 is reported as invalid.

## What it does not do

The menu entries 1 to 10 are accepted, but they do not act on any tree. After any of these choices, the menu is simply shown again. To build, search or traverse trees, use the functions in `bstree.tree` from Python.
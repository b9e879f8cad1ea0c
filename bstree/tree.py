"""Binary tree of integers with general and binary-search-tree operations.

An empty tree is ``None``; a non-empty tree is its root :class:`Node`.
Operations that may replace the root return the new root.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class Node:
    """A tree node holding an integer and two optional subtrees."""

    info: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


Tree = Optional[Node]


def _walk(node: Tree) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, level)`` pairs in pre-order; the root is level 1."""
    stack: list[tuple[Node, int]] = [(node, 1)] if node is not None else []
    while stack:
        current, lvl = stack.pop()
        yield current, lvl
        if current.right is not None:
            stack.append((current.right, lvl + 1))
        if current.left is not None:
            stack.append((current.left, lvl + 1))


def make_tree(info: int, left: Tree = None, right: Tree = None) -> Node:
    """Build a tree whose root holds ``info`` with the given subtrees."""
    return Node(info, left, right)


def is_uner_left(node: Tree) -> bool:
    """True if the tree is non-empty and has only a left subtree."""
    return node is not None and node.left is not None and node.right is None


def is_uner_right(node: Tree) -> bool:
    """True if the tree is non-empty and has only a right subtree."""
    return node is not None and node.left is None and node.right is not None


def is_empty(node: Tree) -> bool:
    """True if the tree is empty."""
    return node is None


def pre_order(node: Tree) -> list[int]:
    """Values in root, left, right order."""
    return [n.info for n, _ in _walk(node)]


def in_order(node: Tree) -> list[int]:
    """Values in left, root, right order."""
    result: list[int] = []
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.info)
        current = current.right
    return result


def post_order(node: Tree) -> list[int]:
    """Values in left, right, root order."""
    result: list[int] = []
    stack: list[Node] = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.info)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    result.reverse()
    return result


def format_tree(node: Tree, indent: int = 0) -> str:
    """Render the tree one value per line, children indented two more spaces."""
    return "".join(
        f"{' ' * (indent + 2 * (lvl - 1))}{n.info}\n" for n, lvl in _walk(node)
    )


def print_tree(node: Tree, indent: int = 0, file: Optional[TextIO] = None) -> None:
    """Write :func:`format_tree` output to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_tree(node, indent))


def search(node: Tree, value: int) -> bool:
    """True if any node of the tree holds ``value``."""
    return any(n.info == value for n, _ in _walk(node))


def count_nodes(node: Tree) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk(node))


def count_leaves(node: Tree) -> int:
    """Number of leaves in the tree."""
    return sum(1 for n, _ in _walk(node) if n.is_leaf)


def is_skew_left(node: Tree) -> bool:
    """True if no node has a right subtree (the empty tree counts)."""
    while node is not None:
        if node.right is not None:
            return False
        node = node.left
    return True


def is_skew_right(node: Tree) -> bool:
    """True if no node has a left subtree (the empty tree counts)."""
    while node is not None:
        if node.left is not None:
            return False
        node = node.right
    return True


def level(node: Tree, value: int) -> int:
    """Level of the first node holding ``value`` in pre-order; 0 if absent."""
    return next((lvl for n, lvl in _walk(node) if n.info == value), 0)


def depth(node: Tree) -> int:
    """Height of the tree; the empty tree has height 0."""
    return max((lvl for _, lvl in _walk(node)), default=0)


def add_leftmost_leaf(node: Tree, value: int) -> Node:
    """Attach ``value`` as the new leftmost leaf and return the root."""
    new = Node(value)
    if node is None:
        return new
    current = node
    while current.left is not None:
        current = current.left
    current.left = new
    return node


def add_leaf(node: Tree, parent_value: int, value: int, left: bool = True) -> Tree:
    """Give every leaf holding ``parent_value`` a new child ``value``.

    The child goes on the left when ``left`` is true, otherwise on the right.
    Returns the root.
    """
    targets = [n for n, _ in _walk(node) if n.is_leaf and n.info == parent_value]
    for target in targets:
        if left:
            target.left = Node(value)
        else:
            target.right = Node(value)
    return node


def bst_search(node: Tree, value: int) -> bool:
    """True if a binary search tree holds ``value``."""
    while node is not None:
        if value == node.info:
            return True
        node = node.left if value < node.info else node.right
    return False


def bst_insert(node: Tree, value: int) -> Node:
    """Insert ``value`` into a binary search tree, ignoring duplicates."""
    if node is None:
        return Node(value)
    current = node
    while True:
        if value < current.info:
            if current.left is None:
                current.left = Node(value)
                break
            current = current.left
        elif value > current.info:
            if current.right is None:
                current.right = Node(value)
                break
            current = current.right
        else:
            break
    return node
"""Size and shape measurements of binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from .node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.append(node.right)
        stack.append(node.left)


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path, 0 for None."""
    if tree is None:
        return 0
    best = 0
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def _levels(tree: Node | None) -> int:
    """Return the number of nodes on the longest downward path."""
    return 0 if tree is None else height(tree) + 1


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the left subtree's level count minus the right's, 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)
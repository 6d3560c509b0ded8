"""Shape and ordering predicates for binary trees."""

from __future__ import annotations

from collections import deque

from .measure import _levels, _nodes, size
from .node import Node
from .traversal import preorder


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either no child or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if, at every node, both subtrees are equally high."""
    if tree is None:
        return False
    return all(_levels(node.left) == _levels(node.right) for node in _nodes(tree))


def is_complete(tree: Node | None) -> bool:
    """Return True if the nodes fill the levels from left to right with no gaps."""
    if tree is None:
        return False
    count = size(tree)
    queue = deque([(tree, 0)])
    while queue:
        node, index = queue.popleft()
        if index >= count:
            return False
        for child, child_index in ((node.left, 2 * index + 1), (node.right, 2 * index + 2)):
            if child is not None:
                queue.append((child, child_index))
    return True


def is_bst(tree: Node | None) -> bool:
    """Return True if every value left of the root is smaller than the root's
    value and every value right of it is larger."""
    if tree is None:
        return False
    return all(value < tree.value for value in preorder(tree.left)) and all(
        value > tree.value for value in preorder(tree.right)
    )
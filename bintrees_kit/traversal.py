"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def _walk(tree: Node | None, order: str) -> Iterator[int]:
    stack: list[tuple[Node | None, bool]] = [(tree, False)]
    while stack:
        node, ready = stack.pop()
        if node is None:
            continue
        if ready:
            yield node.value
            continue
        if order == "pre":
            stack += [(node.right, False), (node.left, False), (node, True)]
        elif order == "in":
            stack += [(node.right, False), (node, True), (node.left, False)]
        else:
            stack += [(node, True), (node.right, False), (node.left, False)]


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    return _walk(tree, "pre")


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    return _walk(tree, "in")


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    return _walk(tree, "post")


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)
"""Binary search tree of distinct integers built on parent-linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .measure import size
from .node import Node
from .traversal import inorder


class BinarySearchTree:
    """A binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Node | None:
        """Insert a value and return its new node, or None if already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, current)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value, current)
                    return current.right
                current = current.right
            else:
                return None

    def search(self, value: int) -> Node | None:
        """Return the node holding the value, or None."""
        current = self.root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def remove(self, value: int) -> None:
        """Remove the value if present; a node with two children takes the
        value of its in-order successor, which is removed instead."""
        node = self.search(value)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)
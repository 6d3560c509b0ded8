"""Binary tree nodes with parent links and the operations defined on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between the node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Node | None:
        """Return the other child of the parent, or None if there is none."""
        parent = self.parent
        if parent is None or parent.left is None or parent.right is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of the parent, or None if there is none."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left

    def rotate_left(self) -> Node:
        """Rotate the tree rooted here to the left and return the new root."""
        pivot = self.right
        if pivot is None:
            return self
        self.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = self
        pivot.parent = None
        pivot.left = self
        self.parent = pivot
        return pivot

    def rotate_right(self) -> Node:
        """Rotate the tree rooted here to the right and return the new root."""
        pivot = self.left
        if pivot is None:
            return self
        self.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = self
        pivot.parent = None
        pivot.right = self
        self.parent = pivot
        return pivot


def _subtree(tree: Node | None) -> Iterator[Node]:
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.append(node.right)
        stack.append(node.left)


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the lowest node that has both nodes in its subtree, or None."""
    if first is None or second is None:
        return None
    candidate = first
    while candidate is not None:
        if any(node is second for node in _subtree(candidate)):
            return candidate
        candidate = candidate.parent
    return None
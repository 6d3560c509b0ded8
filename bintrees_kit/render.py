"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

from typing import TextIO

from .node import Node


def _height(tree: Node) -> int:
    best = 0
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def _put(row: list[str], index: int, char: str) -> None:
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _draw(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for i in range(length):
            _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ").ljust(2) + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    print(render(tree), end="", file=file)
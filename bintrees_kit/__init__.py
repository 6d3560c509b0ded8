"""Parent-linked binary trees: nodes, traversals, measurements, shape checks, a binary search tree and an ASCII renderer."""

__version__ = "0.1.0"
__all__ = ["bst", "measure", "node", "properties", "render", "traversal"]
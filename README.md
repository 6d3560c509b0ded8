# bintrees_kit

A small library of linked binary trees. Every node holds an integer value and
knows its parent, its left child and its right child.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building trees

`bintrees_kit.node.Node(value, parent=None)` creates a node. Its attributes
`value`, `parent`, `left` and `right` may be read and set directly.

```python
from bintrees_kit.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes its right child

left.is_leaf()            # False
root.is_root()            # True
left.right.depth()        # 2
left.sibling()            # the node holding 128
left.right.uncle()        # the node holding 128
lowest_common_ancestor(left, right)  # root
```

- `insert_left(value)` / `insert_right(value)` add a new child and return it;
  an existing child on that side is pushed down to the same side of the new node.
- `sibling()` returns `None` unless the parent has both children.
- `lowest_common_ancestor(first, second)` returns the lowest ancestor of
  `first` (or `first` itself) whose subtree contains `second`, or `None`.
- `rotate_left()` and `rotate_right()` rotate the subtree rooted at a node and
  return its new root, whose `parent` is set to `None`. If there is no child to
  rotate with, the node itself is returned unchanged.

## Walking trees

`bintrees_kit.traversal` offers `preorder`, `inorder`, `postorder` and
`levelorder`. Each takes the root node (or `None`) and yields the stored values
in that order:

```python
from bintrees_kit.traversal import levelorder

list(levelorder(root))
```

## Measuring

`bintrees_kit.measure` provides:

- `height(tree)`: edges on the longest downward path; 0 for a single node or `None`.
- `size(tree)`: number of nodes.
- `leaves(tree)`: number of nodes without children.
- `internal_nodes(tree)`: number of nodes with at least one child.
- `balance(tree)`: the height of the left subtree minus that of the right,
  each counted in nodes (an empty subtree counts 0); 0 for `None`.

## Checking shape

`bintrees_kit.properties` provides predicates that all return `False` for `None`:

- `is_full(tree)`: every node has zero or two children.
- `is_perfect(tree)`: at every node both subtrees are equally high.
- `is_complete(tree)`: the nodes fill the levels from left to right with no gaps.
- `is_bst(tree)`: every value in the left subtree is smaller than the root's
  value and every value in the right subtree is larger. Only the root's value
  is compared; deeper subtrees are not checked against their own roots.

## Binary search trees

```python
from bintrees_kit.bst import BinarySearchTree

tree = BinarySearchTree([79, 47, 68, 87, 84, 91, 21, 32])
tree.insert(5)      # the new node, or None if 5 was already present
32 in tree          # True
tree.search(32)     # the node holding 32, or None
tree.remove(79)
list(tree)          # values in ascending order
len(tree)
tree.root           # the root node, or None when empty
```

Inserting a value that is already present leaves the tree unchanged. Removing
a value that is absent does nothing. When a node with two children is removed,
it takes the value of its in-order successor, and the successor's node is
unlinked instead.

## Drawing trees

`bintrees_kit.render.render(tree)` returns an ASCII drawing of a tree, one line
per level, with each value shown as `(098)` and links drawn with `-` and `.`.
It returns an empty string for `None`. `print_tree(tree, file=None)` writes the
drawing to a text stream, standard output by default.

## What it does not do

The binary search tree does not rebalance itself; there are no AVL trees or
heaps. The package is a library only and provides no command-line tool.
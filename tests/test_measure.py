import pytest

from bintrees_kit.measure import balance, height, internal_nodes, leaves, size
from bintrees_kit.node import Node
from bintrees_kit.traversal import preorder


def _build(spec, parent=None):
    if spec is None:
        return None
    if isinstance(spec, int):
        return Node(spec, parent)
    value, left, right = spec
    node = Node(value, parent)
    node.left = _build(left, node)
    node.right = _build(right, node)
    return node


def _all_nodes(tree):
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is not None:
            yield node
            stack.extend((node.left, node.right))


def _sample():
    # 98 with 12 -> right 54, and 128 -> right 402
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _balance_sample():
    root = _sample()
    root.insert_left(45)
    root.left.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    return root


SHAPES = [
    7,
    (1, 2, 3),
    (1, (2, (3, 4, None), None), None),
    (5, None, (6, None, (7, None, 8))),
    (98, (12, 6, 16), (402, 256, 512)),
]


def test_none_measures_zero():
    assert height(None) == size(None) == leaves(None) == internal_nodes(None) == balance(None) == 0


def test_single_node():
    node = Node(5)
    assert height(node) == 0
    assert size(node) == leaves(node)
    assert internal_nodes(node) == balance(node) == height(node)


@pytest.mark.parametrize("spec", SHAPES)
def test_size_matches_traversal(spec):
    tree = _build(spec)
    assert size(tree) == len(list(preorder(tree)))


@pytest.mark.parametrize("spec", SHAPES)
def test_leaves_and_internal_nodes_partition(spec):
    tree = _build(spec)
    assert leaves(tree) + internal_nodes(tree) == size(tree)
    assert leaves(tree) == sum(1 for n in _all_nodes(tree) if n.left is None and n.right is None)


@pytest.mark.parametrize("spec", SHAPES)
def test_height_is_deepest_depth(spec):
    tree = _build(spec)
    assert height(tree) == max(node.depth() for node in _all_nodes(tree))


def test_sample_heights_follow_structure():
    root = _sample()
    assert height(root.left.right) == 0
    assert height(root.right) == height(root) - 1
    assert height(root) == root.right.right.depth()


def test_sample_counts():
    root = _sample()
    assert size(root) == len(list(preorder(root)))
    assert size(root.right) == size(root.right.right) + 1
    assert leaves(root.left.right) == size(root.left.right)
    assert internal_nodes(root.left.right) == leaves(root.right) - 1


def test_balance_sample():
    root = _balance_sample()
    assert balance(root) == 2
    assert balance(root.right) == -balance(Node(1).insert_left(2).parent)
    assert balance(root.left.left.right) == balance(root.right)


@pytest.mark.parametrize("spec", SHAPES)
def test_balance_mirror_is_negated(spec):
    def mirror(s):
        if s is None or isinstance(s, int):
            return s
        value, left, right = s
        return (value, mirror(right), mirror(left))

    assert balance(_build(mirror(spec))) == -balance(_build(spec))
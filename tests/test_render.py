import io

from bintrees_kit.node import Node
from bintrees_kit.render import print_tree, render


def build_full():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_full_tree_drawing():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(build_full()) == expected


def test_single_node():
    assert render(Node(98)) == "(098)\n"


def test_empty_tree():
    assert render(None) == ""


def test_one_line_per_level():
    root = Node(1)
    node = root
    for value in range(2, 6):
        node = node.insert_left(value)
    lines = render(root).splitlines()
    assert len(lines) == node.depth() + 1


def test_labels_on_their_level():
    root = build_full()
    lines = render(root).splitlines()
    assert f"({root.value:03d})" in lines[0]
    assert f"({root.left.value:03d})" in lines[1]
    assert f"({root.right.right.value:03d})" in lines[2]


def test_no_trailing_spaces():
    for line in render(build_full()).splitlines():
        assert line == line.rstrip(" ")


def test_large_values_keep_all_digits():
    root = Node(12345)
    root.insert_right(-7)
    text = render(root)
    assert "(12345)" in text
    assert "(-07)" in text


def test_connector_points_at_child():
    root = Node(10)
    root.insert_left(5)
    first, second = render(root).splitlines()
    dot = first.index(".")
    assert second[dot] in "0123456789()"
    assert first.rstrip().endswith(f"({root.value:03d})")


def test_print_tree_writes_rendering():
    root = build_full()
    out = io.StringIO()
    print_tree(root, out)
    assert out.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = Node(42)
    root.insert_right(7)
    print_tree(root)
    assert capsys.readouterr().out == render(root)


def test_print_tree_of_nothing_writes_nothing():
    out = io.StringIO()
    print_tree(None, out)
    assert out.getvalue() == ""
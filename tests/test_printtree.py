import io
from dataclasses import dataclass
from typing import Any, Optional

from dslabs.printtree import print_tree, render_tree


@dataclass
class N:
    elem: Any
    left: Optional["N"] = None
    right: Optional["N"] = None


def _height(node):
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def _sample():
    return N(4, N(2, N(1), N(3)), N(6, N(5), N(7)))


def test_empty_tree():
    assert render_tree(None) == "(empty)\n"


def test_single_node():
    assert render_tree(N(5)) == " 5   \n"


def test_three_nodes():
    expected = "   2     \n  / \\    \n 1   3   \n"
    assert render_tree(N(2, N(1), N(3))) == expected


def test_dimensions_follow_height():
    root = _sample()
    lines = render_tree(root).splitlines()
    h = _height(root)
    assert len(lines) == 2 * h + 1
    assert all(len(line) == (4 << h) + 1 for line in lines)


def test_all_keys_and_branches_appear():
    text = render_tree(_sample())
    for key in range(1, 8):
        assert str(key) in text
    assert text.count("/") == 3
    assert text.count("\\") == 3


def test_one_sided_tree_has_only_left_branches():
    text = render_tree(N(3, N(2, N(1))))
    assert text.count("/") == 2
    assert "\\" not in text


def test_print_tree_to_stream():
    root = _sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render_tree(root)


def test_print_tree_to_stdout(capsys):
    print_tree(None)
    assert capsys.readouterr().out == "(empty)\n"
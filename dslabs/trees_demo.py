"""Demonstration of the binary tree operations on a few sample trees."""

from __future__ import annotations

import contextlib
import io
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from dslabs.binarytree import BinaryTree
from dslabs.coloredout import compare_output, output_bold
from dslabs.lcg import usrand

_BAR = "~" * 79
_EXPECTED_FILE = "soln_treefun.out"


def _stdout_was_tty() -> bool:
    stream = sys.__stdout__
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (ValueError, OSError):
        return False


def _bold_enabled(out: TextIO) -> bool:
    return out is sys.stdout and _stdout_was_tty()


def print_tree_info(
    tree: BinaryTree, name: str, description: str, out: Optional[TextIO] = None
) -> None:
    """Write a header and the results of each tree operation to out."""
    if out is None:
        out = sys.stdout
    out.write(f"{_BAR}\n")
    out.write(output_bold(name, _bold_enabled(out)))
    out.write(f" - {description}\n")
    out.write(f"{_BAR}\n")
    out.write(f"height: {tree.height()}\n")
    out.write(f"ordered: {'true' if tree.is_ordered() else 'false'}\n")
    out.write(f"sumDistances: {tree.sum_distances()}\n")
    out.write(tree.render())
    out.write("\n")
    out.write("printLeftRight: " + "".join(f"{elem} " for elem in tree.in_order()) + "\n")
    for path in tree.paths():
        out.write("Path: " + "".join(f"{elem} " for elem in path) + "\n")
    out.write("\n\n")


def _shuffled(seed: int) -> List[int]:
    ordering = list(range(1, 11))
    random.Random(seed).shuffle(ordering)
    return ordering


def _run(out: TextIO) -> None:
    usrand(3)

    tree = BinaryTree()
    for value in _shuffled(86):
        tree.insert(value)
    print_tree_info(tree, "Tree", "random unordered tree", out)

    tree.mirror()
    print_tree_info(tree, "Mirrored", "the mirror image of the above tree", out)

    bst = BinaryTree()
    for value in _shuffled(221):
        bst.insert(value, True)
    print_tree_info(bst, "BST", "random ordered tree", out)

    bst.mirror()
    print_tree_info(bst, "BST Mirrored", "the mirror image of the above BST", out)

    ordering = _shuffled(1)
    bst.clear()
    for value in ordering[:4]:
        bst.insert(value, True)
    bst.insert(ordering[4])
    for value in ordering[5:]:
        bst.insert(value, True)
    print_tree_info(bst, "Almost BST", "a tree that has one element out of place", out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the demo; with an argument starting with 'c', colour it against the solution."""
    if argv is None:
        argv = sys.argv[1:]
    colored = bool(argv) and argv[0][:1].lower() == "c" and sys.stdout.isatty()

    if not colored:
        _run(sys.stdout)
        return 0

    expected_path = Path(_EXPECTED_FILE)
    expected = expected_path.read_text() if expected_path.is_file() else ""
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        _run(sys.stdout)
    sys.stdout.write(compare_output(buffer.getvalue(), expected))
    return 0


if __name__ == "__main__":
    sys.exit(main())
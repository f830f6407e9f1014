"""ASCII rendering of binary trees.

A node is any object with ``elem``, ``left`` and ``right`` attributes; a
missing child is ``None``.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _print_height(node: Any) -> int:
    if node is None:
        return -1
    return 1 + max(_print_height(node.left), _print_height(node.right))


def _put(grid: List[List[str]], row: int, col: int, char: str) -> None:
    line = grid[row]
    if 0 <= col < len(line):
        line[col] = char


def _draw(node: Any, grid: List[List[str]], left: int, top: int, width: int) -> None:
    text = str(node.elem)
    start_shift = 1 - (len(text) - 1) // 2
    half = _tdiv(width, 2)

    for i, char in enumerate(text):
        if left + half + i >= len(grid[top]):
            break
        _put(grid, top, left + half + start_shift + i, char)

    branch_offset = (width + 3) >> 3
    center = left + half
    left_center = left + _tdiv(half - 1, 2)
    right_center = left + half + 2 + _tdiv(half - 1, 2)

    if node.left is not None:
        branch = center - branch_offset + 1
        for pos in range(center + start_shift - 2, branch, -1):
            _put(grid, top, pos, "_")
        _put(grid, top + 1, branch, "/")
        for pos in range(branch - 1, left_center + 2, -1):
            _put(grid, top + 1, pos, "_")
        _draw(node.left, grid, left, top + 2, half - 1)

    if node.right is not None:
        branch = center + branch_offset + 1
        for pos in range(center + start_shift + len(text) + 1, branch):
            _put(grid, top, pos, "_")
        _put(grid, top + 1, branch, "\\")
        for pos in range(branch + 1, right_center):
            _put(grid, top + 1, pos, "_")
        _draw(node.right, grid, left + half + 2, top + 2, half - 1)


def render_tree(root: Optional[Any]) -> str:
    """Return the drawing of the tree, one text line per row."""
    if root is None:
        return "(empty)\n"
    height = _print_height(root)
    width = (4 << height) - 3
    rows = 2 * height + 1
    grid = [[" "] * (width + 4) for _ in range(rows)]
    _draw(root, grid, 0, 0, width)
    return "".join("".join(line) + "\n" for line in grid)


def print_tree(root: Optional[Any], out: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to out (standard output by default)."""
    (out if out is not None else sys.stdout).write(render_tree(root))
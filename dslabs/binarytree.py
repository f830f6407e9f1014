"""A binary tree with random or ordered insertion and a few traversals."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from dslabs.lcg import urand
from dslabs.printtree import print_tree, render_tree


@dataclass
class Node:
    """A tree node holding one element and two optional children."""

    elem: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _copy(node: Optional[Node]) -> Optional[Node]:
    if node is None:
        return None
    return Node(node.elem, _copy(node.left), _copy(node.right))


def _height(node: Optional[Node]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def _in_order(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.elem
        yield from _in_order(node.right)


def _mirror(node: Optional[Node]) -> None:
    if node is not None:
        node.left, node.right = node.right, node.left
        _mirror(node.left)
        _mirror(node.right)


def _paths(node: Optional[Node], prefix: List[Any]) -> Iterator[List[Any]]:
    if node is None:
        return
    path = prefix + [node.elem]
    yield from _paths(node.left, path)
    yield from _paths(node.right, path)
    if node.left is None and node.right is None:
        yield path


def _spaced(elems: Iterator[Any]) -> str:
    return "".join(f"{elem} " for elem in elems)


class BinaryTree:
    """A linked binary tree; ``root`` is None when the tree is empty."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, elem: Any, sorted: bool = False) -> None:
        """Insert elem at a leaf.

        With ``sorted`` the path follows binary-search-tree order (equal
        elements go right); otherwise each step goes left or right at random.
        """
        if self.root is None:
            self.root = Node(elem)
            return
        node = self.root
        while True:
            go_left = elem < node.elem if sorted else urand() % 2 == 0
            if go_left:
                if node.left is None:
                    node.left = Node(elem)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(elem)
                    return
                node = node.right

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def copy(self) -> "BinaryTree":
        """Return a deep copy of the tree."""
        duplicate = BinaryTree()
        duplicate.root = _copy(self.root)
        return duplicate

    def height(self) -> int:
        """Length of the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root)

    def in_order(self) -> Iterator[Any]:
        """Yield the elements left to right."""
        return _in_order(self.root)

    def print_left_to_right(self) -> None:
        """Write the elements in order, each followed by a space, then a newline."""
        line = _spaced(self.in_order())
        sys.stdout.write(line + "\n")

    def mirror(self) -> None:
        """Flip the tree over a vertical axis in place."""
        _mirror(self.root)

    def paths(self) -> Iterator[List[Any]]:
        """Yield every root-to-leaf path, leftmost leaf first."""
        return _paths(self.root, [])

    def print_paths(self) -> None:
        """Write every root-to-leaf path on its own line."""
        for path in self.paths():
            sys.stdout.write("Path: " + _spaced(iter(path)) + "\n")

    def sum_distances(self) -> int:
        """Sum of the depths of all nodes."""
        total = 0
        pending = [(self.root, 0)] if self.root is not None else []
        while pending:
            node, depth = pending.pop()
            total += depth
            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, depth + 1))
        return total

    def is_ordered(self) -> bool:
        """True if an in-order traversal is nondecreasing."""
        elems = list(self.in_order())
        return all(a <= b for a, b in zip(elems, elems[1:]))

    def render(self) -> str:
        """Return an ASCII drawing of the tree."""
        return render_tree(self.root)

    def print(self) -> None:
        """Write the drawing of the tree to standard output."""
        print_tree(self.root, sys.stdout)
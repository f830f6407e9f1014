"""A double-ended queue built on a doubly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


class Deque:
    """A deque whose items can be pushed and popped at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._left: Optional[_Node] = None
        self._right: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_right(item)

    def push_left(self, item: Any) -> None:
        """Add an item at the left end."""
        node = _Node(item, next=self._left)
        if self._left is None:
            self._right = node
        else:
            self._left.prev = node
        self._left = node
        self._size += 1

    def push_right(self, item: Any) -> None:
        """Add an item at the right end."""
        node = _Node(item, prev=self._right)
        if self._right is None:
            self._left = node
        else:
            self._right.next = node
        self._right = node
        self._size += 1

    def pop_left(self) -> Any:
        """Remove and return the leftmost item."""
        if self._left is None:
            raise IndexError("pop from an empty deque")
        node = self._left
        self._left = node.next
        if self._left is None:
            self._right = None
        else:
            self._left.prev = None
        self._size -= 1
        return node.data

    def pop_right(self) -> Any:
        """Remove and return the rightmost item."""
        if self._right is None:
            raise IndexError("pop from an empty deque")
        node = self._right
        self._right = node.prev
        if self._right is None:
            self._left = None
        else:
            self._right.next = None
        self._size -= 1
        return node.data

    def is_empty(self) -> bool:
        """True if the deque holds no items."""
        return self._left is None

    def remove_duplicates(self) -> None:
        """Collapse every run of equal consecutive items to a single item."""
        node = self._left
        while node is not None:
            run_end = node
            while run_end.next is not None and run_end.next.data == node.data:
                run_end = run_end.next
                self._size -= 1
            if run_end is not node:
                node.next = run_end.next
                if node.next is None:
                    self._right = node
                else:
                    node.next.prev = node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        node = self._left
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Push sample words on the left, remove duplicates, and pop them from the right."""
    words = ["ba", "ba", "ab", "ab", "ab", "ab", "ba", "ba"]
    deque = Deque()
    for word in words:
        deque.push_left(word)
    deque.remove_duplicates()
    while not deque.is_empty():
        print(deque.pop_right())
    return 0


if __name__ == "__main__":
    sys.exit(main())
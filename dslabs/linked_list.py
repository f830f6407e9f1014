"""A singly linked list of keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass
class _Node:
    key: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list; the first key is the head."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        tail: Optional[_Node] = None
        for key in keys:
            node = _Node(key)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, key: int) -> None:
        """Insert a new key at the head."""
        self._head = _Node(key, self._head)

    def delete_last(self) -> None:
        """Remove the last key; an empty list is left alone."""
        if self._head is None:
            return
        if self._head.next is None:
            self._head = None
            return
        node = self._head
        while node.next is not None and node.next.next is not None:
            node = node.next
        node.next = None

    def remove(self, key: int) -> None:
        """Remove the first occurrence of key, if there is one."""
        previous: Optional[_Node] = None
        for node in self._nodes():
            if node.key == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return
            previous = node

    def insert_after(self, old_key: int, new_key: int) -> None:
        """Insert new_key right after every node holding old_key."""
        node = self._head
        while node is not None:
            if node.key == old_key:
                node.next = _Node(new_key, node.next)
                node = node.next.next
            else:
                node = node.next

    def to_list(self) -> List[int]:
        """Return the keys in order, head first."""
        return list(self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._nodes())

    def __str__(self) -> str:
        return "[" + ", ".join(str(key) for key in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"


def interleave(first: Optional[LinkedList], second: Optional[LinkedList]) -> LinkedList:
    """Return a new list alternating keys of first and second, first leading.

    When one list runs out, the rest of the other follows. ``None`` counts as
    an empty list.
    """
    left = list(first) if first is not None else []
    right = list(second) if second is not None else []
    merged: List[int] = []
    for index in range(max(len(left), len(right))):
        if index < len(left):
            merged.append(left[index])
        if index < len(right):
            merged.append(right[index])
    return LinkedList(merged)
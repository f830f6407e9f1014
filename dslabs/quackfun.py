"""Stack and queue exercises.

A stack is a list whose last element is the top; a queue is any sequence
supporting ``clear`` and ``extend`` (a list or a ``collections.deque``) whose
first element is the front.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Sequence


def stack_sum(stack: Sequence[Any]) -> Any:
    """Return the sum of every item of the stack, leaving it unchanged.

    Items are added from the top down; an empty stack sums to 0.
    """
    total: Any = 0
    for item in stack:
        total = item + total
    return total


def _blocks(items: Sequence[Any]) -> List[List[Any]]:
    """Split items into consecutive blocks of size 1, 2, 3, ..."""
    blocks: List[List[Any]] = []
    start = 0
    size = 1
    while start < len(items):
        blocks.append(list(items[start:start + size]))
        start += size
        size += 1
    return blocks


def scramble(queue) -> None:
    """Reverse the even-sized blocks of the queue in place.

    Blocks have sizes 1, 2, 3, ...; a shorter final block is treated as if it
    were complete, so it is reversed when its full size would be even.
    """
    items = list(queue)
    result: List[Any] = []
    for index, block in enumerate(_blocks(items)):
        if index % 2 == 1:
            block.reverse()
        result.extend(block)
    queue.clear()
    queue.extend(result)


def verify_same(stack: Sequence[Any], queue) -> bool:
    """Return True if the stack, bottom to top, matches the queue, front to back.

    Neither container is modified.
    """
    return list(stack) == list(queue)
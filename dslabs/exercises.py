"""Small recursion exercises: digit sums and triangle numbers."""

from __future__ import annotations


def sum_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer.

    >>> sum_digits(126)
    9
    """
    if n < 0:
        raise ValueError(f"sum_digits needs a non-negative integer, got {n}")
    if n < 10:
        return n
    rest, last = divmod(n, 10)
    return last + sum_digits(rest)


def triangle(rows: int) -> int:
    """Return the number of blocks in a triangle with the given number of rows.

    The top row holds one block, the next two, and so on.
    """
    if rows < 0:
        raise ValueError(f"a triangle cannot have a negative number of rows: {rows}")
    total = 0
    for row in range(1, rows + 1):
        total += row
    return total
"""A small linear congruential pseudo-random number generator.

Both the shared module-level generator (``urand``, ``urandn``, ``usrand``) and
independent ``Random`` instances produce 15-bit values in [0, 32767].
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

_MASK = 0xFFFFFFFF
_UNSEEDED = 0xFFFFFFFF
_KEEP_SEED = 0xFFFFFFFE
_MULTIPLIER = 214013
_INCREMENT = 2531011


def _time_seed() -> int:
    """Seed derived from the current time: seconds xor microseconds."""
    ns = time.time_ns()
    seconds, rest = divmod(ns, 1_000_000_000)
    return (seconds ^ (rest // 1000)) & _MASK


def _advance(state: int) -> tuple[int, int]:
    """Return the next state and the 15-bit value it yields."""
    state = (_MULTIPLIER * state + _INCREMENT) & _MASK
    return state, (state >> 16) & 0x7FFF


def _c_mod(value: int, n: int) -> int:
    """Remainder of a non-negative value with the sign rules of truncating division."""
    if n == 0:
        raise ZeroDivisionError("modulus must not be zero")
    return value % abs(n)


@dataclass
class _SharedGenerator:
    state: int = _UNSEEDED

    def next(self, set_seed: int = _KEEP_SEED) -> int:
        set_seed &= _MASK
        if set_seed != _KEEP_SEED:
            self.state = set_seed
        if self.state == _UNSEEDED:
            self.state = _time_seed()
        self.state, value = _advance(self.state)
        return value


_SHARED = _SharedGenerator()


def urand() -> int:
    """Return the next value of the shared generator."""
    return _SHARED.next()


def urandn(n: int) -> int:
    """Return the next value of the shared generator modulo n."""
    return _c_mod(urand(), n)


def usrand(seed: int) -> None:
    """Seed the shared generator; this also advances it by one step."""
    _SHARED.next(seed)


class Random:
    """An independent generator with its own state."""

    _auto_seed_value = 0

    @classmethod
    def _auto_seed(cls, set_seed: int) -> int:
        set_seed &= _MASK
        if set_seed == 0:
            return cls._auto_seed_value
        previous = cls._auto_seed_value
        cls._auto_seed_value = set_seed
        return previous

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self._state = seed & _MASK
            return
        if self._auto_seed(0) == 0:
            self._auto_seed(_time_seed())
        self._state = self._auto_seed(0)
        high = self.rand()
        low = self.rand()
        self._auto_seed(((high << 16) ^ low ^ _time_seed()) & _MASK)

    def seed(self, seed: int) -> None:
        """Reset the generator to the given seed."""
        self._state = seed & _MASK

    def rand(self, n: Optional[int] = None) -> int:
        """Return the next value, reduced modulo n when n is given."""
        self._state, value = _advance(self._state)
        if n is None:
            return value
        return _c_mod(value, n)

    def __call__(self, n: Optional[int] = None) -> int:
        return self.rand(n)
"""Monotonic session counter.

A counter has a single owner; there is no internal locking.

Example:
    >>> from cuidkit.counter import Counter
    >>> counter = Counter(5)
    >>> counter.next(), counter.next()
    (5, 6)
"""

from __future__ import annotations

import math
from typing import Iterator, Optional

from .config import INITIAL_COUNT_MAX
from .random_source import RandomSource, default_random_source


class Counter:
    """Strictly increasing integer sequence starting at ``initial``."""

    def __init__(self, initial: int):
        self._value = initial

    def next(self) -> int:
        value = self._value
        self._value += 1
        return value

    def peek(self) -> int:
        """Return the value the next call will produce."""
        return self._value

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"Counter(next={self._value})"


def create_counter(random_source: Optional[RandomSource] = None) -> Counter:
    """Create a counter with a random start in ``[0, INITIAL_COUNT_MAX)``."""
    source = random_source or default_random_source()
    return Counter(math.floor(source.unit_float() * INITIAL_COUNT_MAX))

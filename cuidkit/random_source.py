"""Randomness capability used by every generation step.

Example:
    >>> from cuidkit.random_source import SeededRandomSource
    >>> source = SeededRandomSource(7)
    >>> 0.0 <= source.unit_float() < 1.0
    True
"""

from __future__ import annotations

import random
import secrets
import string
from typing import Protocol, runtime_checkable

_FLOAT_BITS = 53
_FLOAT_SCALE = float(1 << _FLOAT_BITS)


@runtime_checkable
class RandomSource(Protocol):
    """Two-method randomness capability."""

    def unit_float(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        ...

    def lowercase_letter(self) -> str:
        """Return a uniform letter in ``a..z``."""
        ...


class SystemRandomSource:
    """Randomness drawn from the operating system entropy pool."""

    def unit_float(self) -> float:
        # 53 bits is the full float mantissa, so the mapping is exact and unbiased.
        return secrets.randbits(_FLOAT_BITS) / _FLOAT_SCALE

    def lowercase_letter(self) -> str:
        return secrets.choice(string.ascii_lowercase)


class SeededRandomSource:
    """Deterministic randomness for tests and reproducible tooling."""

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._rng = random.Random(seed)

    def unit_float(self) -> float:
        return self._rng.getrandbits(_FLOAT_BITS) / _FLOAT_SCALE

    def lowercase_letter(self) -> str:
        return self._rng.choice(string.ascii_lowercase)


_DEFAULT_SOURCE = SystemRandomSource()


def default_random_source() -> RandomSource:
    """Return the shared system-backed random source."""
    return _DEFAULT_SOURCE

"""Wide-digest hashing into base-36 text."""

from __future__ import annotations

import hashlib
from typing import Callable

from .base36 import encode
from .config import HASH_ALGORITHM, SUPPORTED_HASH_ALGORITHMS

Hasher = Callable[[str], str]


def _require_algorithm(algorithm: str) -> str:
    if algorithm not in SUPPORTED_HASH_ALGORITHMS:
        raise ValueError(
            f"Unsupported hash algorithm '{algorithm}'. "
            f"Expected one of {sorted(SUPPORTED_HASH_ALGORITHMS)}."
        )
    return algorithm


def hash_value(text: str = "", algorithm: str = HASH_ALGORITHM) -> str:
    """Hash ``text`` and return the digest as base-36 without its first digit.

    The leading digit of the encoding tracks the digest's bit length and is
    the least uniform character, so it is dropped.
    """
    digest = hashlib.new(_require_algorithm(algorithm), text.encode("utf-8")).hexdigest()
    return encode(int(digest, 16))[1:]


def hasher_for(algorithm: str = HASH_ALGORITHM) -> Hasher:
    """Bind :func:`hash_value` to one algorithm."""
    _require_algorithm(algorithm)

    def _hash(text: str) -> str:
        return hash_value(text, algorithm)

    return _hash

"""Base-36 encoding over arbitrary-precision integers.

Example:
    >>> from cuidkit.base36 import decode, encode
    >>> encode(36)
    '10'
    >>> decode("zz")
    1295
"""

from __future__ import annotations

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)


def encode(number: int) -> str:
    """Return the minimal lowercase base-36 representation of ``number``."""
    if number < 0:
        raise ValueError(f"Cannot base36-encode a negative integer ({number}).")
    if number < BASE:
        return ALPHABET[number]

    digits = []
    while number:
        number, rem = divmod(number, BASE)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


def decode(text: str) -> int:
    """Parse a base-36 string back into an integer."""
    if not text:
        raise ValueError("Cannot decode an empty base36 string.")
    normalized = text.lower()
    invalid = sorted({char for char in normalized if char not in ALPHABET})
    if invalid:
        raise ValueError(f"Invalid base36 characters: {''.join(invalid)!r}.")
    return int(normalized, BASE)

"""Collision-resistant identifier generation.

Example:
    >>> from cuidkit.generator import generate, is_cuid
    >>> value = generate(length=10)
    >>> len(value), is_cuid(value)
    (10, True)
"""

from __future__ import annotations

import re
import time
from typing import Callable, Optional

from .base36 import encode
from .config import DEFAULT_SETTINGS, MAXIMUM_LENGTH, CuidSettings
from .counter import Counter, create_counter
from .entropy import create_entropy
from .errors import InvalidLengthError, LengthExceededError
from .fingerprint import get_fingerprint
from .hashing import Hasher, hash_value, hasher_for
from .random_source import RandomSource, default_random_source

Clock = Callable[[], int]

_CUID_PATTERN = re.compile(r"[a-z][0-9a-z]*")
_MAX_HASH_ATTEMPTS = 16


def _validate_length(length: int) -> int:
    if length > MAXIMUM_LENGTH:
        raise LengthExceededError(length)
    if length < 1:
        raise InvalidLengthError(length)
    return length


def generate(
    counter: Optional[Counter] = None,
    length: int = DEFAULT_SETTINGS.default_length,
    fingerprint: Optional[str] = None,
    *,
    random_source: Optional[RandomSource] = None,
    hasher: Optional[Hasher] = None,
    clock: Optional[Clock] = None,
) -> str:
    """Generate one ID of exactly ``length`` characters.

    Parameters:
        counter: Counter to draw from. A fresh random-start counter when omitted.
        length: Number of characters, 1 to 98.
        fingerprint: Process decorrelation value. The process fingerprint when omitted.
        random_source: Randomness capability. System entropy when omitted.
        hasher: ``str -> str`` hash function. SHA3-512 base-36 when omitted.
        clock: Nanosecond timestamp source. ``time.time_ns`` when omitted.

    Raises:
        LengthExceededError: If ``length`` is above 98.
        InvalidLengthError: If ``length`` is below 1.
    """
    _validate_length(length)

    source = random_source or default_random_source()
    if counter is None:
        counter = create_counter(source)
    if fingerprint is None:
        fingerprint = get_fingerprint()
    hash_fn = hasher or hash_value
    now = clock or time.time_ns

    first_letter = source.lowercase_letter()
    time_b36 = encode(now())
    counter_b36 = encode(counter.next())

    # A digest below 36**98 encodes one digit short; redraw entropy until the slice is full.
    for _ in range(_MAX_HASH_ATTEMPTS):
        entropy = create_entropy(length, source)
        hashed = hash_fn(time_b36 + entropy + counter_b36 + fingerprint)
        if len(hashed) >= length:
            return first_letter + hashed[1:length]

    raise ValueError(
        f"Hasher returned {len(hashed)} characters; at least {length} are required."
    )


class Cuid:
    """Reusable generator that shares one counter across calls.

    Parameters:
        random_source: Randomness capability for letters, entropy and the counter start.
        counter: Counter to draw from. Created from ``random_source`` when omitted.
        length: Default ID length.
        fingerprint: Fixed fingerprint. The process fingerprint is read per call when omitted.
        hasher: Hash function. Built from ``settings.hash_algorithm`` when omitted.
        clock: Nanosecond timestamp source.
        settings: Deployment settings.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        counter: Optional[Counter] = None,
        length: Optional[int] = None,
        fingerprint: Optional[str] = None,
        hasher: Optional[Hasher] = None,
        clock: Optional[Clock] = None,
        settings: CuidSettings = DEFAULT_SETTINGS,
    ):
        self.settings = settings
        self.length = _validate_length(settings.default_length if length is None else length)
        self.random_source = random_source or default_random_source()
        self.counter = counter if counter is not None else create_counter(self.random_source)
        self.fingerprint = fingerprint
        self.hasher = hasher or hasher_for(settings.hash_algorithm)
        self.clock = clock

    def generate(self, length: Optional[int] = None) -> str:
        return generate(
            self.counter,
            self.length if length is None else length,
            self.fingerprint,
            random_source=self.random_source,
            hasher=self.hasher,
            clock=self.clock,
        )

    def __call__(self) -> str:
        return self.generate()


def cuid_wrapper(**kwargs) -> Callable[[], str]:
    """Return a zero-argument callable producing IDs from one :class:`Cuid`."""
    return Cuid(**kwargs).generate


def is_cuid(value: object, min_length: int = 2, max_length: int = MAXIMUM_LENGTH) -> bool:
    """Check that ``value`` has the shape of a generated ID."""
    if not isinstance(value, str):
        return False
    if not min_length <= len(value) <= max_length:
        return False
    return _CUID_PATTERN.fullmatch(value) is not None

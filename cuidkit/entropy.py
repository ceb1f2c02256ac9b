"""Random base-36 digit strings."""

from __future__ import annotations

import math
from typing import Optional

from .base36 import BASE, encode
from .config import DEFAULT_ENTROPY_LENGTH
from .errors import InvalidLengthError
from .random_source import RandomSource, default_random_source


def create_entropy(
    length: int = DEFAULT_ENTROPY_LENGTH,
    random_source: Optional[RandomSource] = None,
) -> str:
    """Build ``length`` random base-36 digits, one draw per digit."""
    if length < 1:
        raise InvalidLengthError(length)

    source = random_source or default_random_source()
    entropy = ""
    while len(entropy) < length:
        entropy += encode(math.floor(source.unit_float() * BASE))
    return entropy

"""cuidkit package exports."""

from .base36 import decode, encode
from .config import (
    DEFAULT_LENGTH,
    DEFAULT_SETTINGS,
    HASH_ALGORITHM,
    INITIAL_COUNT_MAX,
    MAXIMUM_LENGTH,
    CuidSettings,
)
from .counter import Counter, create_counter
from .editor import TextBuffer, insert_at_cursor, replace_selection
from .entropy import create_entropy
from .errors import (
    CuidError,
    InvalidLength,
    InvalidLengthError,
    LengthExceeded,
    LengthExceededError,
)
from .fingerprint import FingerprintCell, compute_fingerprint, ensure_initialized, get_fingerprint
from .generator import Cuid, cuid_wrapper, generate, is_cuid
from .hashing import Hasher, hash_value, hasher_for
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource

__all__ = [
    "generate",
    "Cuid",
    "cuid_wrapper",
    "is_cuid",
    "Counter",
    "create_counter",
    "create_entropy",
    "hash_value",
    "hasher_for",
    "Hasher",
    "encode",
    "decode",
    "compute_fingerprint",
    "ensure_initialized",
    "get_fingerprint",
    "FingerprintCell",
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "TextBuffer",
    "insert_at_cursor",
    "replace_selection",
    "CuidSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_LENGTH",
    "MAXIMUM_LENGTH",
    "INITIAL_COUNT_MAX",
    "HASH_ALGORITHM",
    "CuidError",
    "LengthExceededError",
    "InvalidLengthError",
    "LengthExceeded",
    "InvalidLength",
]

"""Process fingerprint used to decorrelate IDs across processes.

The fingerprint is not secret: it only mixes the pid, host name and
environment variable names with fresh entropy.

Example:
    >>> from cuidkit.fingerprint import compute_fingerprint
    >>> len(compute_fingerprint("seed"))
    32
"""

from __future__ import annotations

import logging
import os
import socket
import threading
import warnings
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import FINGERPRINT_LENGTH
from .entropy import create_entropy
from .hashing import Hasher, hash_value
from .random_source import RandomSource

logger = logging.getLogger(__name__)


def default_seed_data() -> str:
    """Concatenate the pid, host name and every environment variable name."""
    return f"{os.getpid()}{socket.gethostname()}{''.join(os.environ)}"


def compute_fingerprint(
    seed_data: Optional[str] = None,
    *,
    random_source: Optional[RandomSource] = None,
    hasher: Optional[Hasher] = None,
) -> str:
    """Hash seed data plus fresh entropy into a 32-character fingerprint."""
    if seed_data is None:
        seed_data = default_seed_data()
    hash_fn = hasher or hash_value
    entropy = create_entropy(FINGERPRINT_LENGTH, random_source)
    return hash_fn(seed_data + entropy)[:FINGERPRINT_LENGTH]


class FingerprintCell:
    """Compute-once holder for the process fingerprint."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[str] = None
        self._override: Optional[str] = None

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def ensure_initialized(self) -> str:
        """Compute the fingerprint on first call and return the cached value."""
        if self._value is None:
            with self._lock:
                if self._value is None:
                    self._value = compute_fingerprint()
                    logger.debug("Computed process fingerprint %s", self._value)
        return self._value

    def get(self) -> str:
        if self._override is not None:
            return self._override
        return self.ensure_initialized()

    @contextmanager
    def override(self, value: str) -> Iterator[str]:
        """Pin ``value`` as the fingerprint for the duration of the block."""
        if self._value is not None:
            warnings.warn(
                "Overriding an already-initialized process fingerprint; "
                "IDs generated inside the block will not match the process value.",
                RuntimeWarning,
                stacklevel=3,
            )
        previous = self._override
        self._override = value
        logger.debug("Fingerprint override pinned to %s", value)
        try:
            yield value
        finally:
            self._override = previous

    def reset(self) -> None:
        """Forget the cached value so the next read recomputes it."""
        with self._lock:
            self._value = None
            self._override = None


_PROCESS_FINGERPRINT = FingerprintCell()


def process_fingerprint() -> FingerprintCell:
    return _PROCESS_FINGERPRINT


def ensure_initialized() -> str:
    return _PROCESS_FINGERPRINT.ensure_initialized()


def get_fingerprint() -> str:
    """Return the process fingerprint, honoring any active override."""
    return _PROCESS_FINGERPRINT.get()

from __future__ import annotations

import os
import socket
import string
import threading

import pytest

import cuidkit.fingerprint as fingerprint_module
from cuidkit.fingerprint import (
    FingerprintCell,
    compute_fingerprint,
    default_seed_data,
    ensure_initialized,
    get_fingerprint,
)
from cuidkit.random_source import SeededRandomSource

from ._fixtures import RecordingHasher

BASE36 = set(string.digits + string.ascii_lowercase)


def test_fingerprint_is_32_base36_characters():
    value = compute_fingerprint()
    assert len(value) == 32
    assert set(value) <= BASE36


def test_seeded_fingerprint_is_reproducible():
    first = compute_fingerprint("seed", random_source=SeededRandomSource(3))
    second = compute_fingerprint("seed", random_source=SeededRandomSource(3))
    assert first == second
    assert compute_fingerprint("other", random_source=SeededRandomSource(3)) != first


def test_fresh_entropy_is_appended_to_seed_data():
    hasher = RecordingHasher()
    value = compute_fingerprint("seed", random_source=SeededRandomSource(1), hasher=hasher)

    assert value == hasher.digest[:32]
    (hashed_input,) = hasher.inputs
    assert hashed_input.startswith("seed")
    assert len(hashed_input) == len("seed") + 32


def test_default_seed_uses_pid_host_and_env_names_only(monkeypatch):
    monkeypatch.setenv("CUIDKIT_FINGERPRINT_MARKER", "zz-hidden-value-zz")
    seed = default_seed_data()

    assert seed.startswith(f"{os.getpid()}{socket.gethostname()}")
    assert "CUIDKIT_FINGERPRINT_MARKER" in seed
    assert "zz-hidden-value-zz" not in seed


def test_cell_computes_once(monkeypatch):
    calls: list[int] = []

    def fake_compute() -> str:
        calls.append(1)
        return "f" * 32

    monkeypatch.setattr(fingerprint_module, "compute_fingerprint", fake_compute)
    cell = FingerprintCell()
    assert not cell.initialized
    assert cell.ensure_initialized() == "f" * 32
    assert cell.get() == "f" * 32
    assert cell.initialized
    assert len(calls) == 1


def test_cell_publishes_a_single_value_across_threads(monkeypatch):
    counter = iter(range(1000))

    def fake_compute() -> str:
        return f"{next(counter):032d}"

    monkeypatch.setattr(fingerprint_module, "compute_fingerprint", fake_compute)
    cell = FingerprintCell()
    seen: list[str] = []
    threads = [threading.Thread(target=lambda: seen.append(cell.get())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(seen)) == 1


def test_override_is_scoped_to_block():
    cell = FingerprintCell()
    with cell.override("pinned") as value:
        assert value == "pinned"
        assert cell.get() == "pinned"
        assert not cell.initialized
    assert cell.get() != "pinned"


def test_override_after_initialization_warns():
    cell = FingerprintCell()
    original = cell.ensure_initialized()
    with pytest.warns(RuntimeWarning):
        with cell.override("pinned"):
            assert cell.get() == "pinned"
    assert cell.get() == original


def test_reset_recomputes():
    cell = FingerprintCell()
    first = cell.ensure_initialized()
    cell.reset()
    assert not cell.initialized
    second = cell.ensure_initialized()
    assert len(second) == 32
    assert second != first


def test_process_fingerprint_is_stable():
    assert ensure_initialized() == ensure_initialized()
    assert get_fingerprint() == get_fingerprint()
    assert len(get_fingerprint()) == 32

"""Editor commands that place a fresh ID into a text buffer."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Tuple

from .generator import generate


class TextBuffer(Protocol):
    """Minimal editing surface an editor host exposes to the commands."""

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor."""
        ...

    def selection(self) -> Optional[Tuple[int, int]]:
        """Return the active ``(start, end)`` span, or ``None``."""
        ...

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace the ``[start, end)`` span with ``text``."""
        ...


def insert_at_cursor(buffer: TextBuffer, generator: Callable[[], str] = generate) -> str:
    """Insert a new ID at the cursor and return it."""
    value = generator()
    buffer.insert(value)
    return value


def replace_selection(
    buffer: TextBuffer, generator: Callable[[], str] = generate
) -> Optional[str]:
    """Replace the selected span with a new ID; no-op without a selection."""
    span = buffer.selection()
    if span is None:
        return None
    start, end = span
    value = generator()
    buffer.replace(start, end, value)
    return value

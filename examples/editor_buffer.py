"""Bind the editor commands to a plain in-memory buffer."""

from __future__ import annotations

from typing import Optional, Tuple

from cuidkit import insert_at_cursor, replace_selection


class LineBuffer:
    def __init__(self, text: str, cursor: int = 0, selected: Optional[Tuple[int, int]] = None):
        self.text = text
        self.cursor = cursor
        self.selected = selected

    def insert(self, text: str) -> None:
        self.text = self.text[: self.cursor] + text + self.text[self.cursor :]
        self.cursor += len(text)

    def selection(self) -> Optional[Tuple[int, int]]:
        return self.selected

    def replace(self, start: int, end: int, text: str) -> None:
        self.text = self.text[:start] + text + self.text[end:]
        self.selected = None


def main() -> None:
    buffer = LineBuffer('<div id=""></div>', cursor=9)
    insert_at_cursor(buffer)
    print(buffer.text)

    buffer = LineBuffer("key: PLACEHOLDER", selected=(5, 16))
    replace_selection(buffer)
    print(buffer.text)

    untouched = LineBuffer("no selection here")
    print(f"replaced: {replace_selection(untouched) is not None}")


if __name__ == "__main__":
    main()

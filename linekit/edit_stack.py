"""A linear undo/redo history of values."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class EditStack(Generic[T]):
    """Undo history with a pointer to the current entry."""

    def __init__(self, initial: T) -> None:
        self._initial = initial
        self._entries: list[T] = [initial]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditStack):
            return NotImplemented
        return self._entries == other._entries and self._index == other._index

    def __repr__(self) -> str:
        return f"EditStack(entries={self._entries!r}, index={self._index})"

    def undo(self) -> T:
        """Step back one entry, staying put at the first one, and return it."""
        if self._index > 0:
            self._index -= 1
        return self._entries[self._index]

    def redo(self) -> T:
        """Step forward one entry, staying put at the last one, and return it."""
        if self._index < len(self._entries) - 1:
            self._index += 1
        return self._entries[self._index]

    def insert(self, value: T) -> None:
        """Add an entry after the current one, dropping any entries beyond it."""
        del self._entries[self._index + 1 :]
        self._entries.append(value)
        self._index += 1

    def reset(self) -> None:
        """Return to a history holding only the initial value."""
        self._entries = [self._initial]
        self._index = 0

    def current(self) -> T:
        """Return the entry currently pointed to."""
        return self._entries[self._index]
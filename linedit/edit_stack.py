"""A linear undo/redo history."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

__all__ = ["EditStack"]

T = TypeVar("T")


class EditStack(Generic[T]):
    """Undo history with a pointer to the current entry.

    It always holds at least one entry, the initial state made by
    ``default_factory``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, default_factory: Callable[[], T]) -> None:
        self._default_factory = default_factory
        self._entries: list[T] = [default_factory()]
        self._index = 0

    @classmethod
    def from_entries(cls, entries: Iterable[T], index: int) -> EditStack[T]:
        """Build a stack holding ``entries`` with ``index`` as the current one.

        The type of the first entry serves as the factory for :meth:`reset`.
        """
        values = list(entries)
        if not values:
            raise ValueError("an edit stack needs at least one entry")
        if not 0 <= index < len(values):
            raise IndexError(f"index {index} out of range for {len(values)} entries")
        stack = cls(type(values[0]))
        stack._entries = values
        stack._index = index
        return stack

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditStack):
            return NotImplemented
        return self._entries == other._entries and self._index == other._index

    def __repr__(self) -> str:
        return f"EditStack({self._entries!r}, index={self._index})"

    def undo(self) -> T:
        """Step back one entry (not past the first) and return it."""
        if self._index > 0:
            self._index -= 1
        return self._entries[self._index]

    def redo(self) -> T:
        """Step forward one entry (not past the last) and return it."""
        if self._index < len(self._entries) - 1:
            self._index += 1
        return self._entries[self._index]

    def insert(self, value: T) -> None:
        """Add ``value`` after the current entry, dropping any undone entries."""
        del self._entries[self._index + 1 :]
        self._entries.append(value)
        self._index += 1

    def reset(self) -> None:
        """Return to a single initial entry."""
        self._entries = [self._default_factory()]
        self._index = 0

    def current(self) -> T:
        """The entry currently pointed to."""
        return self._entries[self._index]
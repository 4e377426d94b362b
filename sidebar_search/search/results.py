"""
Result List - Ordered search results for one search generation.

Insertion order is relevance order (chat hits first, then remaining
contact hits) and is never resorted. Entries are never removed within a
generation.

Signals:
    items-changed(size): Emitted after every mutation with the new size
"""

from typing import Iterable, Iterator, Optional

from ..utils.signals import SignalEmitter
from .entries import ResultEntry


class ResultList(SignalEmitter):
    """Append-only list of ResultEntry with change notification."""

    __signals__ = ("items-changed",)

    def __init__(self):
        super().__init__()
        self._entries: list[ResultEntry] = []

    def append(self, entries: Iterable[ResultEntry]) -> None:
        """Append entries in order. Emits items-changed if anything was added."""
        entries = list(entries)
        if not entries:
            return

        self._entries.extend(entries)
        self.emit("items-changed", len(self._entries))

    def clear(self) -> None:
        """Drop all entries, e.g. before reusing the list for a new generation."""
        if not self._entries:
            return

        self._entries.clear()
        self.emit("items-changed", 0)

    def size(self) -> int:
        return len(self._entries)

    def item(self, position: int) -> Optional[ResultEntry]:
        """Return the entry at position, or None if out of range."""
        if 0 <= position < len(self._entries):
            return self._entries[position]
        return None

    def ids(self) -> list[int]:
        return [entry.id for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self._entries)

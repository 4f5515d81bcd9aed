"""Bounded generation history.

Entries are kept newest first. Adding an entry past the cap evicts the
oldest ones, so the history never holds more than ``max_entries`` items.
"""

import time
from datetime import datetime, timezone

from .models import Category, HistoryEntry

MAX_HISTORY_ENTRIES = 10


class History:
    """Capped, newest-first list of history entries.

    Data is kept in memory only and is lost when the app exits.
    """

    def __init__(self, max_entries: int = MAX_HISTORY_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: list[HistoryEntry] = []

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def entries(self) -> tuple[HistoryEntry, ...]:
        """Get a read-only view of the entries, newest first."""
        return tuple(self._entries)

    def add(self, entry: HistoryEntry) -> None:
        """Prepend an entry and drop anything past the cap."""
        self._entries = [entry, *self._entries[: self._max_entries - 1]]

    def record(self, category: Category, content: str, now: float | None = None) -> HistoryEntry:
        """Create an entry for freshly generated content and add it.

        Args:
            category: Category the content was generated for
            content: Generated text
            now: Creation time in seconds since the epoch (defaults to now)

        Returns:
            The new entry
        """
        timestamp = time.time() if now is None else now
        entry = HistoryEntry(
            id=self._new_id(timestamp),
            category=category,
            content=content,
            created_at=int(timestamp * 1000),
        )
        self.add(entry)
        return entry

    def clear(self) -> None:
        """Remove all entries."""
        self._entries = []

    def _new_id(self, timestamp: float) -> str:
        # Two generations inside the same millisecond share an ISO string
        base = datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat(timespec="milliseconds")
        live_ids = {entry.id for entry in self._entries}
        candidate = base
        suffix = 1
        while candidate in live_ids:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate

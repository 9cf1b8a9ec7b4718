"""Daily consumption log store."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from diet_manager.domain.log import LogEntry
from diet_manager.services.calories import resolve_calories
from diet_manager.services.foods import FoodStore


class LogRepository(Protocol):
    """Persistence interface for the daily log."""

    def load(self) -> dict[str, list[LogEntry]]:
        """Return entries keyed by date, or an empty mapping."""

    def save(self, entries: dict[str, list[LogEntry]]) -> None:
        """Replace the stored log."""


@dataclass
class LogStore:
    """Ordered log entries per date string (``YYYY-MM-DD``)."""

    _entries: dict[str, list[LogEntry]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, entries: Mapping[str, list[LogEntry]]) -> "LogStore":
        """Build a store from persisted entries, skipping empty dates."""
        return cls({date: list(items) for date, items in entries.items() if items})

    def append(self, date: str, entry: LogEntry) -> int:
        """Append an entry for ``date`` and return its index."""
        entries = self._entries.setdefault(date, [])
        entries.append(entry)
        return len(entries) - 1

    def remove_at(self, date: str, index: int) -> LogEntry | None:
        """Remove and return the entry at ``index``, or None when out of range."""
        entries = self._entries.get(date)
        if not entries or not 0 <= index < len(entries):
            return None
        removed = entries.pop(index)
        if not entries:
            del self._entries[date]
        return removed

    def entries_for(self, date: str) -> tuple[LogEntry, ...]:
        """Return the entries logged on ``date``."""
        return tuple(self._entries.get(date, ()))

    def has_entries(self, date: str) -> bool:
        """Return True when anything is logged on ``date``."""
        return bool(self._entries.get(date))

    def total_calories(self, date: str, store: FoodStore) -> float:
        """Sum calories logged on ``date``; unknown foods count as zero."""
        total = 0.0
        for entry in self._entries.get(date, ()):
            food = store.lookup(entry.food_id)
            if food is None:
                continue
            total += resolve_calories(food, store) * entry.servings
        return total

    def dates(self) -> list[str]:
        """Return dates with at least one entry, oldest first."""
        return sorted(date for date, entries in self._entries.items() if entries)

    def as_dict(self) -> dict[str, list[LogEntry]]:
        """Return a copy of the log suitable for persistence."""
        return {date: list(entries) for date, entries in self._entries.items()}

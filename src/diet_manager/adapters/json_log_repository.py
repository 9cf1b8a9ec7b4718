"""JSON file repository for the daily log."""

from dataclasses import dataclass
from pathlib import Path

from diet_manager.adapters.json_documents import (
    LOG_DOCUMENT,
    LogEntryDocument,
    read_document,
    write_document,
)
from diet_manager.domain.log import LogEntry
from diet_manager.services.log import LogRepository


@dataclass
class JsonLogRepository(LogRepository):
    """Stores the log as a JSON object keyed by date."""

    path: Path

    def load(self) -> dict[str, list[LogEntry]]:
        """Return stored entries; a missing or corrupt file yields none."""
        document = read_document(self.path, LOG_DOCUMENT)
        if document is None:
            return {}
        return {
            date: [LogEntry(food_id=row.food_id, servings=row.servings) for row in rows]
            for date, rows in document.items()
        }

    def save(self, entries: dict[str, list[LogEntry]]) -> None:
        """Write the log to the JSON file."""
        document = {
            date: [
                LogEntryDocument(food_id=entry.food_id, servings=entry.servings)
                for entry in rows
            ]
            for date, rows in entries.items()
        }
        write_document(self.path, LOG_DOCUMENT, document)

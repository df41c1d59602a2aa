"""Session history of recently checked passwords."""

import logging
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)

HISTORY_CAPACITY = 10


@dataclass(frozen=True)
class HistoryEntry:
    password: str
    level: str
    score: int
    timestamp: datetime


class HistoryStore:
    """Most-recent-first list of scored passwords, bounded to *capacity*.

    Recording a password that is already stored moves it to the front
    instead of adding a duplicate.  Nothing is persisted: the entries live
    as long as the store does.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY, clock=datetime.now):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self.capacity = capacity
        self._clock = clock
        self._entries: list[HistoryEntry] = []

    def record(self, password: str, level: str, score: int) -> HistoryEntry:
        entry = HistoryEntry(password, level, score, self._clock())
        self._entries = [e for e in self._entries if e.password != password]
        self._entries.insert(0, entry)
        del self._entries[self.capacity:]
        logger.debug("Recorded history entry (%d/%d)", len(self._entries), self.capacity)
        return entry

    def clear(self) -> None:
        self._entries = []
        logger.debug("History cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def list(self) -> list[HistoryEntry]:
        """Return a snapshot of the entries, most recent first."""
        return list(self._entries)


def mask_password(password: str) -> str:
    """Hide all but the first and last two characters of *password*."""
    if len(password) <= 4:
        return "*" * len(password)
    return password[:2] + "*" * (len(password) - 4) + password[-2:]

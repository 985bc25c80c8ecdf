"""Event records as held by the store.

Records are frozen: the store swaps in a new instance on every mutation,
so anything handed to a caller is a snapshot that cannot drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    description: str
    location: str
    date: datetime
    max_participants: int
    current_participants: int
    created_at: datetime
    updated_at: datetime
    latitude: float | None = None
    longitude: float | None = None

    @property
    def is_full(self) -> bool:
        return self.current_participants >= self.max_participants

    @property
    def spots_left(self) -> int:
        return max(0, self.max_participants - self.current_participants)

    def has_started(self, now: datetime) -> bool:
        return self.date < now


@dataclass(frozen=True)
class EventFilters:
    """Optional list filters, combined with AND."""

    location: str | None = None
    search: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    def matches(self, event: Event) -> bool:
        if self.location and self.location.lower() not in event.location.lower():
            return False
        if self.search:
            term = self.search.lower()
            if term not in event.title.lower() and term not in event.description.lower():
                return False
        if self.start_date and event.date < self.start_date:
            return False
        if self.end_date and event.date > self.end_date:
            return False
        return True

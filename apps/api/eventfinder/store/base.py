from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from eventfinder.models import Event, EventFilters


class EventStore(ABC):
    @abstractmethod
    def create(
        self,
        *,
        title: str,
        description: str,
        location: str,
        date: datetime,
        max_participants: int,
        latitude: float | None = None,
        longitude: float | None = None,
        current_participants: int = 0,
    ) -> Event:
        """Persist a new event; the store assigns id, created_at and updated_at.

        Field content is the request schema's job. The store only refuses a
        participant count outside 0..max_participants (ValidationError).
        """

    @abstractmethod
    def list_all(self, filters: EventFilters | None = None) -> list[Event]:
        """Return matching events ordered by date ascending, ties in insertion order."""

    @abstractmethod
    def get_by_id(self, event_id: str) -> Event:
        """Return the event or raise EventNotFoundError."""

    @abstractmethod
    def update(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Merge changes into the event, keeping id and created_at."""

    @abstractmethod
    def delete(self, event_id: str) -> bool:
        """Remove the event; return whether it existed."""

    @abstractmethod
    def exists(self, event_id: str) -> bool:
        """Return whether an event with this id is stored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored events."""

    @abstractmethod
    def join(self, event_id: str) -> Event:
        """Take one participant slot.

        Raises EventFullError or EventInPastError when the slot cannot be taken.
        """

    @abstractmethod
    def leave(self, event_id: str) -> Event:
        """Release one participant slot; raises NoParticipantsError at zero."""

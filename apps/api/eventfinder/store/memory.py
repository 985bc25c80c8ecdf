from __future__ import annotations

import threading
import uuid
from collections.abc import Mapping
from dataclasses import fields, replace
from datetime import datetime
from typing import Any

from eventfinder.core.clock import Clock, as_utc, utc_now
from eventfinder.core.error_codes import ErrorCode
from eventfinder.core.exceptions import (
    EventFullError,
    EventInPastError,
    EventNotFoundError,
    NoParticipantsError,
    ValidationError,
)
from eventfinder.models import Event, EventFilters
from eventfinder.store.base import EventStore

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})
UPDATABLE_FIELDS = frozenset(f.name for f in fields(Event)) - PROTECTED_FIELDS
NULLABLE_FIELDS = frozenset({"latitude", "longitude"})


def _check_participant_bounds(event: Event, code: ErrorCode) -> None:
    try:
        in_bounds = 0 <= event.current_participants <= event.max_participants
    except TypeError:
        in_bounds = False
    if not in_bounds:
        raise ValidationError(
            code.value,
            "current_participants must be between 0 and max_participants",
        )


class InMemoryEventStore(EventStore):
    """Process-local event store.

    Every mutation runs under one lock, so the check and the write in
    join/leave form a single step. Reads only hold the lock while copying
    record references; records are immutable, so no reader can observe a
    half-applied change.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._events: dict[str, Event] = {}
        self._lock = threading.Lock()

    def _require(self, event_id: str) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

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
        with self._lock:
            event_id = str(uuid.uuid4())
            while event_id in self._events:
                event_id = str(uuid.uuid4())

            now = self._clock()
            event = Event(
                id=event_id,
                title=title,
                description=description,
                location=location,
                latitude=latitude,
                longitude=longitude,
                date=as_utc(date),
                max_participants=max_participants,
                current_participants=current_participants or 0,
                created_at=now,
                updated_at=now,
            )
            _check_participant_bounds(event, ErrorCode.INVALID_EVENT)
            self._events[event_id] = event
        return event

    def list_all(self, filters: EventFilters | None = None) -> list[Event]:
        filters = filters or EventFilters()
        if filters.start_date:
            filters = replace(filters, start_date=as_utc(filters.start_date))
        if filters.end_date:
            filters = replace(filters, end_date=as_utc(filters.end_date))

        with self._lock:
            snapshot = list(self._events.values())

        # sorted() is stable, so equal dates keep insertion order
        return sorted(
            (event for event in snapshot if filters.matches(event)),
            key=lambda event: event.date,
        )

    def get_by_id(self, event_id: str) -> Event:
        return self._require(event_id)

    def update(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        unknown = set(changes) - UPDATABLE_FIELDS - PROTECTED_FIELDS
        if unknown:
            raise ValidationError(
                ErrorCode.INVALID_UPDATE.value,
                f"unknown event fields: {', '.join(sorted(unknown))}",
            )

        patch = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        nulled = sorted(k for k, v in patch.items() if v is None and k not in NULLABLE_FIELDS)
        if nulled:
            raise ValidationError(
                ErrorCode.INVALID_UPDATE.value,
                f"event fields cannot be null: {', '.join(nulled)}",
            )
        if "date" in patch:
            patch["date"] = as_utc(patch["date"])

        with self._lock:
            current = self._require(event_id)
            updated = replace(current, **patch, updated_at=self._clock())
            _check_participant_bounds(updated, ErrorCode.INVALID_UPDATE)
            self._events[event_id] = updated
        return updated

    def delete(self, event_id: str) -> bool:
        with self._lock:
            return self._events.pop(event_id, None) is not None

    def exists(self, event_id: str) -> bool:
        return event_id in self._events

    def count(self) -> int:
        return len(self._events)

    def join(self, event_id: str) -> Event:
        with self._lock:
            event = self._require(event_id)
            now = self._clock()
            if event.has_started(now):
                raise EventInPastError(event_id)
            if event.is_full:
                raise EventFullError(event_id)

            updated = replace(
                event,
                current_participants=event.current_participants + 1,
                updated_at=now,
            )
            self._events[event_id] = updated
        return updated

    def leave(self, event_id: str) -> Event:
        with self._lock:
            event = self._require(event_id)
            if event.current_participants <= 0:
                raise NoParticipantsError(event_id)

            updated = replace(
                event,
                current_participants=event.current_participants - 1,
                updated_at=self._clock(),
            )
            self._events[event_id] = updated
        return updated

from __future__ import annotations

import structlog

from eventfinder.api.schemas.events import EventCreate
from eventfinder.core.exceptions import BusinessRuleError
from eventfinder.models import Event, EventFilters
from eventfinder.store import EventStore

logger = structlog.get_logger()


def create_event(store: EventStore, payload: EventCreate) -> Event:
    event = store.create(**payload.model_dump())
    logger.info(
        "event_created",
        event_id=event.id,
        date=event.date.isoformat(),
        max_participants=event.max_participants,
    )
    return event


def list_events(store: EventStore, filters: EventFilters | None = None) -> list[Event]:
    return store.list_all(filters)


def get_event(store: EventStore, event_id: str) -> Event:
    return store.get_by_id(event_id)


def join_event(store: EventStore, event_id: str) -> Event:
    try:
        event = store.join(event_id)
    except BusinessRuleError as exc:
        logger.info("event_join_rejected", event_id=event_id, code=exc.code)
        raise

    logger.info(
        "event_joined",
        event_id=event.id,
        current_participants=event.current_participants,
        max_participants=event.max_participants,
    )
    return event


def leave_event(store: EventStore, event_id: str) -> Event:
    try:
        event = store.leave(event_id)
    except BusinessRuleError as exc:
        logger.info("event_leave_rejected", event_id=event_id, code=exc.code)
        raise

    logger.info(
        "event_left",
        event_id=event.id,
        current_participants=event.current_participants,
    )
    return event

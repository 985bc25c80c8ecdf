from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, HTTPException, Query
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from eventfinder.api.deps import EventStoreDep
from eventfinder.api.errors import http_error_from_service
from eventfinder.api.schemas.events import (
    EventCreate,
    EventListResponse,
    EventOut,
    EventResponse,
)
from eventfinder.core.exceptions import ServiceError
from eventfinder.models import Event, EventFilters
from eventfinder.services import events_service

router = APIRouter(prefix="/events", tags=["events"])

_datetime_adapter = TypeAdapter(datetime)


def _validation_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": "VALIDATION_ERROR", "message": message},
    )


def _clean_query(value: str | None, label: str, max_length: int) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    if not normalized or len(normalized) > max_length:
        raise _validation_error(f"{label} must be between 1 and {max_length} characters")
    return normalized


def _parse_query_date(value: str | None, label: str) -> datetime | None:
    if value is None:
        return None
    try:
        return _datetime_adapter.validate_python(value.strip())
    except PydanticValidationError:
        raise _validation_error(f"{label} must be a valid ISO 8601 date") from None


def _event_response(event: Event, message: str | None = None) -> EventResponse:
    return EventResponse(data=EventOut.model_validate(event), message=message)


@router.post(
    "",
    response_model=EventResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_event(payload: EventCreate, store: EventStoreDep):
    event = events_service.create_event(store, payload)
    return _event_response(event, "Event created successfully")


@router.get("", response_model=EventListResponse, response_model_exclude_none=True)
def list_events(
    store: EventStoreDep,
    location: str | None = Query(default=None),
    search: str | None = Query(default=None),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
):
    filters = EventFilters(
        location=_clean_query(location, "Location", 200),
        search=_clean_query(search, "Search query", 100),
        start_date=_parse_query_date(start_date, "Start date"),
        end_date=_parse_query_date(end_date, "End date"),
    )
    events = events_service.list_events(store, filters)
    return EventListResponse(
        data=[EventOut.model_validate(event) for event in events],
        count=len(events),
    )


@router.get("/{event_id}", response_model=EventResponse, response_model_exclude_none=True)
def get_event(event_id: str, store: EventStoreDep):
    try:
        event = events_service.get_event(store, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _event_response(event)


@router.post(
    "/{event_id}/join",
    response_model=EventResponse,
    response_model_exclude_none=True,
)
def join_event(event_id: str, store: EventStoreDep):
    try:
        event = events_service.join_event(store, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _event_response(event, "Successfully joined the event")


@router.post(
    "/{event_id}/leave",
    response_model=EventResponse,
    response_model_exclude_none=True,
)
def leave_event(event_id: str, store: EventStoreDep):
    try:
        event = events_service.leave_event(store, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return _event_response(event, "Successfully left the event")

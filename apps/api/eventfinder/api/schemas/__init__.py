from eventfinder.api.schemas.events import (
    EventCreate,
    EventListResponse,
    EventOut,
    EventResponse,
)

__all__ = [
    "EventCreate",
    "EventOut",
    "EventResponse",
    "EventListResponse",
]

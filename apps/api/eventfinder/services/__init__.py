from eventfinder.services.events_service import (
    create_event,
    get_event,
    join_event,
    leave_event,
    list_events,
)

__all__ = [
    "create_event",
    "list_events",
    "get_event",
    "join_event",
    "leave_event",
]

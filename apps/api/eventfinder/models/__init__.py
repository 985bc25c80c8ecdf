from eventfinder.models.event import Event, EventFilters

__all__ = ["Event", "EventFilters"]

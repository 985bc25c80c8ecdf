from __future__ import annotations

from eventfinder.core.clock import Clock, utc_now
from eventfinder.core.config import settings
from eventfinder.store.base import EventStore
from eventfinder.store.memory import InMemoryEventStore


def create_store(backend: str | None = None, clock: Clock | None = None) -> EventStore:
    selected_backend = (backend or settings.event_store_backend).strip().lower()
    if selected_backend == "memory":
        return InMemoryEventStore(clock=clock or utc_now)
    raise ValueError(f"unsupported event store backend: {selected_backend}")

from __future__ import annotations

from eventfinder.store.base import EventStore
from eventfinder.store.memory import InMemoryEventStore


def create_store(*args, **kwargs) -> EventStore:
    from eventfinder.store.factory import create_store as _create_store

    return _create_store(*args, **kwargs)


__all__ = ["EventStore", "InMemoryEventStore", "create_store"]

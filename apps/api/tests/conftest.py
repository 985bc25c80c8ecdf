from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("ENV", "test")
os.environ.setdefault("METRICS_ENABLED", "false")

from eventfinder.core.config import Settings  # noqa: E402
from eventfinder.main import create_app  # noqa: E402
from eventfinder.store import InMemoryEventStore  # noqa: E402


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock: FrozenClock) -> InMemoryEventStore:
    return InMemoryEventStore(clock=clock)


@pytest.fixture
def api_store() -> InMemoryEventStore:
    # API validation checks dates against the real wall clock
    return InMemoryEventStore()


@pytest.fixture
def client(api_store: InMemoryEventStore) -> TestClient:
    app = create_app(store=api_store, settings=Settings(metrics_enabled=False))
    return TestClient(app)

from typing import Annotated

from fastapi import Depends, Request

from eventfinder.store import EventStore


def get_event_store(request: Request) -> EventStore:
    return request.app.state.event_store


EventStoreDep = Annotated[EventStore, Depends(get_event_store)]

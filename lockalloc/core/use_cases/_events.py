from __future__ import annotations

from typing import Any
from uuid import uuid4

from lockalloc.core.entities.event import Event, EventType


def new_event(event_type: EventType, *, locker_id: str, occurred_at: int, **payload: Any) -> Event:
    return Event(
        event_id=str(uuid4()),
        occurred_at=occurred_at,
        locker_id=locker_id,
        type=event_type,
        payload=payload,
    )

from __future__ import annotations

import threading
from collections import deque

from lockalloc.core.entities.event import Event
from lockalloc.core.repositories.event_repository import EventRepository

DEFAULT_MAX_EVENTS = 1000


class InMemoryEventRepositoryImpl(EventRepository):
    """
    Bounded in-memory event buffer. Once `max_events` is reached the oldest
    event is dropped for each new one.
    """

    def __init__(self, *, max_events: int = DEFAULT_MAX_EVENTS) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self._lock = threading.Lock()
        self._events: deque[Event] = deque(maxlen=max_events)

    def append(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def list(self) -> list[Event]:
        with self._lock:
            return list(self._events)

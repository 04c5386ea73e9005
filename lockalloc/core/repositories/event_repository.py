from __future__ import annotations

from abc import ABC, abstractmethod

from lockalloc.core.entities.event import Event


class EventRepository(ABC):
    @abstractmethod
    def append(self, event: Event) -> None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Event]:
        """Recorded events, oldest first."""
        raise NotImplementedError

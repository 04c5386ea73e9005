from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    LockerAllocated = "LockerAllocated"
    LockerReleased = "LockerReleased"
    TicketExpired = "TicketExpired"


@dataclass(frozen=True, slots=True)
class Event:
    event_id: str
    occurred_at: int
    locker_id: str
    type: EventType
    payload: dict[str, Any] = field(default_factory=dict)

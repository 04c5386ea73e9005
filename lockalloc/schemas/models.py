from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel


class Size(Enum):
    SMALL = 'SMALL'
    MEDIUM = 'MEDIUM'
    LARGE = 'LARGE'


class DepositRequest(BaseModel):
    size: Size


class Ticket(BaseModel):
    locker_id: str
    code: str
    created_at: int


class PickupRequest(BaseModel):
    code: str


class PickupConfirmation(BaseModel):
    locker_id: str
    message: str


class SweepResult(BaseModel):
    reclaimed: List[str]


class ActiveTicket(BaseModel):
    locker_id: str
    created_at: int


class Inventory(BaseModel):
    free: Dict[Size, List[str]]
    active: List[ActiveTicket]
    total: int


class Type(Enum):
    LockerAllocated = 'LockerAllocated'
    LockerReleased = 'LockerReleased'
    TicketExpired = 'TicketExpired'


class Event(BaseModel):
    event_id: str
    occurred_at: int
    locker_id: str
    type: Type
    payload: Dict[str, Any]

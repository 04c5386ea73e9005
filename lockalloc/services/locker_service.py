from __future__ import annotations

from lockalloc.core.engine import LockerEngine
from lockalloc.core.entities.size_class import ORDERED_SIZES, SizeClass
from lockalloc.core.entities.ticket import InvalidCode, NoCapacity
from lockalloc.core.entities.ticket import PickupConfirmation as CorePickupConfirmation
from lockalloc.core.entities.ticket import Ticket as CoreTicket
from lockalloc.schemas.models import (
    ActiveTicket,
    Event,
    Inventory,
    PickupConfirmation,
    Size,
    SweepResult,
    Ticket,
    Type,
)


def deposit_service(size: Size, engine: LockerEngine) -> Ticket | NoCapacity:
    """
    Returns the issued ticket, or the core NoCapacity outcome untouched so the
    caller decides how to report it.
    """
    result = engine.deposit(SizeClass(size.value))
    match result:
        case CoreTicket(locker_id=locker_id, code=code, created_at=created_at):
            return Ticket(locker_id=locker_id, code=code, created_at=created_at)
        case NoCapacity():
            return result


def pickup_service(code: str, engine: LockerEngine) -> PickupConfirmation | InvalidCode:
    result = engine.pickup(code)
    match result:
        case CorePickupConfirmation():
            return PickupConfirmation(locker_id=result.locker_id, message=result.message)
        case InvalidCode():
            return result


def sweep_service(engine: LockerEngine) -> SweepResult:
    return SweepResult(reclaimed=engine.sweep())


def inventory_service(engine: LockerEngine) -> Inventory:
    snapshot = engine.inventory()
    return Inventory(
        free={Size(size.value): list(snapshot.free[size]) for size in ORDERED_SIZES},
        # codes are secrets; only the holder of the ticket gets to see one
        active=[ActiveTicket(locker_id=t.locker_id, created_at=t.created_at) for t in snapshot.active],
        total=snapshot.total,
    )


def list_events_service(engine: LockerEngine) -> list[Event]:
    return [
        Event(
            event_id=e.event_id,
            occurred_at=e.occurred_at,
            locker_id=e.locker_id,
            type=Type(e.type.value),
            payload=dict(e.payload),
        )
        for e in engine.events.list()
    ]

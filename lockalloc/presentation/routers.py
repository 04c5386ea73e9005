from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from lockalloc.core.engine import LockerEngine
from lockalloc.core.entities.ticket import InvalidCode, NoCapacity
from lockalloc.infrastructure.runtime import locker_engine
from lockalloc.schemas.models import (
    DepositRequest,
    Event,
    Inventory,
    PickupConfirmation,
    PickupRequest,
    SweepResult,
    Ticket,
)
from lockalloc.services.locker_service import (
    deposit_service,
    inventory_service,
    list_events_service,
    pickup_service,
    sweep_service,
)

router = APIRouter()


def get_engine() -> LockerEngine:
    return locker_engine


@router.post("/deposits", response_model=Ticket, status_code=201)
def post_deposits(body: DepositRequest, engine: LockerEngine = Depends(get_engine)) -> Ticket:
    """
    Allocate a locker for a parcel of the requested size

    Returns:
      - 201 with the ticket (the code is what opens the locker later)
      - 409 when the requested size and every larger size are full
    """
    result = deposit_service(body.size, engine)
    if isinstance(result, NoCapacity):
        raise HTTPException(status_code=409, detail=result.message)
    return result


@router.post("/pickups", response_model=PickupConfirmation)
def post_pickups(body: PickupRequest, engine: LockerEngine = Depends(get_engine)) -> PickupConfirmation:
    """
    Redeem a retrieval code

    Returns:
      - 200 naming the opened locker
      - 404 for unknown, already used or expired codes
    """
    result = pickup_service(body.code, engine)
    if isinstance(result, InvalidCode):
        raise HTTPException(status_code=404, detail=result.message)
    return result


@router.post("/sweeps", response_model=SweepResult)
def post_sweeps(engine: LockerEngine = Depends(get_engine)) -> SweepResult:
    """
    Reclaim lockers whose parcels outlived the retention window
    """
    return sweep_service(engine)


@router.get("/inventory", response_model=Inventory)
def get_inventory(engine: LockerEngine = Depends(get_engine)) -> Inventory:
    return inventory_service(engine)


@router.get("/events", response_model=list[Event])
def get_events(engine: LockerEngine = Depends(get_engine)) -> list[Event]:
    return list_events_service(engine)

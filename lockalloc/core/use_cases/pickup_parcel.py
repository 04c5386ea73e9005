from __future__ import annotations

import structlog

from lockalloc.core.clock import Clock
from lockalloc.core.entities.event import EventType
from lockalloc.core.entities.locker_state import LockerState
from lockalloc.core.entities.ticket import InvalidCode, PickupConfirmation
from lockalloc.core.repositories.event_repository import EventRepository
from lockalloc.core.use_cases._events import new_event

logger = structlog.get_logger(__name__)


class PickupParcelUseCase:
    def __init__(self, *, state: LockerState, clock: Clock, event_repo: EventRepository) -> None:
        self._state = state
        self._clock = clock
        self._event_repo = event_repo

    def execute(self, *, code: str) -> PickupConfirmation | InvalidCode:
        with self._state.lock:
            ticket = self._state.pop_ticket(code)
            if ticket is not None:
                self._state.release(ticket.locker_id)

        if ticket is None:
            logger.info("pickup_rejected", code=code)
            return InvalidCode(code=code)

        self._event_repo.append(
            new_event(
                EventType.LockerReleased,
                locker_id=ticket.locker_id,
                occurred_at=self._clock.now(),
                code=ticket.code,
            )
        )
        logger.info("locker_released", locker_id=ticket.locker_id)
        return PickupConfirmation(locker_id=ticket.locker_id, code=ticket.code)

from __future__ import annotations

import structlog

from lockalloc.core.clock import Clock
from lockalloc.core.entities.event import EventType
from lockalloc.core.entities.locker_state import LockerState
from lockalloc.core.entities.ticket import Ticket
from lockalloc.core.repositories.event_repository import EventRepository
from lockalloc.core.use_cases._events import new_event

logger = structlog.get_logger(__name__)

THREE_DAYS_MS = 3 * 24 * 60 * 60 * 1000


class SweepExpiredTicketsUseCase:
    """
    Reclaims lockers whose ticket is older than the retention window.

    Expiry is one-way: the ticket is destroyed and its code becomes invalid,
    exactly as if the parcel had been picked up.
    """

    def __init__(
            self,
            *,
            state: LockerState,
            clock: Clock,
            event_repo: EventRepository,
            retention_ms: int = THREE_DAYS_MS,
    ) -> None:
        if retention_ms < 0:
            raise ValueError("retention_ms must not be negative")
        self._state = state
        self._clock = clock
        self._event_repo = event_repo
        self._retention_ms = retention_ms

    @property
    def retention_ms(self) -> int:
        return self._retention_ms

    def execute(self) -> list[str]:
        expired: list[Ticket] = []

        with self._state.lock:
            now = self._clock.now()
            for ticket in self._state.tickets():
                if ticket.is_expired(now=now, retention_ms=self._retention_ms):
                    self._state.pop_ticket(ticket.code)
                    self._state.release(ticket.locker_id)
                    expired.append(ticket)

        for ticket in expired:
            self._event_repo.append(
                new_event(
                    EventType.TicketExpired,
                    locker_id=ticket.locker_id,
                    occurred_at=now,
                    code=ticket.code,
                    created_at=ticket.created_at,
                )
            )
            logger.warning("ticket_expired", locker_id=ticket.locker_id, age_ms=now - ticket.created_at)

        return [ticket.locker_id for ticket in expired]

from __future__ import annotations

import structlog

from lockalloc.core.clock import Clock
from lockalloc.core.entities.event import EventType
from lockalloc.core.entities.locker_state import LockerState
from lockalloc.core.entities.retrieval_code import CodeFactory
from lockalloc.core.entities.size_class import SizeClass, size_class_of
from lockalloc.core.entities.ticket import NoCapacity, Ticket
from lockalloc.core.repositories.event_repository import EventRepository
from lockalloc.core.use_cases._events import new_event

logger = structlog.get_logger(__name__)

MAX_CODE_ATTEMPTS = 16


class CodeGenerationError(RuntimeError):
    """The code factory kept producing codes that are already active."""


class DepositParcelUseCase:
    """
    Allocates the best-fitting free locker for a parcel and issues the ticket
    that later opens it.
    """

    def __init__(
            self,
            *,
            state: LockerState,
            clock: Clock,
            code_factory: CodeFactory,
            event_repo: EventRepository,
    ) -> None:
        self._state = state
        self._clock = clock
        self._code_factory = code_factory
        self._event_repo = event_repo

    def execute(self, *, size: SizeClass) -> Ticket | NoCapacity:
        size = SizeClass(size)

        with self._state.lock:
            locker_id = self._state.take_best_fit(size)
            if locker_id is None:
                result: Ticket | NoCapacity = NoCapacity(requested_size=size)
            else:
                now = self._clock.now()
                try:
                    code = self._unused_code(locker_id, now)
                except CodeGenerationError:
                    # put the locker back where it came from
                    self._state.pool(size_class_of(locker_id)).appendleft(locker_id)
                    raise
                result = Ticket(locker_id=locker_id, code=code, created_at=now)
                self._state.add_ticket(result)

        if isinstance(result, NoCapacity):
            logger.info("deposit_rejected", requested_size=size.value)
            return result

        self._event_repo.append(
            new_event(
                EventType.LockerAllocated,
                locker_id=result.locker_id,
                occurred_at=result.created_at,
                requested_size=size.value,
            )
        )
        logger.info("locker_allocated", locker_id=result.locker_id, requested_size=size.value)
        return result

    def _unused_code(self, locker_id: str, now: int) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = self._code_factory(locker_id, now)
            if not self._state.has_code(code):
                return code
        raise CodeGenerationError(f"Could not generate an unused retrieval code for locker {locker_id!r}")

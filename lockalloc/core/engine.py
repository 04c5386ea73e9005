from __future__ import annotations

from lockalloc.core.clock import Clock
from lockalloc.core.entities.locker_state import InventorySnapshot, InventorySpec, LockerState
from lockalloc.core.entities.retrieval_code import CodeFactory, default_code_factory
from lockalloc.core.entities.size_class import SizeClass
from lockalloc.core.entities.ticket import InvalidCode, NoCapacity, PickupConfirmation, Ticket
from lockalloc.core.repositories.event_repository import EventRepository
from lockalloc.core.use_cases.deposit_parcel import DepositParcelUseCase
from lockalloc.core.use_cases.get_inventory import GetInventoryUseCase
from lockalloc.core.use_cases.pickup_parcel import PickupParcelUseCase
from lockalloc.core.use_cases.sweep_expired_tickets import THREE_DAYS_MS, SweepExpiredTicketsUseCase


class LockerEngine:
    """
    Locker allocation engine: owns the size-class pools and the active ticket
    table and exposes deposit / pickup / sweep over them.

    All operations are synchronous and thread-safe; each one runs under the
    single lock of the shared `LockerState`.
    """

    def __init__(
            self,
            clock: Clock,
            inventory: InventorySpec | None = None,
            *,
            events: EventRepository | None = None,
            retention_ms: int = THREE_DAYS_MS,
            code_factory: CodeFactory | None = None,
    ) -> None:
        if code_factory is None:
            code_factory = default_code_factory

        event_repo = events
        if event_repo is None:
            from lockalloc.infrastructure.repositories.event_repository_memory_impl import (
                InMemoryEventRepositoryImpl,
            )
            event_repo = InMemoryEventRepositoryImpl()

        self._state = LockerState(inventory)
        self._event_repo = event_repo

        self._deposit = DepositParcelUseCase(
            state=self._state,
            clock=clock,
            code_factory=code_factory,
            event_repo=event_repo,
        )
        self._pickup = PickupParcelUseCase(state=self._state, clock=clock, event_repo=event_repo)
        self._sweep = SweepExpiredTicketsUseCase(
            state=self._state,
            clock=clock,
            event_repo=event_repo,
            retention_ms=retention_ms,
        )
        self._inventory = GetInventoryUseCase(state=self._state)

    @property
    def events(self) -> EventRepository:
        return self._event_repo

    @property
    def retention_ms(self) -> int:
        return self._sweep.retention_ms

    def deposit(self, size: SizeClass) -> Ticket | NoCapacity:
        return self._deposit.execute(size=size)

    def pickup(self, code: str) -> PickupConfirmation | InvalidCode:
        return self._pickup.execute(code=code)

    def sweep(self) -> list[str]:
        """Reclaim every locker whose ticket outlived the retention window."""
        return self._sweep.execute()

    def inventory(self) -> InventorySnapshot:
        return self._inventory.execute()

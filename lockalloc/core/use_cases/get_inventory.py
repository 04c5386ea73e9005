from __future__ import annotations

from lockalloc.core.entities.locker_state import InventorySnapshot, LockerState


class GetInventoryUseCase:
    def __init__(self, *, state: LockerState) -> None:
        self._state = state

    def execute(self) -> InventorySnapshot:
        with self._state.lock:
            return self._state.snapshot()

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from lockalloc.core.entities.size_class import ORDERED_SIZES, SizeClass, size_class_of
from lockalloc.core.entities.ticket import Ticket

DEFAULT_LOCKERS_PER_SIZE = 10

InventorySpec = Mapping[SizeClass, int | Iterable[str]]


@dataclass(frozen=True, slots=True)
class InventorySnapshot:
    free: dict[SizeClass, tuple[str, ...]]
    active: tuple[Ticket, ...]

    def free_count(self, size: SizeClass) -> int:
        return len(self.free[size])

    @property
    def total(self) -> int:
        return sum(len(ids) for ids in self.free.values()) + len(self.active)

    def all_locker_ids(self) -> list[str]:
        ids = [locker_id for size in ORDERED_SIZES for locker_id in self.free[size]]
        ids.extend(ticket.locker_id for ticket in self.active)
        return ids


class LockerState:
    """
    The single mutable aggregate behind the engine: the three size-class pools
    and the active ticket table, guarded together by one lock.

    Every method assumes the caller already holds `lock`.
    """

    def __init__(self, inventory: InventorySpec | None = None) -> None:
        self.lock = threading.Lock()
        self._small: deque[str] = deque()
        self._medium: deque[str] = deque()
        self._large: deque[str] = deque()
        self._tickets: dict[str, Ticket] = {}
        self._seed(inventory)

    # -----------------------------
    # Pools
    # -----------------------------
    def pool(self, size: SizeClass) -> deque[str]:
        match size:
            case SizeClass.SMALL:
                return self._small
            case SizeClass.MEDIUM:
                return self._medium
            case SizeClass.LARGE:
                return self._large
        raise ValueError(f"Unsupported size class: {size!r}")

    def take_best_fit(self, size: SizeClass) -> str | None:
        """Pop the oldest free locker of `size` or, failing that, of the next larger size."""
        for candidate in size.upward():
            pool = self.pool(candidate)
            if pool:
                return pool.popleft()
        return None

    def release(self, locker_id: str) -> None:
        self.pool(size_class_of(locker_id)).append(locker_id)

    # -----------------------------
    # Ticket table
    # -----------------------------
    def has_code(self, code: str) -> bool:
        return code in self._tickets

    def add_ticket(self, ticket: Ticket) -> None:
        if ticket.code in self._tickets:
            raise ValueError(f"Retrieval code already active: {ticket.code!r}")
        self._tickets[ticket.code] = ticket

    def pop_ticket(self, code: str) -> Ticket | None:
        return self._tickets.pop(code, None)

    def tickets(self) -> list[Ticket]:
        return list(self._tickets.values())

    def snapshot(self) -> InventorySnapshot:
        return InventorySnapshot(
            free={size: tuple(self.pool(size)) for size in ORDERED_SIZES},
            active=tuple(self._tickets.values()),
        )

    # -----------------------------
    # Seeding
    # -----------------------------
    def _seed(self, inventory: InventorySpec | None) -> None:
        if inventory is None:
            inventory = {size: DEFAULT_LOCKERS_PER_SIZE for size in ORDERED_SIZES}

        seen: set[str] = set()
        for size, spec in inventory.items():
            size = SizeClass(size)
            for locker_id in self._expand(size, spec):
                if size_class_of(locker_id) is not size:
                    raise ValueError(f"Locker id {locker_id!r} does not belong to size class {size.value}")
                if locker_id in seen:
                    raise ValueError(f"Duplicate locker id in inventory: {locker_id!r}")
                seen.add(locker_id)
                self.pool(size).append(locker_id)

    @staticmethod
    def _expand(size: SizeClass, spec: int | Iterable[str]) -> list[str]:
        if isinstance(spec, bool):
            raise ValueError(f"Locker count for {size.value} must be an int")
        if isinstance(spec, int):
            if spec < 0:
                raise ValueError(f"Locker count for {size.value} must not be negative")
            return [size.locker_id(n) for n in range(spec)]
        if isinstance(spec, str):
            raise ValueError(f"Locker ids for {size.value} must be an iterable of strings, not a string")
        return list(spec)

from __future__ import annotations

from dataclasses import dataclass

from lockalloc.core.entities.size_class import SizeClass


@dataclass(frozen=True, slots=True)
class Ticket:
    locker_id: str
    code: str
    created_at: int

    def is_expired(self, *, now: int, retention_ms: int) -> bool:
        """A ticket sitting exactly at the retention boundary is still live."""
        return now - self.created_at > retention_ms


@dataclass(frozen=True, slots=True)
class PickupConfirmation:
    locker_id: str
    code: str

    @property
    def message(self) -> str:
        return f"Locker {self.locker_id} opened. Package retrieved."


@dataclass(frozen=True, slots=True)
class NoCapacity:
    """Deposit outcome when the requested size and every larger size are full."""
    requested_size: SizeClass

    @property
    def message(self) -> str:
        return f"No locker available for size {self.requested_size.value}"


@dataclass(frozen=True, slots=True)
class InvalidCode:
    """
    Pickup outcome for a code that is unknown, already redeemed or expired.
    The three cases are deliberately not told apart.
    """
    code: str

    @property
    def message(self) -> str:
        return f"Invalid or expired code: {self.code}"

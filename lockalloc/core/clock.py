from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Source of the current instant, in integer milliseconds, never decreasing."""

    def now(self) -> int:
        ...

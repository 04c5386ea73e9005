from __future__ import annotations

from enum import Enum


class SizeClass(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

    @property
    def rank(self) -> int:
        match self:
            case SizeClass.SMALL:
                return 0
            case SizeClass.MEDIUM:
                return 1
            case SizeClass.LARGE:
                return 2

    @property
    def prefix(self) -> str:
        match self:
            case SizeClass.SMALL:
                return "S"
            case SizeClass.MEDIUM:
                return "M"
            case SizeClass.LARGE:
                return "L"

    def upward(self) -> tuple[SizeClass, ...]:
        """This class followed by every larger one, smallest first."""
        return tuple(size for size in ORDERED_SIZES if size.rank >= self.rank)

    def locker_id(self, number: int) -> str:
        return f"{self.prefix}-{number}"


ORDERED_SIZES: tuple[SizeClass, ...] = (SizeClass.SMALL, SizeClass.MEDIUM, SizeClass.LARGE)


def size_class_of(locker_id: str) -> SizeClass:
    """Raises ValueError if the locker id does not carry a known size prefix"""

    prefix, sep, _ = locker_id.partition("-")
    if sep:
        for size in ORDERED_SIZES:
            if size.prefix == prefix:
                return size
    raise ValueError(f"Unknown size class for locker id {locker_id!r}")

from __future__ import annotations

from lockalloc.core.engine import LockerEngine
from lockalloc.core.entities.size_class import ORDERED_SIZES
from lockalloc.infrastructure.clock import SystemClock
from lockalloc.infrastructure.config import Settings, settings
from lockalloc.infrastructure.repositories.event_repository_memory_impl import InMemoryEventRepositoryImpl


def build_engine(config: Settings) -> LockerEngine:
    return LockerEngine(
        SystemClock(),
        {size: config.lockers_per_size for size in ORDERED_SIZES},
        events=InMemoryEventRepositoryImpl(max_events=config.event_buffer_size),
        retention_ms=config.retention_ms,
    )


locker_engine = build_engine(settings)

from __future__ import annotations

import pytest

from lockalloc.core.engine import LockerEngine
from lockalloc.core.entities.event import EventType
from lockalloc.core.entities.size_class import SizeClass
from lockalloc.core.entities.ticket import InvalidCode, Ticket
from lockalloc.core.use_cases.sweep_expired_tickets import THREE_DAYS_MS
from lockalloc.infrastructure.clock import ManualClock

DAY_MS = 24 * 60 * 60 * 1000


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=1000)


@pytest.fixture()
def engine(clock: ManualClock) -> LockerEngine:
    return LockerEngine(clock)


def _deposit(engine: LockerEngine, size: SizeClass) -> Ticket:
    ticket = engine.deposit(size)
    assert isinstance(ticket, Ticket)
    return ticket


def test_default_retention_is_three_days(engine: LockerEngine) -> None:
    assert engine.retention_ms == THREE_DAYS_MS == 3 * DAY_MS


def test_sweep_reclaims_ticket_after_four_days(engine: LockerEngine, clock: ManualClock) -> None:
    ticket = _deposit(engine, SizeClass.SMALL)
    clock.advance(4 * DAY_MS)

    assert engine.sweep() == ["S-0"]
    assert engine.pickup(ticket.code) == InvalidCode(code=ticket.code)
    assert "S-0" in engine.inventory().free[SizeClass.SMALL]


@pytest.mark.parametrize(
    ("elapsed", "reclaimed"),
    [
        (THREE_DAYS_MS - 1, []),
        (THREE_DAYS_MS, []),
        (THREE_DAYS_MS + 1, ["L-0"]),
    ],
)
def test_expiry_boundary_is_strictly_greater_than_retention(
        engine: LockerEngine, clock: ManualClock, elapsed: int, reclaimed: list[str]
) -> None:
    _deposit(engine, SizeClass.LARGE)
    clock.advance(elapsed)

    assert engine.sweep() == reclaimed


def test_sweep_leaves_young_tickets_alone(engine: LockerEngine, clock: ManualClock) -> None:
    old = _deposit(engine, SizeClass.SMALL)
    clock.advance(2 * DAY_MS)
    young = _deposit(engine, SizeClass.SMALL)
    clock.advance(2 * DAY_MS)

    assert engine.sweep() == [old.locker_id]
    active = engine.inventory().active
    assert [t.code for t in active] == [young.code]


def test_sweep_is_idempotent(engine: LockerEngine, clock: ManualClock) -> None:
    _deposit(engine, SizeClass.SMALL)
    _deposit(engine, SizeClass.MEDIUM)
    clock.advance(4 * DAY_MS)

    assert engine.sweep() == ["S-0", "M-0"]
    assert engine.sweep() == []


def test_sweep_on_empty_table_is_noop(engine: LockerEngine) -> None:
    before = engine.inventory()

    assert engine.sweep() == []
    assert engine.inventory() == before


def test_sweep_emits_expiry_event_per_reclaimed_locker(engine: LockerEngine, clock: ManualClock) -> None:
    ticket = _deposit(engine, SizeClass.MEDIUM)
    clock.advance(4 * DAY_MS)

    engine.sweep()

    expired = [e for e in engine.events.list() if e.type is EventType.TicketExpired]
    assert len(expired) == 1
    assert expired[0].locker_id == ticket.locker_id
    assert expired[0].occurred_at == clock.now()
    assert expired[0].payload["created_at"] == ticket.created_at


def test_custom_retention_window(clock: ManualClock) -> None:
    engine = LockerEngine(clock, {SizeClass.SMALL: 1}, retention_ms=100)
    _deposit(engine, SizeClass.SMALL)
    clock.advance(101)

    assert engine.sweep() == ["S-0"]


def test_negative_retention_is_rejected(clock: ManualClock) -> None:
    with pytest.raises(ValueError):
        LockerEngine(clock, retention_ms=-1)

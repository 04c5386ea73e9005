from __future__ import annotations

from types import SimpleNamespace

import pytest

from lockalloc.infrastructure import clock as clock_module
from lockalloc.infrastructure.clock import ManualClock, SystemClock


def test_manual_clock_starts_where_told_and_advances() -> None:
    clock = ManualClock(start=1000)

    assert clock.now() == 1000
    assert clock.advance(500) == 1500
    assert clock.now() == 1500

    clock.set(2000)
    assert clock.now() == 2000


def test_manual_clock_refuses_to_go_backwards() -> None:
    clock = ManualClock(start=1000)

    with pytest.raises(ValueError):
        clock.set(999)
    with pytest.raises(ValueError):
        clock.advance(-1)
    assert clock.now() == 1000


def test_system_clock_returns_milliseconds() -> None:
    now = SystemClock().now()

    # somewhere after 2020-01-01 in ms, not seconds or nanoseconds
    assert 1_577_836_800_000 < now < 10 ** 14


def test_system_clock_never_goes_backwards(monkeypatch: pytest.MonkeyPatch) -> None:
    readings = iter([5_000_000_000, 4_000_000_000, 6_000_000_000])
    monkeypatch.setattr(clock_module, "time", SimpleNamespace(time_ns=lambda: next(readings)))
    clock = SystemClock()

    assert [clock.now(), clock.now(), clock.now()] == [5000, 5000, 6000]

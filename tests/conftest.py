"""Shared pytest fixtures and fakes for Break Reminder tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from breakreminder.core.timer import BreakTimer
from breakreminder.data.persistence import FallbackStore, SettingsPersistence
from breakreminder.data.store import SettingsStore


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeTkHost:
    """Stands in for a Tk widget's after/after_cancel, driven by a FakeClock."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self._jobs: dict[str, tuple[int, int, Callable[[], Any]]] = {}
        self._seq = 0

    def after(self, ms: int, func: Callable[[], Any]) -> str:
        self._seq += 1
        job_id = f"after#{self._seq}"
        self._jobs[job_id] = (self.clock.now + ms, self._seq, func)
        return job_id

    def after_cancel(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, ms: int) -> None:
        """Move time forward, running due callbacks in order."""
        target = self.clock.now + ms
        while True:
            due = [(when, seq, job_id) for job_id, (when, seq, _) in self._jobs.items() if when <= target]
            if not due:
                break
            when, _, job_id = min(due)
            _, _, func = self._jobs.pop(job_id)
            self.clock.now = when
            func()
        self.clock.now = target


class IntervalSetting:
    """Mutable interval source for the timer."""

    def __init__(self, minutes: int = 1) -> None:
        self.minutes = minutes

    def __call__(self) -> int:
        return self.minutes


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def host(clock: FakeClock) -> FakeTkHost:
    return FakeTkHost(clock)


@pytest.fixture
def interval() -> IntervalSetting:
    return IntervalSetting(1)


@pytest.fixture
def timer(interval: IntervalSetting, clock: FakeClock) -> BreakTimer:
    """Idle timer with a one minute interval on a fake clock."""
    return BreakTimer(interval, clock=clock)


@pytest.fixture
def persistence(tmp_path: Path) -> SettingsPersistence:
    """Persistence isolated in a temp directory."""
    fallback = FallbackStore(tmp_path / "fallback" / "store", "reminder-settings")
    return SettingsPersistence(tmp_path / "data" / "settings.json", fallback)


@pytest.fixture
def store(persistence: SettingsPersistence) -> SettingsStore:
    s = SettingsStore(persistence)
    try:
        yield s
    finally:
        s.close(timeout=5)


def expire(timer: BreakTimer, clock: FakeClock) -> None:
    """Run a started timer to expiry."""
    timer.start()
    clock.advance(timer.interval_ms)
    timer.tick()

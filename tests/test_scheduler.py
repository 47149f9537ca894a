"""Tests for the periodic timer on a Tk-style host."""

from breakreminder.core.scheduler import PeriodicTimer

from conftest import FakeTkHost


def test_fires_every_period(host: FakeTkHost) -> None:
    calls = []
    periodic = PeriodicTimer(host, 1000, lambda: calls.append(host.clock.now))
    periodic.start()
    host.advance(3500)
    assert calls == [1000, 2000, 3000]
    assert periodic.is_active


def test_stop_cancels_pending_call(host: FakeTkHost) -> None:
    calls = []
    periodic = PeriodicTimer(host, 1000, lambda: calls.append(1))
    periodic.start()
    host.advance(1000)
    periodic.stop()
    host.advance(5000)
    assert calls == [1]
    assert not periodic.is_active
    assert host.pending == 0


def test_restart_resets_phase(host: FakeTkHost) -> None:
    calls = []
    periodic = PeriodicTimer(host, 1000, lambda: calls.append(host.clock.now))
    periodic.start()
    host.advance(600)
    periodic.start()
    host.advance(1000)
    assert calls == [1600]
    assert host.pending == 1


def test_callback_can_stop_its_own_timer(host: FakeTkHost) -> None:
    calls = []

    def callback() -> None:
        calls.append(1)
        if len(calls) == 2:
            periodic.stop()

    periodic = PeriodicTimer(host, 1000, callback)
    periodic.start()
    host.advance(10_000)
    assert calls == [1, 1]
    assert host.pending == 0


def test_stop_when_idle_is_harmless(host: FakeTkHost) -> None:
    periodic = PeriodicTimer(host, 1000, lambda: None)
    periodic.stop()
    assert not periodic.is_active

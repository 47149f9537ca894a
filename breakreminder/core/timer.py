"""
Break countdown timer logic for Break Reminder.
"""

import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from breakreminder.utils.constants import MS_PER_MINUTE, TimerStatus
from breakreminder.data.settings import clamp_interval


def monotonic_ms() -> int:
    """Current monotonic time in milliseconds."""
    return int(time.monotonic() * 1000)


@dataclass
class TimerState:
    """Snapshot of the countdown."""

    status: str
    start_instant: Optional[int]
    interval_ms: int
    remaining_ms: int


class BreakTimer:
    """
    Countdown state machine: idle -> running <-> paused, running -> expired.

    The timer never sleeps or schedules anything itself; tick() is driven from
    outside (see PeriodicTimer). While running, the remaining time is derived
    from the start instant, so late or skipped ticks never drift the countdown.
    Operations called from a state that doesn't allow them are ignored.
    """

    def __init__(
        self,
        interval_minutes: Callable[[], int],
        clock: Callable[[], int] = monotonic_ms,
        on_tick: Optional[Callable[[int], None]] = None,
        on_state_change: Optional[Callable[[str, str], None]] = None,
    ):
        """
        Initialize the timer.

        Args:
            interval_minutes: Returns the configured interval; read on every
                start and reset, never cached between cycles
            clock: Returns the current time in milliseconds
            on_tick: Callback called on every running tick with remaining ms
            on_state_change: Callback called with (old_status, new_status)
        """
        self._interval_minutes = interval_minutes
        self._clock = clock
        self.on_tick = on_tick

        self._listeners: List[Callable[[str, str], None]] = []
        if on_state_change:
            self._listeners.append(on_state_change)

        interval_ms = self._configured_interval_ms()
        self._state = TimerState(
            status=TimerStatus.IDLE,
            start_instant=None,
            interval_ms=interval_ms,
            remaining_ms=interval_ms,
        )

    @property
    def status(self) -> str:
        """Get current timer status."""
        return self._state.status

    @property
    def interval_ms(self) -> int:
        """Get the duration of the current cycle in milliseconds."""
        return self._state.interval_ms

    @property
    def remaining_ms(self) -> int:
        """Get the cached remaining time (refreshed on every tick)."""
        return self._state.remaining_ms

    def snapshot(self) -> TimerState:
        """Get a copy of the current state."""
        return replace(self._state)

    def add_listener(self, callback: Callable[[str, str], None]) -> None:
        """Register a callback for status transitions."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str, str], None]) -> None:
        """Unregister a status transition callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def current_remaining(self) -> int:
        """Compute the remaining time without changing any state."""
        state = self._state
        if state.status != TimerStatus.RUNNING or state.start_instant is None:
            return state.remaining_ms

        elapsed = max(0, self._clock() - state.start_instant)
        return max(0, state.interval_ms - elapsed)

    def start(self) -> None:
        """Start a new cycle from idle or paused."""
        if self._state.status not in (TimerStatus.IDLE, TimerStatus.PAUSED):
            return

        interval_ms = self._configured_interval_ms()
        self._set_state(
            status=TimerStatus.RUNNING,
            start_instant=self._clock(),
            interval_ms=interval_ms,
            remaining_ms=interval_ms,
        )

    def pause(self) -> None:
        """Freeze the countdown at its current remaining time."""
        # A countdown that already ran out expires instead of pausing at zero.
        self.tick()
        if self._state.status != TimerStatus.RUNNING:
            return

        remaining = self._state.remaining_ms
        self._set_state(
            status=TimerStatus.PAUSED,
            start_instant=None,
            remaining_ms=remaining,
        )

    def reset(self) -> None:
        """Return to idle with a full interval, discarding progress."""
        interval_ms = self._configured_interval_ms()
        self._set_state(
            status=TimerStatus.IDLE,
            start_instant=None,
            interval_ms=interval_ms,
            remaining_ms=interval_ms,
        )

    def reset_and_start(self) -> None:
        """Reset, then start. Listeners see the idle state in between."""
        self.reset()
        self.start()

    def set_interval(self, minutes: int) -> None:
        """
        Change the cycle duration.

        A running countdown restarts now with the new duration. Idle and
        paused timers take the new full duration as their remaining time.
        An expired timer keeps zero remaining until it is reset.
        """
        interval_ms = clamp_interval(minutes) * MS_PER_MINUTE
        status = self._state.status

        if status == TimerStatus.RUNNING:
            self._set_state(
                start_instant=self._clock(),
                interval_ms=interval_ms,
                remaining_ms=interval_ms,
            )
        elif status == TimerStatus.EXPIRED:
            self._set_state(interval_ms=interval_ms)
        else:
            self._set_state(interval_ms=interval_ms, remaining_ms=interval_ms)

    def tick(self) -> None:
        """Refresh the remaining time; expire when it reaches zero."""
        if self._state.status != TimerStatus.RUNNING:
            return

        # Never let a backwards clock raise the remaining time.
        remaining = min(self.current_remaining(), self._state.remaining_ms)

        if remaining <= 0:
            self._set_state(
                status=TimerStatus.EXPIRED,
                start_instant=None,
                remaining_ms=0,
            )
        else:
            self._state.remaining_ms = remaining

        if self.on_tick:
            self.on_tick(self._state.remaining_ms)

    def _configured_interval_ms(self) -> int:
        return clamp_interval(self._interval_minutes()) * MS_PER_MINUTE

    def _set_state(self, **changes) -> None:
        """Apply changes and notify listeners if the status changed."""
        old_status = self._state.status
        self._state = replace(self._state, **changes)
        new_status = self._state.status

        if old_status != new_status:
            for listener in list(self._listeners):
                listener(old_status, new_status)

"""
Periodic callbacks on the Tk event loop.
"""

from typing import Any, Callable, Optional


class PeriodicTimer:
    """
    Calls a function every ``interval_ms`` on the host's event loop.

    The host is anything with Tk's ``after``/``after_cancel`` pair (normally the
    root window). Only one pending callback exists at a time, so stopping the
    timer guarantees it will not fire again.
    """

    def __init__(self, host: Any, interval_ms: int, callback: Callable[[], None]):
        """
        Initialize the periodic timer.

        Args:
            host: Object providing after(ms, func) and after_cancel(id)
            interval_ms: Period between calls in milliseconds
            callback: Function called on every period
        """
        self.host = host
        self.interval_ms = interval_ms
        self.callback = callback

        self._after_id: Optional[Any] = None

    @property
    def is_active(self) -> bool:
        """Check if a callback is scheduled."""
        return self._after_id is not None

    def start(self) -> None:
        """Start (or restart) the timer. The first call happens after one period."""
        self.stop()
        self._after_id = self.host.after(self.interval_ms, self._fire)

    def stop(self) -> None:
        """Cancel the pending callback, if any."""
        if self._after_id is not None:
            self.host.after_cancel(self._after_id)
            self._after_id = None

    def _fire(self) -> None:
        # Reschedule before running so the callback may stop() us.
        self._after_id = self.host.after(self.interval_ms, self._fire)
        self.callback()

"""
Expiry popup interaction logic for Break Reminder.
"""

from typing import Any, Callable, Optional

from breakreminder.core.scheduler import PeriodicTimer
from breakreminder.core.timer import BreakTimer
from breakreminder.data.store import SettingsStore
from breakreminder.utils.constants import (
    AUTO_COUNTDOWN_TICK_MS,
    AUTO_RESTART_COUNTDOWN,
    NotificationMode,
    TimerStatus,
)


class PopupController:
    """
    Resolves an expired timer through the popup.

    Confirm mode waits for the user to acknowledge (pause) or acknowledge and
    restart. Auto mode counts down and restarts the timer by itself unless
    the user closes the popup first. The mode is read once when the popup
    opens and kept until it closes.
    """

    def __init__(
        self,
        timer: BreakTimer,
        settings_store: SettingsStore,
        host: Any,
        show_popup: Callable[['PopupController'], object],
        close_popup: Callable[[], object],
        countdown_seconds: int = AUTO_RESTART_COUNTDOWN,
    ):
        """
        Initialize the controller.

        Args:
            timer: Timer to resolve
            settings_store: Source of the notification mode
            host: Tk widget (or anything with after/after_cancel) for the countdown
            show_popup: Displays the popup for this controller
            close_popup: Removes the popup from the screen
            countdown_seconds: Auto mode countdown length
        """
        self.timer = timer
        self.settings_store = settings_store
        self.show_popup = show_popup
        self.close_popup = close_popup
        self.countdown_seconds = countdown_seconds

        self.on_countdown: Optional[Callable[[int], None]] = None

        self._is_open = False
        self._mode = NotificationMode.CONFIRM
        self._countdown = countdown_seconds
        self._countdown_timer = PeriodicTimer(host, AUTO_COUNTDOWN_TICK_MS, self._on_countdown_tick)

        timer.add_listener(self._on_timer_state_change)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def mode(self) -> str:
        """Mode latched when the popup opened."""
        return self._mode

    @property
    def countdown(self) -> int:
        """Seconds left before auto restart."""
        return self._countdown

    @property
    def is_counting_down(self) -> bool:
        return self._countdown_timer.is_active

    def open(self) -> bool:
        """Open the popup. Re-shows the existing one if already open."""
        if self._is_open:
            return self._show()

        self._is_open = True
        self._mode = self.settings_store.settings.mode
        self._countdown = self.countdown_seconds

        if self._mode == NotificationMode.AUTO:
            self._countdown_timer.start()

        return self._show()

    def acknowledge(self) -> None:
        """OK: pause the timer and close."""
        if not self._is_open:
            return
        self.timer.pause()
        self._close()

    def acknowledge_and_restart(self) -> None:
        """OK + restart: close and begin a fresh cycle."""
        if not self._is_open:
            return
        self._close()
        self.timer.reset_and_start()

    def dismiss(self) -> None:
        """Manual close during the auto countdown; same as acknowledge."""
        self.acknowledge()

    def toggle_dnd(self) -> None:
        """Flip do-not-disturb from the popup footer."""
        self.settings_store.update(dnd=not self.settings_store.settings.dnd)

    def _on_countdown_tick(self) -> None:
        self._countdown = max(0, self._countdown - 1)

        if self.on_countdown:
            self.on_countdown(self._countdown)

        if self._countdown == 0:
            self._close()
            self.timer.reset_and_start()

    def _on_timer_state_change(self, old_status: str, new_status: str) -> None:
        # Expiry resolved elsewhere (main window, tray)
        if old_status == TimerStatus.EXPIRED and self._is_open:
            self._close()

    def _show(self) -> bool:
        try:
            return self.show_popup(self) is not False
        except Exception as e:
            print(f"[Popup] Failed to show popup: {e}")
            return False

    def _close(self) -> None:
        self._countdown_timer.stop()
        self._is_open = False
        self.on_countdown = None
        try:
            self.close_popup()
        except Exception as e:
            print(f"[Popup] Failed to close popup: {e}")

"""
Expiry notifications for Break Reminder.
"""

from typing import Callable

from breakreminder.data.store import SettingsStore
from breakreminder.utils.constants import TimerStatus


class NotificationDispatcher:
    """
    Signals the user once each time the timer expires.

    Subscribe on_state_change to the timer. Only the transition into the
    expired state triggers anything; the timer has to leave that state before
    another notification can fire. With do-not-disturb on, nothing is
    signalled at all.
    """

    def __init__(
        self,
        settings_store: SettingsStore,
        play_sound: Callable[[], bool],
        request_attention: Callable[[], bool],
        show_popup: Callable[[], object],
    ):
        """
        Initialize the dispatcher.

        Args:
            settings_store: Source of the dnd and sound_enabled flags
            play_sound: Plays the notification sound
            request_attention: Asks the OS to draw attention to the app
            show_popup: Opens the expiry popup
        """
        self.settings_store = settings_store
        self.play_sound = play_sound
        self.request_attention = request_attention
        self.show_popup = show_popup

        self._last_status = TimerStatus.IDLE

    def on_state_change(self, old_status: str, new_status: str) -> None:
        """Handle a timer status transition."""
        previous = self._last_status
        self._last_status = new_status

        if new_status == TimerStatus.EXPIRED and previous != TimerStatus.EXPIRED:
            self.dispatch()

    def dispatch(self) -> None:
        """Fan out the expiry signals according to current settings."""
        settings = self.settings_store.settings

        if settings.dnd:
            print("[Notifier] Do not disturb is on, expiry not signalled")
            return

        if settings.sound_enabled:
            self._call("sound", self.play_sound)
        self._call("attention request", self.request_attention)
        self._call("popup", self.show_popup)

    def _call(self, name: str, signal: Callable[[], object]) -> None:
        """Run a signal without letting its failure stop the others."""
        try:
            if signal() is False:
                print(f"[Notifier] {name} was not delivered")
        except Exception as e:
            print(f"[Notifier] {name} failed: {e}")

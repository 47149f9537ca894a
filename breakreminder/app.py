"""
Main application orchestration for Break Reminder.
"""

import ttkbootstrap as ttk

from breakreminder.core.notifier import NotificationDispatcher
from breakreminder.core.popup import PopupController
from breakreminder.core.scheduler import PeriodicTimer
from breakreminder.core.timer import BreakTimer
from breakreminder.data.settings import Settings
from breakreminder.data.store import SettingsStore
from breakreminder.ui.expiry_popup import ExpiryPopup
from breakreminder.ui.main_window import MainWindow, format_remaining
from breakreminder.ui.settings_window import SettingsWindow
from breakreminder.ui.theme import apply_theme, resolve_theme
from breakreminder.ui.tray_icon import TrayIcon
from breakreminder.utils.attention import request_attention
from breakreminder.utils.autostart import is_autostart_enabled, set_autostart_enabled
from breakreminder.utils.constants import TIMER_TICK_MS, TimerStatus
from breakreminder.utils.sound import play_sound


class ReminderApp:
    """
    Main application class that orchestrates all components.
    """

    def __init__(self, store: SettingsStore, start_minimized: bool = False):
        """
        Initialize the application.

        Args:
            store: Loaded settings store
            start_minimized: Hide the main window at startup (autostart launch)
        """
        self.store = store

        # Initialize root window
        self.root = ttk.Window(themename=resolve_theme(store.settings.theme))
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._init_timer()
        self._init_notifications()
        self._init_ui()
        self._init_tray()

        store.add_listener(self._on_settings_change)
        self._apply_window_settings(store.settings)

        if start_minimized and self.tray_icon.is_available():
            self.root.withdraw()

    def _init_timer(self) -> None:
        """Initialize the timer and its 1-second tick."""
        self.timer = BreakTimer(
            interval_minutes=lambda: self.store.settings.interval_minutes,
            on_tick=self._on_timer_tick,
            on_state_change=self._on_state_change,
        )
        self.ticker = PeriodicTimer(self.root, TIMER_TICK_MS, self.timer.tick)
        self.ticker.start()

    def _init_notifications(self) -> None:
        """Initialize the expiry popup and the notification dispatcher."""
        self.expiry_popup = ExpiryPopup(self.root)
        self.popup_controller = PopupController(
            timer=self.timer,
            settings_store=self.store,
            host=self.root,
            show_popup=self.expiry_popup.show,
            close_popup=self.expiry_popup.close,
        )

        self.dispatcher = NotificationDispatcher(
            settings_store=self.store,
            play_sound=lambda: play_sound(self.root),
            request_attention=lambda: request_attention(self.root),
            show_popup=self.popup_controller.open,
        )
        self.timer.add_listener(self.dispatcher.on_state_change)

    def _init_ui(self) -> None:
        """Initialize the user interface."""
        self.main_window = MainWindow(
            root=self.root,
            on_start=self._on_start,
            on_pause=self._on_pause,
            on_reset=self._on_reset,
            on_settings=self._on_settings,
        )
        self.main_window.update_state(self.timer.status)
        self.main_window.update_timer(self.timer.remaining_ms)
        self.main_window.update_info(self.store.settings)

    def _init_tray(self) -> None:
        """Initialize the system tray icon."""
        self.tray_icon = TrayIcon(
            on_show=lambda: self.root.after(0, self.main_window.show),
            on_start=lambda: self.root.after(0, self._on_start),
            on_pause=lambda: self.root.after(0, self._on_pause),
            on_reset=lambda: self.root.after(0, self._on_reset),
            on_settings=lambda: self.root.after(0, self._on_settings),
            on_exit=lambda: self.root.after(0, self._on_exit),
        )

        if self.tray_icon.is_available():
            self.tray_icon.start()

    def _on_timer_tick(self, remaining_ms: int) -> None:
        """Handle timer tick - update display and tooltip."""
        self.main_window.update_timer(remaining_ms)
        state = self.timer.status.capitalize()
        self.tray_icon.update_tooltip(f"Break Reminder - {state} {format_remaining(remaining_ms)}")

    def _on_state_change(self, old_status: str, new_status: str) -> None:
        """Handle timer status transition."""
        self.main_window.update_state(new_status)
        self.main_window.update_timer(self.timer.remaining_ms)
        self.tray_icon.update_state(new_status)

    def _on_start(self) -> None:
        """Handle start button click."""
        if self.timer.status == TimerStatus.EXPIRED:
            self.timer.reset_and_start()
        else:
            self.timer.start()

    def _on_pause(self) -> None:
        """Handle pause button click."""
        self.timer.pause()

    def _on_reset(self) -> None:
        """Handle reset button click."""
        self.timer.reset()
        self.main_window.update_timer(self.timer.remaining_ms)

    def _on_settings(self) -> None:
        """Handle settings button click."""
        self.main_window.show()
        self.store.reconcile_autostart(is_autostart_enabled())

        SettingsWindow(
            parent=self.root,
            settings=self.store.settings,
            on_save=self._on_settings_save,
        )

    def _on_settings_save(self, changes: dict) -> None:
        """Handle settings save."""
        old = self.store.settings
        new = self.store.update(changes)

        if new.interval_minutes != old.interval_minutes:
            self.timer.set_interval(new.interval_minutes)
            self.main_window.update_timer(self.timer.remaining_ms)

        if new.autostart != old.autostart:
            set_autostart_enabled(new.autostart)

    def _on_settings_change(self, old: Settings, new: Settings) -> None:
        """Apply window settings whenever the store changes."""
        self._apply_window_settings(new)

    def _apply_window_settings(self, settings: Settings) -> None:
        self.root.attributes("-topmost", settings.always_on_top)
        apply_theme(settings.theme)
        self.main_window.update_info(settings)

    def _on_close(self) -> None:
        """Handle window close - minimize to tray if possible."""
        if self.tray_icon.is_available():
            self.main_window.hide()
        else:
            self._on_exit()

    def _on_exit(self) -> None:
        """Handle application exit."""
        self.ticker.stop()
        self.popup_controller.dismiss()
        self.tray_icon.stop()
        self.store.close(timeout=2)

        # Destroy window
        self.root.quit()
        self.root.destroy()

    def run(self) -> None:
        """Run the application main loop."""
        self.root.mainloop()

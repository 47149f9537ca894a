"""
Main window UI for Break Reminder.
"""

import ttkbootstrap as ttk
from ttkbootstrap.constants import *
from typing import Callable

from breakreminder.data.settings import Settings
from breakreminder.utils.constants import NotificationMode, TimerStatus


STATUS_TEXT = {
    TimerStatus.IDLE: "READY",
    TimerStatus.RUNNING: "RUNNING",
    TimerStatus.PAUSED: "PAUSED",
    TimerStatus.EXPIRED: "TIME FOR A BREAK",
}


def format_remaining(ms: int) -> str:
    """Format milliseconds as MM:SS (minutes may exceed 59)."""
    total_seconds = max(0, ms) // 1000
    minutes = total_seconds // 60
    secs = total_seconds % 60
    return f"{minutes:02d}:{secs:02d}"


class MainWindow:
    """
    Main application window displaying the countdown and controls.
    """

    def __init__(
        self,
        root: ttk.Window,
        on_start: Callable,
        on_pause: Callable,
        on_reset: Callable,
        on_settings: Callable,
    ):
        """
        Initialize the main window.

        Args:
            root: The ttkbootstrap root window
            on_start: Callback when Start button clicked
            on_pause: Callback when Pause button clicked
            on_reset: Callback when Reset button clicked
            on_settings: Callback when Settings button clicked
        """
        self.root = root
        self.on_start = on_start
        self.on_pause = on_pause
        self.on_reset = on_reset
        self.on_settings = on_settings

        self._current_state = TimerStatus.IDLE
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        # Configure window
        self.root.title("Break Reminder")
        self.root.geometry("380x420")
        self.root.resizable(False, False)

        # Main container
        self.main_frame = ttk.Frame(self.root, padding=15)
        self.main_frame.pack(fill=BOTH, expand=YES)

        # Header
        header_frame = ttk.Frame(self.main_frame)
        header_frame.pack(fill=X, pady=(0, 20))

        ttk.Label(
            header_frame,
            text="Break Reminder",
            font=("Helvetica", 16, "bold"),
            bootstyle="primary"
        ).pack(side=LEFT)

        ttk.Button(
            header_frame,
            text="Settings",
            command=self.on_settings,
            bootstyle="secondary-outline"
        ).pack(side=RIGHT)

        # Timer display frame
        timer_frame = ttk.Frame(self.main_frame)
        timer_frame.pack(pady=10)

        self.timer_label = ttk.Label(
            timer_frame,
            text="60:00",
            font=("Helvetica", 56, "bold"),
            bootstyle="secondary"
        )
        self.timer_label.pack()

        self.state_label = ttk.Label(
            timer_frame,
            text=STATUS_TEXT[TimerStatus.IDLE],
            font=("Helvetica", 14),
            bootstyle="secondary"
        )
        self.state_label.pack(pady=(5, 0))

        # Control buttons frame
        controls_frame = ttk.Frame(self.main_frame)
        controls_frame.pack(pady=20)

        self.start_btn = ttk.Button(
            controls_frame,
            text="Start",
            command=self.on_start,
            bootstyle="success",
            width=10
        )
        self.start_btn.pack(side=LEFT, padx=5)

        self.pause_btn = ttk.Button(
            controls_frame,
            text="Pause",
            command=self.on_pause,
            bootstyle="warning",
            width=10,
            state=DISABLED
        )
        self.pause_btn.pack(side=LEFT, padx=5)

        self.reset_btn = ttk.Button(
            controls_frame,
            text="Reset",
            command=self.on_reset,
            bootstyle="secondary",
            width=10
        )
        self.reset_btn.pack(side=LEFT, padx=5)

        # Interval | mode | DND
        self.info_label = ttk.Label(
            self.main_frame,
            text="",
            font=("Helvetica", 10),
            bootstyle="secondary"
        )
        self.info_label.pack(pady=(10, 0))

    def update_timer(self, remaining_ms: int) -> None:
        """
        Update the countdown display.

        Args:
            remaining_ms: Remaining time in milliseconds
        """
        self.timer_label.config(text=format_remaining(remaining_ms))

    def update_state(self, state: str) -> None:
        """
        Update the state display and button states.

        Args:
            state: Current timer status
        """
        self._current_state = state
        self.state_label.config(text=STATUS_TEXT.get(state, state.upper()))

        if state == TimerStatus.RUNNING:
            self.timer_label.config(bootstyle="success")
            self.state_label.config(bootstyle="success")
            self.start_btn.config(state=DISABLED)
            self.pause_btn.config(state=NORMAL)
        elif state == TimerStatus.PAUSED:
            self.timer_label.config(bootstyle="warning")
            self.state_label.config(bootstyle="warning")
            self.start_btn.config(state=NORMAL, text="Start")
            self.pause_btn.config(state=DISABLED)
        elif state == TimerStatus.EXPIRED:
            self.timer_label.config(bootstyle="danger")
            self.state_label.config(bootstyle="danger")
            self.start_btn.config(state=NORMAL, text="Restart")
            self.pause_btn.config(state=DISABLED)
        else:  # IDLE
            self.timer_label.config(bootstyle="secondary")
            self.state_label.config(bootstyle="secondary")
            self.start_btn.config(state=NORMAL, text="Start")
            self.pause_btn.config(state=DISABLED)

    def update_info(self, settings: Settings) -> None:
        """Show interval, mode and do-not-disturb status."""
        mode = "Manual confirm" if settings.mode == NotificationMode.CONFIRM else "Automatic"
        parts = [f"{settings.interval_minutes} min", mode]
        if settings.dnd:
            parts.append("DND on")
        self.info_label.config(text="  |  ".join(parts))

    def show(self) -> None:
        """Show the main window."""
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        """Hide the main window (minimize to tray)."""
        self.root.withdraw()

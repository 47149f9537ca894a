"""
Settings window for Break Reminder.
"""

import ttkbootstrap as ttk
from ttkbootstrap.constants import *
from typing import Callable

from breakreminder.data.settings import Settings, parse_interval
from breakreminder.utils.constants import (
    INTERVAL_PRESETS,
    MAX_INTERVAL_MINUTES,
    MIN_INTERVAL_MINUTES,
    NotificationMode,
    Theme,
)


class SettingsWindow:
    """
    Settings dialog for the reminder interval, notifications and window options.
    """

    def __init__(
        self,
        parent: ttk.Window,
        settings: Settings,
        on_save: Callable[[dict], None],
    ):
        """
        Initialize the settings window.

        Args:
            parent: Parent window
            settings: Current settings (autostart already reconciled with the OS)
            on_save: Callback with the edited field values
        """
        self.parent = parent
        self.settings = settings
        self.on_save = on_save

        self._setup_dialog()

    def _setup_dialog(self) -> None:
        """Set up the dialog UI."""
        self.dialog = ttk.Toplevel(self.parent)
        self.dialog.title("Settings")
        self.dialog.geometry("420x560")
        self.dialog.resizable(False, False)
        self.dialog.transient(self.parent)
        self.dialog.grab_set()

        # Center on parent
        self.dialog.update_idletasks()
        x = self.parent.winfo_x() + (self.parent.winfo_width() - 420) // 2
        y = self.parent.winfo_y() + (self.parent.winfo_height() - 560) // 2
        self.dialog.geometry(f"+{x}+{y}")

        main_frame = ttk.Frame(self.dialog, padding=20)
        main_frame.pack(fill=BOTH, expand=YES)

        # Interval
        timer_frame = ttk.LabelFrame(main_frame, text="Reminder Interval", padding=10)
        timer_frame.pack(fill=X, pady=(0, 15))

        self.interval_var = ttk.StringVar(value=str(self.settings.interval_minutes))

        presets_frame = ttk.Frame(timer_frame)
        presets_frame.pack(fill=X, pady=(0, 5))
        for minutes in INTERVAL_PRESETS:
            ttk.Button(
                presets_frame,
                text=f"{minutes} min",
                command=lambda m=minutes: self.interval_var.set(str(m)),
                bootstyle="primary-outline",
                width=8
            ).pack(side=LEFT, padx=(0, 5))

        custom_frame = ttk.Frame(timer_frame)
        custom_frame.pack(fill=X, pady=5)

        ttk.Label(custom_frame, text="Custom (minutes):").pack(side=LEFT)
        ttk.Spinbox(
            custom_frame,
            from_=MIN_INTERVAL_MINUTES,
            to=MAX_INTERVAL_MINUTES,
            textvariable=self.interval_var,
            width=10
        ).pack(side=RIGHT)

        # Notifications
        notify_frame = ttk.LabelFrame(main_frame, text="Notifications", padding=10)
        notify_frame.pack(fill=X, pady=(0, 15))

        self.mode_var = ttk.StringVar(value=self.settings.mode)
        ttk.Radiobutton(
            notify_frame,
            text="Manual confirm",
            variable=self.mode_var,
            value=NotificationMode.CONFIRM
        ).pack(anchor=W, pady=2)
        ttk.Radiobutton(
            notify_frame,
            text="Automatic restart after 10 seconds",
            variable=self.mode_var,
            value=NotificationMode.AUTO
        ).pack(anchor=W, pady=2)

        self.dnd_var = ttk.BooleanVar(value=self.settings.dnd)
        ttk.Checkbutton(
            notify_frame,
            text="Do not disturb",
            variable=self.dnd_var,
            bootstyle="round-toggle"
        ).pack(anchor=W, pady=5)

        self.sound_var = ttk.BooleanVar(value=self.settings.sound_enabled)
        ttk.Checkbutton(
            notify_frame,
            text="Play sound",
            variable=self.sound_var,
            bootstyle="round-toggle"
        ).pack(anchor=W, pady=5)

        # Window and system
        system_frame = ttk.LabelFrame(main_frame, text="Window", padding=10)
        system_frame.pack(fill=X, pady=(0, 15))

        self.on_top_var = ttk.BooleanVar(value=self.settings.always_on_top)
        ttk.Checkbutton(
            system_frame,
            text="Always on top",
            variable=self.on_top_var,
            bootstyle="round-toggle"
        ).pack(anchor=W, pady=5)

        self.autostart_var = ttk.BooleanVar(value=self.settings.autostart)
        ttk.Checkbutton(
            system_frame,
            text="Start at login",
            variable=self.autostart_var,
            bootstyle="round-toggle"
        ).pack(anchor=W, pady=5)

        theme_frame = ttk.Frame(system_frame)
        theme_frame.pack(fill=X, pady=5)

        ttk.Label(theme_frame, text="Theme:").pack(side=LEFT)
        self.theme_var = ttk.StringVar(value=self.settings.theme)
        for value, label in ((Theme.LIGHT, "Light"), (Theme.DARK, "Dark"), (Theme.SYSTEM, "System")):
            ttk.Radiobutton(
                theme_frame,
                text=label,
                variable=self.theme_var,
                value=value
            ).pack(side=LEFT, padx=(10, 0))

        # Buttons
        buttons_frame = ttk.Frame(main_frame)
        buttons_frame.pack(fill=X, pady=(10, 0))

        ttk.Button(
            buttons_frame,
            text="Cancel",
            command=self.dialog.destroy,
            bootstyle="secondary",
            width=12
        ).pack(side=LEFT)

        ttk.Button(
            buttons_frame,
            text="Save",
            command=self._on_save,
            bootstyle="success",
            width=12
        ).pack(side=RIGHT)

    def _on_save(self) -> None:
        """Handle save button click."""
        changes = {
            "interval_minutes": parse_interval(self.interval_var.get()),
            "mode": self.mode_var.get(),
            "dnd": self.dnd_var.get(),
            "sound_enabled": self.sound_var.get(),
            "always_on_top": self.on_top_var.get(),
            "autostart": self.autostart_var.get(),
            "theme": self.theme_var.get(),
        }

        self.dialog.destroy()
        self.on_save(changes)

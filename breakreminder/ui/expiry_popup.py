"""
Break popup shown when the timer expires.
"""

import ttkbootstrap as ttk
from ttkbootstrap.constants import *
from typing import Optional

from breakreminder.core.popup import PopupController
from breakreminder.utils.constants import NotificationMode


class ExpiryPopup:
    """
    Topmost window asking the user to take a break.

    Owns no state of its own: every button goes through the PopupController,
    which decides what happens to the timer and when the window closes.
    """

    WIDTH = 380
    HEIGHT = 360

    def __init__(self, parent: ttk.Window):
        self.parent = parent
        self.dialog: Optional[ttk.Toplevel] = None
        self.countdown_label: Optional[ttk.Label] = None
        self.dnd_btn: Optional[ttk.Button] = None

    def show(self, controller: PopupController) -> bool:
        """Display the popup for the controller, or raise it if already shown."""
        if self.dialog is not None and self.dialog.winfo_exists():
            self._raise()
            return True

        self._setup_dialog(controller)
        return True

    def close(self) -> bool:
        """Destroy the popup window if it is shown."""
        if self.dialog is not None:
            if self.dialog.winfo_exists():
                self.dialog.destroy()
            self.dialog = None
            self.countdown_label = None
            self.dnd_btn = None
        return True

    def _raise(self) -> None:
        self.dialog.deiconify()
        self.dialog.attributes("-topmost", True)
        self.dialog.lift()
        self.dialog.focus_force()

    def _setup_dialog(self, controller: PopupController) -> None:
        """Set up the dialog UI."""
        self.dialog = ttk.Toplevel(self.parent)
        self.dialog.title("Time for a break!")
        self.dialog.resizable(False, False)
        self.dialog.attributes("-topmost", True)

        # Closing the window counts as acknowledging
        self.dialog.protocol("WM_DELETE_WINDOW", controller.dismiss)

        # Center on screen
        self.dialog.update_idletasks()
        x = (self.dialog.winfo_screenwidth() - self.WIDTH) // 2
        y = (self.dialog.winfo_screenheight() - self.HEIGHT) // 2
        self.dialog.geometry(f"{self.WIDTH}x{self.HEIGHT}+{x}+{y}")

        main_frame = ttk.Frame(self.dialog, padding=20)
        main_frame.pack(fill=BOTH, expand=YES)

        ttk.Label(
            main_frame,
            text="Time for a break!",
            font=("Helvetica", 18, "bold"),
            bootstyle="primary"
        ).pack(anchor=W)

        interval = controller.settings_store.settings.interval_minutes
        ttk.Label(
            main_frame,
            text=f"{interval} minutes are up",
            font=("Helvetica", 10),
            bootstyle="secondary"
        ).pack(anchor=W, pady=(0, 15))

        ttk.Label(
            main_frame,
            text="Step away from the screen and rest your eyes.\n"
                 "Stretch and move around for a moment.",
            font=("Helvetica", 11),
            justify=CENTER
        ).pack(pady=(0, 15))

        if controller.mode == NotificationMode.CONFIRM:
            ttk.Button(
                main_frame,
                text="OK + Restart",
                command=controller.acknowledge_and_restart,
                bootstyle="success"
            ).pack(fill=X, pady=3)
            ttk.Button(
                main_frame,
                text="OK (Pause)",
                command=controller.acknowledge,
                bootstyle="secondary"
            ).pack(fill=X, pady=3)
        else:
            self.countdown_label = ttk.Label(
                main_frame,
                text=str(controller.countdown),
                font=("Helvetica", 32, "bold"),
                bootstyle="success"
            )
            self.countdown_label.pack()
            ttk.Label(
                main_frame,
                text="seconds until the timer restarts",
                font=("Helvetica", 10),
                bootstyle="secondary"
            ).pack(pady=(0, 10))
            ttk.Button(
                main_frame,
                text="Close",
                command=controller.dismiss,
                bootstyle="secondary"
            ).pack(fill=X, pady=3)
            controller.on_countdown = self._update_countdown

        self.dnd_btn = ttk.Button(
            main_frame,
            text=self._dnd_text(controller),
            command=lambda: self._toggle_dnd(controller),
            bootstyle="link"
        )
        self.dnd_btn.pack(side=BOTTOM, anchor=W)

        self._raise()

    def _update_countdown(self, seconds: int) -> None:
        if self.countdown_label is not None:
            self.countdown_label.config(text=str(seconds))

    @staticmethod
    def _dnd_text(controller: PopupController) -> str:
        if controller.settings_store.settings.dnd:
            return "Turn off Do Not Disturb"
        return "Do Not Disturb"

    def _toggle_dnd(self, controller: PopupController) -> None:
        # Only affects future breaks; this one stays open
        controller.toggle_dnd()
        if self.dnd_btn is not None:
            self.dnd_btn.config(text=self._dnd_text(controller))

"""
System tray icon for Break Reminder.
"""

import threading
from typing import Callable, Optional
from PIL import Image, ImageDraw

try:
    from pystray import Icon, Menu, MenuItem
    PYSTRAY_AVAILABLE = True
except ImportError:
    PYSTRAY_AVAILABLE = False

from breakreminder.utils.constants import APP_NAME, TimerStatus


STATE_COLORS = {
    TimerStatus.RUNNING: "#2ECC71",  # Green
    TimerStatus.PAUSED: "#F39C12",   # Orange
    TimerStatus.EXPIRED: "#E74C3C",  # Red
    TimerStatus.IDLE: "#808080",     # Gray
}


def create_icon_image(color: str = "#808080") -> Image.Image:
    """
    Draw the tray icon: a colored clock face.

    Args:
        color: Fill color for the icon

    Returns:
        PIL Image object
    """
    size = 64
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    margin = 4
    draw.ellipse(
        [margin, margin, size - margin, size - margin],
        fill=color,
        outline="#FFFFFF",
        width=2
    )

    # Clock hands
    center = size // 2
    draw.line([center, center, center, margin + 10], fill="#FFFFFF", width=4)
    draw.line([center, center, size - margin - 14, center], fill="#FFFFFF", width=4)

    return image


class TrayIcon:
    """
    System tray icon with context menu.

    Menu callbacks run on pystray's thread; the app is expected to marshal
    them onto the Tk thread.
    """

    def __init__(
        self,
        on_show: Callable,
        on_start: Callable,
        on_pause: Callable,
        on_reset: Callable,
        on_settings: Callable,
        on_exit: Callable,
    ):
        """
        Initialize the tray icon.

        Args:
            on_show: Callback to show main window
            on_start: Callback to start timer
            on_pause: Callback to pause timer
            on_reset: Callback to reset timer
            on_settings: Callback to show settings
            on_exit: Callback to exit application
        """
        self.on_show = on_show
        self.on_start = on_start
        self.on_pause = on_pause
        self.on_reset = on_reset
        self.on_settings = on_settings
        self.on_exit = on_exit

        self._icon: Optional[Icon] = None
        self._current_state = TimerStatus.IDLE

        if PYSTRAY_AVAILABLE:
            self._setup_icon()

    def _setup_icon(self) -> None:
        """Set up the system tray icon."""
        menu = Menu(
            MenuItem("Show", lambda icon, item: self.on_show(), default=True),
            Menu.SEPARATOR,
            MenuItem("Start", lambda icon, item: self.on_start()),
            MenuItem("Pause", lambda icon, item: self.on_pause()),
            MenuItem("Reset", lambda icon, item: self.on_reset()),
            Menu.SEPARATOR,
            MenuItem("Settings", lambda icon, item: self.on_settings()),
            Menu.SEPARATOR,
            MenuItem("Exit", lambda icon, item: self.on_exit()),
        )

        self._icon = Icon(
            APP_NAME,
            create_icon_image(),
            "Break Reminder",
            menu
        )

    def start(self) -> None:
        """Start the tray icon in a background thread."""
        if self._icon:
            thread = threading.Thread(target=self._icon.run, daemon=True)
            thread.start()

    def stop(self) -> None:
        """Stop the tray icon."""
        if self._icon:
            self._icon.stop()

    def update_state(self, state: str) -> None:
        """
        Update the icon color based on timer status.

        Args:
            state: Current timer status
        """
        self._current_state = state

        if not self._icon:
            return

        self._icon.icon = create_icon_image(STATE_COLORS.get(state, "#808080"))
        self._icon.title = f"Break Reminder - {state.capitalize()}"

    def update_tooltip(self, text: str) -> None:
        """
        Update the tray icon tooltip.

        Args:
            text: New tooltip text
        """
        if self._icon:
            self._icon.title = text

    def is_available(self) -> bool:
        """Check if system tray is available."""
        return PYSTRAY_AVAILABLE

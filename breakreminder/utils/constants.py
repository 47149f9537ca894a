"""
Application-wide constants for Break Reminder.
"""

import platform
import tempfile
from pathlib import Path

# App info
APP_NAME = "BreakReminder"
APP_VERSION = "1.0.0"

# Paths
if platform.system() == "Windows":
    APP_DATA_DIR = Path.home() / "AppData" / "Local" / APP_NAME
elif platform.system() == "Darwin":
    APP_DATA_DIR = Path.home() / "Library" / "Application Support" / APP_NAME
else:
    APP_DATA_DIR = Path.home() / ".config" / APP_NAME.lower()
SETTINGS_FILE = APP_DATA_DIR / "settings.json"

# Fallback keyed store (lives in the temp dir, so it may not survive a reboot)
FALLBACK_STORE_PATH = Path(tempfile.gettempdir()) / f"{APP_NAME.lower()}-fallback"
FALLBACK_STORE_KEY = "reminder-settings"

# Interval bounds (minutes)
MIN_INTERVAL_MINUTES = 1
MAX_INTERVAL_MINUTES = 999
INTERVAL_PRESETS = (40, 60, 90, 120)

# Settings defaults
DEFAULT_INTERVAL_MINUTES = 60
DEFAULT_MODE = "confirm"
DEFAULT_THEME = "system"

# Scheduling
TIMER_TICK_MS = 1000
AUTO_RESTART_COUNTDOWN = 10  # countdown ticks before auto mode restarts
AUTO_COUNTDOWN_TICK_MS = 1000

# ttkbootstrap themes used for the light/dark settings
LIGHT_THEME_NAME = "flatly"
DARK_THEME_NAME = "darkly"

# Command line flag passed by autostart registration
MINIMIZED_FLAG = "--minimized"

MS_PER_MINUTE = 60 * 1000


# Timer states
class TimerStatus:
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


# Expiry popup resolution modes
class NotificationMode:
    CONFIRM = "confirm"
    AUTO = "auto"

    ALL = (CONFIRM, AUTO)


class Theme:
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    ALL = (LIGHT, DARK, SYSTEM)

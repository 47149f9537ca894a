"""
Start-at-login registration.

Windows uses the HKCU Run key, macOS a Launch Agent plist and Linux an XDG
autostart desktop entry. Every registration launches the app minimized.
"""

import os
import platform
import plistlib
import subprocess
import sys
from pathlib import Path

from breakreminder.utils.constants import APP_NAME, MINIMIZED_FLAG


REG_PATH = r"Software\Microsoft\Windows\CurrentVersion\Run"
PLIST_LABEL = f"com.{APP_NAME.lower()}.plist"
PLIST_PATH = Path.home() / "Library" / "LaunchAgents" / PLIST_LABEL
DESKTOP_ENTRY_PATH = Path.home() / ".config" / "autostart" / f"{APP_NAME.lower()}.desktop"


def get_command_args() -> list[str]:
    """Get the command that launches the app minimized."""
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        return [sys.executable, MINIMIZED_FLAG]
    # Running from an install
    return [sys.executable, "-m", "breakreminder.main", MINIMIZED_FLAG]


def _quoted_command() -> str:
    return " ".join(f'"{arg}"' if " " in arg else arg for arg in get_command_args())


def set_autostart_enabled(enabled: bool) -> bool:
    """
    Register or unregister the app to run at login.

    Returns:
        True if successful, False otherwise
    """
    system = platform.system()
    try:
        if system == "Windows":
            _set_windows(enabled)
        elif system == "Darwin":
            _set_macos(enabled)
        else:
            _set_linux(enabled)
    except Exception as e:
        print(f"[Autostart] Failed to {'enable' if enabled else 'disable'} autostart: {e}")
        return False

    print(f"[Autostart] Autostart {'enabled' if enabled else 'disabled'}")
    return True


def is_autostart_enabled() -> bool:
    """
    Check if the app is registered to run at login.

    Returns:
        True if auto-start is enabled, False otherwise (including on errors)
    """
    system = platform.system()
    try:
        if system == "Windows":
            return _is_windows_enabled()
        if system == "Darwin":
            return PLIST_PATH.exists()
        return DESKTOP_ENTRY_PATH.exists()
    except Exception as e:
        print(f"[Autostart] Failed to check autostart status: {e}")
        return False


def _set_windows(enabled: bool) -> None:
    import winreg

    key = winreg.OpenKey(winreg.HKEY_CURRENT_USER, REG_PATH, 0, winreg.KEY_SET_VALUE)
    try:
        if enabled:
            winreg.SetValueEx(key, APP_NAME, 0, winreg.REG_SZ, _quoted_command())
        else:
            try:
                winreg.DeleteValue(key, APP_NAME)
            except FileNotFoundError:
                pass  # already absent
    finally:
        winreg.CloseKey(key)


def _is_windows_enabled() -> bool:
    import winreg

    try:
        key = winreg.OpenKey(winreg.HKEY_CURRENT_USER, REG_PATH, 0, winreg.KEY_READ)
    except OSError:
        return False
    try:
        winreg.QueryValueEx(key, APP_NAME)
        return True
    except OSError:
        return False
    finally:
        winreg.CloseKey(key)


def _set_macos(enabled: bool) -> None:
    if enabled:
        plist_data = {
            'Label': PLIST_LABEL,
            'ProgramArguments': get_command_args(),
            'RunAtLoad': True,
            'KeepAlive': False,
        }
        PLIST_PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(PLIST_PATH, 'wb') as f:
            plistlib.dump(plist_data, f)
        subprocess.run(['launchctl', 'load', str(PLIST_PATH)], capture_output=True)
    elif PLIST_PATH.exists():
        subprocess.run(['launchctl', 'unload', str(PLIST_PATH)], capture_output=True)
        PLIST_PATH.unlink()


def _set_linux(enabled: bool) -> None:
    if enabled:
        DESKTOP_ENTRY_PATH.parent.mkdir(parents=True, exist_ok=True)
        DESKTOP_ENTRY_PATH.write_text(
            "[Desktop Entry]\n"
            "Type=Application\n"
            f"Name={APP_NAME}\n"
            f"Exec={_quoted_command()}\n"
            "X-GNOME-Autostart-enabled=true\n",
            encoding="utf-8",
        )
    elif DESKTOP_ENTRY_PATH.exists():
        os.remove(DESKTOP_ENTRY_PATH)

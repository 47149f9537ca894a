"""
Light/dark/system theme handling.
"""

import platform
import subprocess

import ttkbootstrap as ttk

from breakreminder.utils.constants import DARK_THEME_NAME, LIGHT_THEME_NAME, Theme


def system_prefers_dark() -> bool:
    """Check the OS color scheme. Unknown means light."""
    system = platform.system()
    try:
        if system == "Windows":
            import winreg
            key = winreg.OpenKey(
                winreg.HKEY_CURRENT_USER,
                r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize",
            )
            try:
                value, _ = winreg.QueryValueEx(key, "AppsUseLightTheme")
            finally:
                winreg.CloseKey(key)
            return value == 0
        if system == "Darwin":
            result = subprocess.run(
                ["defaults", "read", "-g", "AppleInterfaceStyle"],
                capture_output=True, text=True,
            )
            return result.stdout.strip().lower() == "dark"
        result = subprocess.run(
            ["gsettings", "get", "org.gnome.desktop.interface", "color-scheme"],
            capture_output=True, text=True,
        )
        return "dark" in result.stdout
    except (OSError, subprocess.SubprocessError):
        return False


def resolve_theme(theme: str) -> str:
    """Map a theme setting to a ttkbootstrap theme name."""
    if theme == Theme.SYSTEM:
        theme = Theme.DARK if system_prefers_dark() else Theme.LIGHT
    return DARK_THEME_NAME if theme == Theme.DARK else LIGHT_THEME_NAME


def apply_theme(theme: str) -> None:
    """Switch the running app to the given theme setting."""
    name = resolve_theme(theme)
    style = ttk.Style()
    if style.theme_use() != name:
        style.theme_use(name)

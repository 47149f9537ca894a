"""
Ask the OS to draw the user's attention to the main window.
"""

import ctypes
import platform
from typing import Any


def request_attention(root: Any) -> bool:
    """
    Bring the window forward and, on Windows, flash its taskbar button.

    Args:
        root: Tk root window

    Returns:
        True if successful, False otherwise
    """
    try:
        root.deiconify()
        root.lift()
        if platform.system() == "Windows":
            hwnd = ctypes.windll.user32.GetParent(root.winfo_id())
            ctypes.windll.user32.FlashWindow(hwnd, True)
        return True
    except Exception as e:
        print(f"[Attention] Failed to request attention: {e}")
        return False

"""
Notification sound playback.
"""

import platform
import subprocess
from typing import Any, List, Optional

MAC_SOUND = "/System/Library/Sounds/Glass.aiff"
LINUX_PLAYERS = (
    ["paplay", "/usr/share/sounds/freedesktop/stereo/complete.oga"],
    ["aplay", "-q", "/usr/share/sounds/sound-icons/prompt.wav"],
)

# Last player process; polled on the next launch so it gets reaped
_player: Optional[subprocess.Popen] = None


def _launch(cmd: List[str]) -> None:
    """Start a detached player process, reaping the previous one."""
    global _player
    if _player is not None:
        _player.poll()
    _player = subprocess.Popen(
        cmd,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def play_sound(root: Optional[Any] = None) -> bool:
    """
    Play the break chime without blocking.

    Uses the platform's system sound, falling back to the Tk bell when no
    player is available.

    Args:
        root: Tk window whose bell() is the last resort

    Returns:
        True if a sound was started, False otherwise
    """
    system = platform.system()
    try:
        if system == "Windows":
            import winsound
            winsound.PlaySound("SystemExclamation", winsound.SND_ALIAS | winsound.SND_ASYNC)
            return True
        if system == "Darwin":
            _launch(["afplay", MAC_SOUND])
            return True
        for cmd in LINUX_PLAYERS:
            try:
                _launch(cmd)
                return True
            except FileNotFoundError:
                continue
    except Exception as e:
        print(f"[Sound] System sound failed: {e}")

    if root is not None:
        try:
            root.bell()
            return True
        except Exception as e:
            print(f"[Sound] Bell failed: {e}")
    return False

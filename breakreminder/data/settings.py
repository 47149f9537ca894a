"""
Settings model for Break Reminder.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Mapping, Optional

from breakreminder.utils.constants import (
    DEFAULT_INTERVAL_MINUTES,
    DEFAULT_MODE,
    DEFAULT_THEME,
    MAX_INTERVAL_MINUTES,
    MIN_INTERVAL_MINUTES,
    NotificationMode,
    Theme,
)


def clamp_interval(minutes: Any) -> int:
    """Clamp an interval into the allowed range; unusable values give the default."""
    try:
        minutes = int(minutes)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_INTERVAL_MINUTES
    return max(MIN_INTERVAL_MINUTES, min(MAX_INTERVAL_MINUTES, minutes))


def parse_interval(value: Any, default: int = DEFAULT_INTERVAL_MINUTES) -> int:
    """
    Turn user or file input into a valid interval.

    Anything that isn't a positive whole number falls back to the default;
    numbers above the maximum are clamped.

    Args:
        value: Raw value (int, float or string)
        default: Interval used when the value can't be parsed

    Returns:
        Interval in minutes
    """
    if isinstance(value, bool):
        return default
    try:
        minutes = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if minutes < MIN_INTERVAL_MINUTES:
        return default
    return clamp_interval(minutes)


@dataclass(frozen=True)
class Settings:
    """User preferences, stored as a single document."""

    # Timer
    interval_minutes: int = DEFAULT_INTERVAL_MINUTES
    mode: str = DEFAULT_MODE

    # Notifications
    dnd: bool = False
    sound_enabled: bool = True

    # Window
    always_on_top: bool = False
    theme: str = DEFAULT_THEME

    # System
    autostart: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Settings':
        """
        Build settings from stored data, field by field.

        Missing, unknown or invalid fields fall back to their defaults
        without affecting the other fields.
        """
        if not isinstance(data, Mapping):
            return cls()
        return cls().merged(data)

    def merged(self, partial: Mapping[str, Any]) -> 'Settings':
        """
        Return a copy with the valid values from ``partial`` applied.

        Unknown keys and None values are ignored. An invalid value for a known
        field resets that field to its default.
        """
        values = self.to_dict()
        for name in _FIELD_NAMES:
            if name in partial and partial[name] is not None:
                values[name] = _coerce(name, partial[name])
        return Settings(**values)


_FIELD_NAMES = tuple(f.name for f in fields(Settings))
_DEFAULTS = Settings()


def _coerce(name: str, value: Any) -> Any:
    """Validate a single field value, falling back to the field default."""
    default = getattr(_DEFAULTS, name)

    if name == "interval_minutes":
        return parse_interval(value, default)
    if name == "mode":
        return value if value in NotificationMode.ALL else default
    if name == "theme":
        return value if value in Theme.ALL else default
    return value if isinstance(value, bool) else default

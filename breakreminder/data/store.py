"""
In-memory settings store with background persistence.
"""

from typing import Any, Callable, List, Mapping, Optional

from breakreminder.data.persistence import SettingsPersistence, SettingsWriter
from breakreminder.data.settings import Settings


class SettingsStore:
    """
    Owns the current settings.

    Updates apply to memory immediately and are persisted in the background,
    so a read right after update() always sees the new value even if it
    hasn't reached disk yet. A failed save never rolls the change back.
    """

    def __init__(self, persistence: Optional[SettingsPersistence] = None):
        """
        Initialize the store with default settings.

        Args:
            persistence: Durable backend (defaults to the app data directory)
        """
        self.persistence = persistence or SettingsPersistence()
        self._settings = Settings()
        self._writer = SettingsWriter(self.persistence.save)
        self._listeners: List[Callable[[Settings, Settings], None]] = []

    @property
    def settings(self) -> Settings:
        """Get the current settings."""
        return self._settings

    def add_listener(self, callback: Callable[[Settings, Settings], None]) -> None:
        """Register a callback called with (old, new) after every change."""
        self._listeners.append(callback)

    def load(self) -> Settings:
        """Load persisted settings, replacing the in-memory copy."""
        old = self._settings
        try:
            self._settings = self.persistence.load()
        except Exception as e:
            print(f"[Settings] Failed to load settings: {e}")
            self._settings = Settings()
        self._notify(old)
        return self._settings

    def update(self, partial: Optional[Mapping[str, Any]] = None, **changes: Any) -> Settings:
        """
        Merge changes into the current settings and persist them.

        Args:
            partial: Mapping of field name to new value
            **changes: More field values (override ``partial``)

        Returns:
            The settings after the merge
        """
        values = dict(partial or {})
        values.update(changes)

        old = self._settings
        self._settings = old.merged(values)
        self._notify(old)
        self._writer.submit(self._settings)
        return self._settings

    def reset(self) -> Settings:
        """Restore every setting to its default."""
        return self.update(Settings().to_dict())

    def reconcile_autostart(self, actual: bool) -> None:
        """Adopt the OS autostart registration if it differs from the stored flag."""
        if self._settings.autostart != actual:
            self.update(autostart=actual)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for pending writes. Returns False on timeout."""
        return self._writer.flush(timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        """Finish pending writes and stop the writer."""
        self._writer.close(timeout)

    def _notify(self, old: Settings) -> None:
        if old == self._settings:
            return
        for listener in list(self._listeners):
            try:
                listener(old, self._settings)
            except Exception as e:
                print(f"[Settings] Listener error: {e}")

"""
Durable storage for settings.

Settings are written to a JSON file in the app data directory. Every save also
goes to a keyed fallback store in the temp directory, which load() uses when
the JSON file can't be read.
"""

import json
import os
import shelve
import threading
from pathlib import Path
from typing import Callable, Optional

from breakreminder.data.settings import Settings
from breakreminder.utils.constants import (
    FALLBACK_STORE_KEY,
    FALLBACK_STORE_PATH,
    SETTINGS_FILE,
)


class FallbackStore:
    """Keyed store backed by a shelve database."""

    def __init__(self, path: Path = FALLBACK_STORE_PATH, key: str = FALLBACK_STORE_KEY):
        self.path = path
        self.key = key

    def get(self) -> Optional[dict]:
        """Read the stored record, or None if missing or unreadable."""
        try:
            with shelve.open(str(self.path)) as db:
                data = db.get(self.key)
        except Exception as e:
            print(f"[Settings] Fallback store unavailable: {e}")
            return None
        return data if isinstance(data, dict) else None

    def put(self, data: dict) -> bool:
        """Store a record. Returns True if successful."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with shelve.open(str(self.path)) as db:
                db[self.key] = data
            return True
        except Exception as e:
            print(f"[Settings] Failed to save to fallback store: {e}")
            return False


class SettingsPersistence:
    """
    Loads and saves the settings document.

    Neither method raises: failures are reported and the caller gets a
    boolean result or the defaults.
    """

    def __init__(
        self,
        settings_file: Path = SETTINGS_FILE,
        fallback: Optional[FallbackStore] = None,
    ):
        """
        Initialize persistence.

        Args:
            settings_file: Primary JSON file
            fallback: Lower-durability keyed store
        """
        self.settings_file = settings_file
        self.fallback = fallback or FallbackStore()

    def save(self, settings: Settings) -> bool:
        """
        Save settings to the fallback store, then the settings file.

        Returns:
            True if the settings file was written, False otherwise
        """
        data = settings.to_dict()
        self.fallback.put(data)

        tmp_file = self.settings_file.with_suffix(".tmp")
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_file, self.settings_file)
            return True
        except OSError as e:
            print(f"[Settings] Failed to save settings file: {e}")
            return False

    def load(self) -> Settings:
        """
        Load settings merged over defaults.

        A missing settings file falls back to the keyed store; with neither
        present this is the first run, so the defaults are written out. An
        unreadable or corrupted file also falls back to the keyed store, and
        failing that to defaults.
        """
        if not self.settings_file.exists():
            data = self.fallback.get()
            if data is not None:
                print("[Settings] Settings file missing, using fallback")
                return Settings.from_dict(data)
            settings = Settings()
            self.save(settings)
            return settings

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if isinstance(data, dict):
                return Settings.from_dict(data)
            print("[Settings] Settings file is not a JSON object, using fallback")
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            print(f"[Settings] Error loading settings file: {e}")

        return Settings.from_dict(self.fallback.get())


class SettingsWriter:
    """
    Background writer with a single "last write wins" slot.

    submit() never blocks on I/O. If a write is queued when a newer one
    arrives, the queued one is dropped. A stalled write is not retried or
    timed out; the next submitted write simply follows it.
    """

    def __init__(self, save: Callable[[Settings], bool]):
        self._save = save
        self._cond = threading.Condition()
        self._pending: Optional[Settings] = None
        self._busy = False
        self._closed = False
        self._thread: Optional[threading.Thread] = None

    def submit(self, settings: Settings) -> None:
        """Queue settings to be written, replacing any queued write."""
        with self._cond:
            if self._closed:
                return
            self._pending = settings
            if self._thread is None:
                self._thread = threading.Thread(target=self._run, daemon=True)
                self._thread.start()
            self._cond.notify_all()

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until all submitted writes have finished.

        Returns:
            True if idle, False if the timeout expired first
        """
        with self._cond:
            return self._cond.wait_for(
                lambda: self._pending is None and not self._busy,
                timeout,
            )

    def close(self, timeout: Optional[float] = None) -> None:
        """Finish the queued write and stop the writer thread."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()
            thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def _run(self) -> None:
        """Writer thread main loop."""
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._pending is not None or self._closed)
                if self._pending is None:
                    return
                settings, self._pending = self._pending, None
                self._busy = True

            try:
                if not self._save(settings):
                    print("[Settings] Settings were not saved durably")
            except Exception as e:
                print(f"[Settings] Error saving settings: {e}")
            finally:
                with self._cond:
                    self._busy = False
                    self._cond.notify_all()

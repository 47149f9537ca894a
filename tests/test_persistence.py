"""Tests for settings persistence and the background writer."""

import json
import threading
from pathlib import Path

from breakreminder.data.persistence import FallbackStore, SettingsPersistence, SettingsWriter
from breakreminder.data.settings import Settings
from breakreminder.utils.constants import NotificationMode, Theme


def test_round_trip(persistence: SettingsPersistence) -> None:
    settings = Settings(
        interval_minutes=90,
        mode=NotificationMode.AUTO,
        dnd=True,
        always_on_top=True,
        theme=Theme.DARK,
        autostart=False,
        sound_enabled=False,
    )
    assert persistence.save(settings) is True
    assert persistence.load() == settings


def test_settings_file_is_json_document(persistence: SettingsPersistence) -> None:
    persistence.save(Settings(interval_minutes=40))
    data = json.loads(persistence.settings_file.read_text(encoding="utf-8"))
    assert data["interval_minutes"] == 40
    assert set(data) == set(Settings().to_dict())


def test_first_run_seeds_defaults(persistence: SettingsPersistence) -> None:
    assert persistence.load() == Settings()
    assert persistence.settings_file.exists()


def test_partial_file_merges_over_defaults(persistence: SettingsPersistence) -> None:
    persistence.settings_file.parent.mkdir(parents=True)
    persistence.settings_file.write_text(json.dumps({"mode": "auto"}), encoding="utf-8")
    assert persistence.load() == Settings(mode=NotificationMode.AUTO)


def test_corrupted_file_uses_fallback_store(persistence: SettingsPersistence) -> None:
    persistence.save(Settings(interval_minutes=75))
    persistence.settings_file.write_text("{not json", encoding="utf-8")
    assert persistence.load() == Settings(interval_minutes=75)


def test_non_object_file_uses_fallback_store(persistence: SettingsPersistence) -> None:
    persistence.save(Settings(dnd=True))
    persistence.settings_file.write_text("[1, 2, 3]", encoding="utf-8")
    assert persistence.load() == Settings(dnd=True)


def test_both_stores_failing_gives_defaults(tmp_path: Path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("garbage", encoding="utf-8")
    # A directory where the shelve file should be makes the fallback unusable
    blocked = tmp_path / "blocked"
    blocked.mkdir()
    persistence = SettingsPersistence(settings_file, FallbackStore(blocked, "key"))
    assert persistence.load() == Settings()


def test_save_failure_returns_false(tmp_path: Path) -> None:
    # The settings file's parent is a regular file, so it can't be created
    parent = tmp_path / "not-a-dir"
    parent.write_text("", encoding="utf-8")
    persistence = SettingsPersistence(parent / "settings.json", FallbackStore(tmp_path / "fb", "key"))
    assert persistence.save(Settings()) is False
    # The fallback copy was still written
    assert persistence.fallback.get() == Settings().to_dict()


def test_unwritable_settings_dir_keeps_fallback_settings(tmp_path: Path) -> None:
    parent = tmp_path / "not-a-dir"
    parent.write_text("", encoding="utf-8")
    persistence = SettingsPersistence(parent / "settings.json", FallbackStore(tmp_path / "fb", "key"))
    saved = Settings(interval_minutes=90, dnd=True)
    assert persistence.save(saved) is False

    assert persistence.load() == saved
    assert persistence.fallback.get() == saved.to_dict()


def test_missing_settings_file_uses_fallback_store(persistence: SettingsPersistence) -> None:
    persistence.save(Settings(mode=NotificationMode.AUTO))
    persistence.settings_file.unlink()
    assert persistence.load() == Settings(mode=NotificationMode.AUTO)
    # Not treated as a first run, so nothing was re-seeded
    assert not persistence.settings_file.exists()


# --- background writer ---


def test_writer_keeps_only_latest_pending_write() -> None:
    saved = []
    started = threading.Event()
    release = threading.Event()

    def slow_save(settings: Settings) -> bool:
        saved.append(settings)
        started.set()
        release.wait(5)
        return True

    writer = SettingsWriter(slow_save)
    first, second, third = Settings(interval_minutes=1), Settings(interval_minutes=2), Settings(interval_minutes=3)

    writer.submit(first)
    assert started.wait(5)
    writer.submit(second)
    writer.submit(third)
    release.set()

    assert writer.flush(timeout=5)
    writer.close(timeout=5)
    assert saved == [first, third]


def test_writer_survives_save_errors() -> None:
    saved = []

    def flaky_save(settings: Settings) -> bool:
        if not saved:
            saved.append(None)
            raise OSError("disk full")
        saved.append(settings)
        return True

    writer = SettingsWriter(flaky_save)
    writer.submit(Settings(dnd=True))
    assert writer.flush(timeout=5)
    writer.submit(Settings(dnd=False))
    assert writer.flush(timeout=5)
    writer.close(timeout=5)
    assert saved == [None, Settings(dnd=False)]


def test_writer_ignores_submits_after_close() -> None:
    saved = []
    writer = SettingsWriter(lambda s: saved.append(s) or True)
    writer.close(timeout=5)
    writer.submit(Settings())
    assert writer.flush(timeout=1)
    assert saved == []

"""Tests for the settings model and input validation."""

import pytest

from breakreminder.data.settings import Settings, clamp_interval, parse_interval
from breakreminder.utils.constants import NotificationMode, Theme


def test_defaults() -> None:
    settings = Settings()
    assert settings.interval_minutes == 60
    assert settings.mode == NotificationMode.CONFIRM
    assert settings.dnd is False
    assert settings.always_on_top is False
    assert settings.theme == Theme.SYSTEM
    assert settings.autostart is True
    assert settings.sound_enabled is True


# --- interval parsing ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (45, 45),
        ("90", 90),
        (" 120 ", 120),
        (12.7, 12),
        (5000, 999),
        (0, 60),
        (-5, 60),
        ("abc", 60),
        ("", 60),
        (None, 60),
        (True, 60),
    ],
)
def test_parse_interval(raw, expected: int) -> None:
    assert parse_interval(raw) == expected


def test_clamp_interval() -> None:
    assert clamp_interval(0) == 1
    assert clamp_interval(1) == 1
    assert clamp_interval(999) == 999
    assert clamp_interval(1000) == 999
    assert clamp_interval(float("nan")) == 60
    assert clamp_interval("abc") == 60


# --- from_dict ---


def test_from_dict_fills_missing_fields() -> None:
    settings = Settings.from_dict({"dnd": True, "interval_minutes": 40})
    assert settings == Settings(dnd=True, interval_minutes=40)


def test_from_dict_replaces_invalid_fields_individually() -> None:
    settings = Settings.from_dict({
        "interval_minutes": "forever",
        "mode": "loud",
        "theme": "neon",
        "dnd": "yes",
        "sound_enabled": False,
    })
    assert settings == Settings(sound_enabled=False)


def test_from_dict_ignores_unknown_keys() -> None:
    settings = Settings.from_dict({"volume": 11, "mode": "auto"})
    assert settings == Settings(mode=NotificationMode.AUTO)


@pytest.mark.parametrize("data", [None, [], "settings", 42])
def test_from_dict_non_mapping_gives_defaults(data) -> None:
    assert Settings.from_dict(data) == Settings()


# --- merged ---


PRIORS = [
    Settings(),
    Settings(interval_minutes=25, mode=NotificationMode.AUTO, theme=Theme.DARK),
    Settings(dnd=True, always_on_top=True, autostart=False, sound_enabled=False),
]


@pytest.mark.parametrize("prior", PRIORS)
def test_merging_dnd_leaves_other_fields(prior: Settings) -> None:
    updated = prior.merged({"dnd": True})
    assert updated.dnd is True
    for name, value in prior.to_dict().items():
        if name != "dnd":
            assert getattr(updated, name) == value


def test_merged_skips_none_values() -> None:
    prior = Settings(interval_minutes=30)
    assert prior.merged({"interval_minutes": None}) == prior


def test_merged_does_not_modify_original() -> None:
    prior = Settings()
    prior.merged({"theme": Theme.LIGHT})
    assert prior.theme == Theme.SYSTEM

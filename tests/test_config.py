"""Tests for preference storage and XDG paths."""

from __future__ import annotations

import json
from pathlib import Path

from radiofav.core import paths
from radiofav.core.config import JsonPreferences, MemoryPreferences, prefs_path


def test_paths_follow_xdg(tmp_path: Path) -> None:
    assert paths.data_dir() == tmp_path / "data" / "radiofav"
    assert paths.config_dir() == tmp_path / "config" / "radiofav"
    assert paths.favorites_dir() == tmp_path / "data" / "radiofav" / "favorites"
    assert prefs_path() == tmp_path / "config" / "radiofav" / "prefs.json"


def test_paths_fall_back_to_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("XDG_DATA_HOME")
    monkeypatch.delenv("XDG_CONFIG_HOME")
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    assert paths.data_dir() == tmp_path / "home" / ".local" / "share" / "radiofav"
    assert paths.config_dir() == tmp_path / "home" / ".config" / "radiofav"


def test_memory_preferences() -> None:
    prefs = MemoryPreferences({"a": 1})
    assert prefs.get("a") == 1
    assert prefs.get("missing", "dflt") == "dflt"
    prefs.set("a", 2)
    assert prefs.get("a") == 2


def test_json_preferences_persist_between_instances(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "prefs.json"
    JsonPreferences(path).set("favorites_list_current", "rock")

    assert JsonPreferences(path).get("favorites_list_current") == "rock"
    assert json.loads(path.read_text()) == {"favorites_list_current": "rock"}


def test_json_preferences_keep_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"volume": 7}))

    JsonPreferences(path).set("favorites_list_current", "x")

    assert json.loads(path.read_text()) == {"volume": 7, "favorites_list_current": "x"}


def test_json_preferences_missing_or_corrupt_read_default(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    assert JsonPreferences(path).get("k", "d") == "d"

    path.write_text("{oops")
    assert JsonPreferences(path).get("k", "d") == "d"

    path.write_text("[1, 2]")
    assert JsonPreferences(path).get("k", "d") == "d"


def test_json_preferences_default_location() -> None:
    prefs = JsonPreferences()
    prefs.set("k", "v")
    assert prefs_path().is_file()

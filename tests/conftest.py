from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from radiofav.core.config import MemoryPreferences
from radiofav.core.favorites import FavoriteListStore
from radiofav.core.station import FavoriteStation


def read_items(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))["items"]


def sample_stations() -> list[FavoriteStation]:
    return [
        FavoriteStation.create(101700, "Radio Record"),
        FavoriteStation.create(88300, "Jazz"),
        FavoriteStation.create(104200, "", color="#ff0000"),
    ]


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def prefs() -> MemoryPreferences:
    return MemoryPreferences()


@pytest.fixture
def fav_dir(tmp_path) -> Path:
    return tmp_path / "favorites"


@pytest.fixture
def store(prefs, fav_dir) -> FavoriteListStore:
    return FavoriteListStore(prefs, fav_dir)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("radiofav")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

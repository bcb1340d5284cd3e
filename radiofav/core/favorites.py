from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import List

from radiofav.core import paths
from radiofav.core.config import PreferenceStore
from radiofav.core.errors import InvalidListName, ListAlreadyExists, ListNotFound
from radiofav.core.station import FavoriteStation

logger = logging.getLogger(__name__)

KEY_CURRENT_LIST = "favorites_list_current"
KEY_ITEMS = "items"
DEFAULT_NAME = "default"
JSON_EXT = ".json"

_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


# ------------------------------------------------------------
# File format
# ------------------------------------------------------------

def _empty_document() -> dict:
    return {KEY_ITEMS: []}


def decode_stations(text: str) -> List[FavoriteStation]:
    """
    Parse a list file body.

    Anything that is not {"items": [...]} decodes to an empty list; this is
    the recovery path for truncated or hand-mangled files. Non-object items
    are dropped.
    """
    try:
        doc = json.loads(text)
    except (ValueError, RecursionError):
        logger.warning("list file is not valid JSON, treating as empty")
        return []

    if not isinstance(doc, dict) or not isinstance(doc.get(KEY_ITEMS), list):
        logger.warning("list file has no '%s' array, treating as empty", KEY_ITEMS)
        return []

    stations: List[FavoriteStation] = []
    for i, item in enumerate(doc[KEY_ITEMS]):
        if not isinstance(item, dict):
            logger.warning("skipping item %d: expected object, got %s", i, type(item).__name__)
            continue
        stations.append(FavoriteStation.from_json(item))
    return stations


def encode_stations(stations: List[FavoriteStation]) -> str:
    return json.dumps({KEY_ITEMS: [st.to_json() for st in stations]}, indent=2)


# ------------------------------------------------------------
# Store
# ------------------------------------------------------------

class FavoriteListStore:
    """
    Named favorite lists, one JSON file each, plus a pointer to the
    current one kept in `prefs`.

    Stations of the current list are cached in memory after the first
    access. Edits go to that cache; call save() to flush them.
    """

    def __init__(self, prefs: PreferenceStore, directory: Path | None = None):
        self.prefs = prefs
        self.directory = Path(directory) if directory is not None else paths.favorites_dir()
        self._stations: List[FavoriteStation] | None = None
        self._ensure_default()

    # ---------------- paths ----------------

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{JSON_EXT}"

    def current_path(self) -> Path:
        return self._path(self.get_current_list_name())

    def _ensure_default(self):
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(DEFAULT_NAME)
        if not path.exists():
            logger.debug("creating %s", path)
            path.write_text(json.dumps(_empty_document()), encoding="utf-8")

    # ---------------- lists ----------------

    def list_names(self) -> List[str]:
        return sorted(
            p.name[: -len(JSON_EXT)]
            for p in self.directory.iterdir()
            if p.is_file() and p.name.endswith(JSON_EXT) and len(p.name) > len(JSON_EXT)
        )

    def get_current_list_name(self) -> str:
        name = self.prefs.get(KEY_CURRENT_LIST, DEFAULT_NAME)
        if not self.is_valid_name(name):
            if name:
                logger.warning("ignoring invalid current list name %r", name)
            return DEFAULT_NAME
        return name

    def set_current_list_name(self, name: str) -> None:
        path = self._path(name)
        if not self.is_valid_name(name) or not path.is_file():
            raise ListNotFound(name, path)

        self.prefs.set(KEY_CURRENT_LIST, name)
        logger.info("current favorites list: %s", name)
        self.reload()

    @staticmethod
    def is_valid_name(name) -> bool:
        return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None

    def exists(self, name: str) -> bool:
        return self._path(name).exists()

    def add_list(self, name: str) -> None:
        if not self.is_valid_name(name):
            raise InvalidListName(name)

        if self.exists(name):
            raise ListAlreadyExists(name)

        path = self._path(name)
        try:
            path.write_text(json.dumps(_empty_document()), encoding="utf-8")
        except OSError:
            logger.exception("could not create list %s", path)
            return
        logger.info("created favorites list %s", name)

    def remove_list(self, name: str) -> bool:
        if name == DEFAULT_NAME or not self.is_valid_name(name):
            return False

        if self.get_current_list_name() == name:
            try:
                self.set_current_list_name(DEFAULT_NAME)
            except ListNotFound:
                logger.exception("default list missing while removing %s", name)

        path = self._path(name)
        try:
            path.unlink()
        except OSError as e:
            logger.debug("remove %s failed: %s", path, e)
            return False

        logger.info("removed favorites list %s", name)
        return True

    # ---------------- stations ----------------

    def get_stations(self) -> List[FavoriteStation]:
        if self._stations is None:
            self.reload()
        return self._stations

    def reload(self) -> None:
        path = self.current_path()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("cannot read %s (%s), treating as empty", path, e)
            self._stations = []
            return

        self._stations = decode_stations(text)
        logger.debug("loaded %d station(s) from %s", len(self._stations), path)

    def save(self) -> bool:
        path = self.current_path()
        try:
            path.write_text(encode_stations(self.get_stations()), encoding="utf-8")
        except (OSError, TypeError, ValueError):
            logger.exception("could not write %s", path)
            return False
        return True

    def add_station(self, station: FavoriteStation) -> None:
        self.get_stations().append(station)

    def remove_station(self, index: int) -> FavoriteStation:
        return self.get_stations().pop(index)

    def move_station(self, src: int, dst: int) -> None:
        stations = self.get_stations()
        if not (0 <= src < len(stations)) or not (0 <= dst < len(stations)):
            raise IndexError(f"move {src} -> {dst} out of range (0..{len(stations) - 1})")
        stations.insert(dst, stations.pop(src))

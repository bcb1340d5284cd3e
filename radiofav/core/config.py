from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from radiofav.core import paths

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryPreferences:
    """Process-local preferences, nothing touches disk."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonPreferences:
    """
    Key-value preferences kept in a single JSON object on disk.

    The file is re-read on every get() so several processes (CLI, TUI)
    see each other's changes. A missing or corrupt file reads as empty.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or prefs_path()

    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("unreadable preferences at %s, using defaults", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def prefs_path() -> Path:
    return paths.config_dir() / "prefs.json"

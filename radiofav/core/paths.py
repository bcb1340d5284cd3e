from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "radiofav"


def data_dir() -> Path:
    base = os.environ.get("XDG_DATA_HOME")
    if not base:
        base = str(Path.home() / ".local" / "share")
    return Path(base) / APP_NAME


def config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    if not base:
        base = str(Path.home() / ".config")
    return Path(base) / APP_NAME


def favorites_dir() -> Path:
    """
    Directory holding one <name>.json file per favorites list.
    """
    return data_dir() / "favorites"

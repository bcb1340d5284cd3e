from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_NAME = "invalid_name"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


class FavoriteListError(Exception):
    """Base for list management failures. `kind` tells callers which one."""

    kind: ErrorKind

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class InvalidListName(FavoriteListError, ValueError):
    kind = ErrorKind.INVALID_NAME

    def __init__(self, name: str):
        super().__init__(
            name,
            f"Invalid list name: '{name}'. Use letters, digits, '_' or '-'.",
        )


class ListAlreadyExists(FavoriteListError, FileExistsError):
    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, name: str):
        super().__init__(name, f"List with this name already exists: '{name}'")


class ListNotFound(FavoriteListError, LookupError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str, path=None):
        msg = f"No list named '{name}'"
        if path is not None:
            msg += f" (expected {path})"
        super().__init__(name, msg)
        self.path = path

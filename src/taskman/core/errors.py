# src/taskman/core/errors.py

from __future__ import annotations

from enum import StrEnum


class TaskErrorKind(StrEnum):
    """Closed set of domain failures shared by storage, service and console."""

    NOT_FOUND = "not_found"
    EMPTY_COLLECTION = "empty_collection"
    INVALID_DATA = "invalid_data"
    STORAGE_ERROR = "storage_error"  # reserved for non-memory backends

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[TaskErrorKind, str] = {
    TaskErrorKind.NOT_FOUND: "Task not found",
    TaskErrorKind.EMPTY_COLLECTION: "Task list is empty",
    TaskErrorKind.INVALID_DATA: "Invalid data",
    TaskErrorKind.STORAGE_ERROR: "Storage error",
}


class TaskError(Exception):
    """
    Domain error.

    `reason` is an optional human readable explanation recorded by whoever raised
    the error (e.g. "Task title cannot be empty"). When absent, the kind's
    generic description is used.
    """

    def __init__(self, kind: TaskErrorKind, reason: str | None = None) -> None:
        super().__init__(reason or kind.description)
        self.kind = kind
        self.reason = reason

    @property
    def message(self) -> str:
        return self.reason or self.kind.description

    def __repr__(self) -> str:
        return f"TaskError({self.kind.value!r}, reason={self.reason!r})"

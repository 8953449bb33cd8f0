# src/taskman/storage/queries.py

"""Lookups derived from Storage.fetch_all (so they inherit its EMPTY_COLLECTION policy)."""

from __future__ import annotations

import uuid
from collections.abc import Callable

from ..core.errors import TaskError, TaskErrorKind
from ..core.ports import Storage, T


def find_where(storage: Storage[T], predicate: Callable[[T], bool]) -> T:
    for item in storage.fetch_all():
        if predicate(item):
            return item
    raise TaskError(TaskErrorKind.NOT_FOUND)


def find_by_id(storage: Storage[T], item_id: uuid.UUID) -> T:
    return find_where(storage, lambda item: item.id == item_id)

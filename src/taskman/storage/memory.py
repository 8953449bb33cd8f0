# src/taskman/storage/memory.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Generic

from ..core.errors import TaskError, TaskErrorKind
from ..core.ports import T

logger = logging.getLogger(__name__)


def ensure_not_empty(items: Sequence[T]) -> None:
    """The single place where "empty collection" is treated as a failure."""
    if not items:
        raise TaskError(TaskErrorKind.EMPTY_COLLECTION)


class InMemoryStorage(Generic[T]):
    """
    List-backed store.

    Items keep insertion order; ids are unique by construction (uuid4), so add()
    performs no uniqueness check.
    """

    def __init__(self, items: Sequence[T] | None = None) -> None:
        self._items: list[T] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    # ---- helpers ----

    def _index_of(self, item_id: uuid.UUID) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise TaskError(TaskErrorKind.NOT_FOUND)

    # ---- Storage API ----

    def add(self, item: T) -> None:
        self._items.append(item)
        logger.debug("InMemoryStorage add id=%s total=%d", item.id, len(self._items))

    def remove(self, item_id: uuid.UUID) -> None:
        idx = self._index_of(item_id)
        del self._items[idx]
        logger.debug("InMemoryStorage remove id=%s total=%d", item_id, len(self._items))

    def replace(self, item: T) -> None:
        idx = self._index_of(item.id)
        self._items[idx] = item

    def fetch_all(self) -> list[T]:
        ensure_not_empty(self._items)
        return list(self._items)

    def fetch_all_or_empty(self) -> list[T]:
        return list(self._items)

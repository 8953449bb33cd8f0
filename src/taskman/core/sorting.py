# src/taskman/core/sorting.py

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from .errors import TaskError, TaskErrorKind
from .models import Task


class TaskSortType(StrEnum):
    """
    Orderings offered by the sort menu.

    Value is the menu choice the user types.
    """

    BY_TITLE = "1"
    BY_STATUS = "2"
    BY_CREATION = "3"

    @classmethod
    def from_choice(cls, raw: str | None) -> TaskSortType:
        try:
            return cls((raw or "").strip())
        except ValueError:
            raise TaskError(TaskErrorKind.INVALID_DATA, "Invalid sort option") from None

    @property
    def label(self) -> str:
        return _LABELS[self]

    def sort(self, tasks: Iterable[Task]) -> list[Task]:
        items = list(tasks)
        if self is TaskSortType.BY_TITLE:
            return sorted(items, key=lambda t: t.title)
        if self is TaskSortType.BY_STATUS:
            # sorted() is stable: ties keep storage order.
            return sorted(items, key=lambda t: t.completed)
        return items


_LABELS: dict[TaskSortType, str] = {
    TaskSortType.BY_TITLE: "By title",
    TaskSortType.BY_STATUS: "By status (open first)",
    TaskSortType.BY_CREATION: "By creation order",
}

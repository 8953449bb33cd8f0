# src/taskman/core/service.py

from __future__ import annotations

import logging
import uuid

from ..storage.queries import find_by_id, find_where
from .errors import TaskError, TaskErrorKind
from .models import ServiceStatus, Task
from .ports import Storage
from .sorting import TaskSortType

_logger = logging.getLogger(__name__)


class TaskService:
    """
    Validation + sequencing of storage calls for tasks.

    Status:
    - every call starts as LOADING and ends as LOADED or ERROR(reason);
    - `status` only reflects the most recent call. Callers that need the reason
      for a failure should read it from the raised TaskError instead.

    Storage errors propagate unchanged.
    """

    def __init__(
        self,
        storage: Storage[Task],
        *,
        reorder_on_complete: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._storage = storage
        self._reorder_on_complete = reorder_on_complete
        self._log = logger or _logger
        self._status = ServiceStatus.idle()

    @property
    def status(self) -> ServiceStatus:
        """Last outcome, for display and diagnostics (the console logs it after each command)."""
        return self._status

    def _fail(self, kind: TaskErrorKind, reason: str) -> TaskError:
        self._status = ServiceStatus.error(reason)
        return TaskError(kind, reason)

    # ---- operations ----

    def add_task(self, title: str) -> Task:
        self._status = ServiceStatus.loading()

        if not title.strip():
            raise self._fail(TaskErrorKind.INVALID_DATA, "Task title cannot be empty")

        task = Task.create(title)
        self._storage.add(task)

        self._status = ServiceStatus.loaded()
        self._log.info("Task added: %s", title)
        return task

    def get_all_tasks(self) -> list[Task]:
        self._status = ServiceStatus.loading()
        tasks = self._storage.fetch_all()
        self._status = ServiceStatus.loaded()
        return tasks

    def complete_task(self, task_id: uuid.UUID) -> Task:
        self._status = ServiceStatus.loading()

        task = find_by_id(self._storage, task_id)
        if task.completed:
            raise self._fail(TaskErrorKind.INVALID_DATA, "Task is already completed")

        updated = task.complete()
        if self._reorder_on_complete:
            # remove + re-add: the task moves to the end of the list
            self._storage.remove(task_id)
            self._storage.add(updated)
        else:
            self._storage.replace(updated)

        self._status = ServiceStatus.loaded()
        self._log.info("Task completed: %s", updated.title)
        return updated

    def remove_task(self, task_id: uuid.UUID) -> None:
        self._status = ServiceStatus.loading()
        self._storage.remove(task_id)
        self._status = ServiceStatus.loaded()
        self._log.info("Task removed: %s", task_id)

    def get_tasks_sorted(self, sort_type: TaskSortType) -> list[Task]:
        return sort_type.sort(self.get_all_tasks())

    def find_by_prefix(self, prefix: str) -> Task:
        """First task (storage order) whose id starts with `prefix`, case-insensitive."""
        self._status = ServiceStatus.loading()

        if not prefix.strip():
            raise self._fail(TaskErrorKind.INVALID_DATA, "Task ID cannot be empty")

        task = find_where(self._storage, lambda t: t.matches_prefix(prefix))
        self._status = ServiceStatus.loaded()
        return task

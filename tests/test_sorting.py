# tests/test_sorting.py

from __future__ import annotations

import pytest

from taskman.core.errors import TaskError, TaskErrorKind
from taskman.core.models import Task
from taskman.core.sorting import TaskSortType


def _task(title: str, completed: bool = False) -> Task:
    return Task(title=title, completed=completed)


def test_sort_by_title() -> None:
    tasks = [_task("banana"), _task("apple")]
    assert [t.title for t in TaskSortType.BY_TITLE.sort(tasks)] == ["apple", "banana"]


def test_sort_by_status_puts_open_first_and_is_stable() -> None:
    tasks = [_task("a", True), _task("b"), _task("c", True), _task("d")]

    result = TaskSortType.BY_STATUS.sort(tasks)

    assert [t.title for t in result] == ["b", "d", "a", "c"]


def test_sort_by_creation_is_identity() -> None:
    tasks = [_task("z"), _task("a", True), _task("m")]
    result = TaskSortType.BY_CREATION.sort(tasks)

    assert result == tasks
    assert result is not tasks


@pytest.mark.parametrize(
    ("choice", "expected"),
    [("1", TaskSortType.BY_TITLE), (" 2 ", TaskSortType.BY_STATUS), ("3", TaskSortType.BY_CREATION)],
)
def test_from_choice(choice: str, expected: TaskSortType) -> None:
    assert TaskSortType.from_choice(choice) is expected


@pytest.mark.parametrize("choice", ["", "0", "4", "title", None])
def test_from_choice_rejects_other_input(choice: str | None) -> None:
    with pytest.raises(TaskError) as exc:
        TaskSortType.from_choice(choice)
    assert exc.value.kind is TaskErrorKind.INVALID_DATA

# src/taskman/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Final

from ..core.errors import TaskError, TaskErrorKind
from ..core.models import Task
from ..core.sorting import TaskSortType
from ..core.state import AppState
from .render import render_help, render_task_list

CommandHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)


class UserCommand(StrEnum):
    ADD = "add"
    LIST = "list"
    COMPLETE = "complete"
    REMOVE = "remove"
    SORT = "sort"
    HELP = "help"
    EXIT = "exit"
    UNKNOWN = "unknown"


# Exact matches only: a menu number, the English word, the Russian word.
_COMMAND_TABLE: Final[dict[str, UserCommand]] = {
    "1": UserCommand.ADD,
    "add": UserCommand.ADD,
    "добавить": UserCommand.ADD,
    "2": UserCommand.LIST,
    "list": UserCommand.LIST,
    "список": UserCommand.LIST,
    "3": UserCommand.COMPLETE,
    "complete": UserCommand.COMPLETE,
    "выполнить": UserCommand.COMPLETE,
    "4": UserCommand.REMOVE,
    "remove": UserCommand.REMOVE,
    "удалить": UserCommand.REMOVE,
    "5": UserCommand.SORT,
    "sort": UserCommand.SORT,
    "сортировка": UserCommand.SORT,
    "help": UserCommand.HELP,
    "помощь": UserCommand.HELP,
    "exit": UserCommand.EXIT,
    "quit": UserCommand.EXIT,
    "выход": UserCommand.EXIT,
}


def parse_command(raw: str | None) -> UserCommand:
    if raw is None:
        return UserCommand.UNKNOWN
    return _COMMAND_TABLE.get(raw.strip().casefold(), UserCommand.UNKNOWN)


class CommandRegistry:
    """Maps parsed commands to handlers and keeps their help lines (in registration order)."""

    def __init__(self) -> None:
        self._handlers: dict[UserCommand, CommandHandler] = {}
        self._help: list[tuple[str, str]] = []

    def register(
        self,
        command: UserCommand,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
    ) -> None:
        self._handlers[command] = handler
        self._help.append((usage or command.value, help_text))

    def handle(self, state: AppState, command: UserCommand) -> bool:
        """
        Run the handler for `command`.
        Returns False if nothing is registered for it (caller reports "unknown").
        Handler exceptions propagate to the caller.
        """
        handler = self._handlers.get(command)
        if handler is None:
            return False
        handler(state)
        return True

    def build_help(self) -> str:
        return render_help(self._help)


registry = CommandRegistry()


# ---- helpers ----

def _show_tasks(state: AppState) -> list[Task]:
    tasks = state.service.get_all_tasks()
    state.emit(
        render_task_list(
            tasks,
            id_prefix_len=state.settings.id_prefix_len,
            use_emoji=state.settings.use_emoji,
        )
    )
    return tasks


def _pick_task(state: AppState) -> Task:
    """List tasks, ask for an id prefix, resolve it (first match in list order)."""
    _show_tasks(state)
    prefix = state.read_line("\nTask ID (first characters): ")
    if not prefix:
        raise TaskError(TaskErrorKind.INVALID_DATA)
    return state.service.find_by_prefix(prefix)


# ---- handlers ----

def cmd_add(state: AppState) -> None:
    title = state.read_line("\nTask title: ")
    if title is None:
        raise TaskError(TaskErrorKind.INVALID_DATA)

    state.service.add_task(title)
    state.emit("Task added.")


def cmd_list(state: AppState) -> None:
    _show_tasks(state)


def cmd_complete(state: AppState) -> None:
    task = _pick_task(state)
    state.service.complete_task(task.id)
    state.emit("Task marked as completed.")


def cmd_remove(state: AppState) -> None:
    task = _pick_task(state)
    state.service.remove_task(task.id)
    state.emit("Task removed.")


def cmd_sort(state: AppState) -> None:
    lines = ["", "Choose sort order:"]
    lines += [f"{opt.value}. {opt.label}" for opt in TaskSortType]
    state.emit("\n".join(lines))

    sort_type = TaskSortType.from_choice(state.read_line("\nOption number: "))
    tasks = state.service.get_tasks_sorted(sort_type)
    logger.debug("Sorted %d tasks (%s)", len(tasks), sort_type.name)

    state.emit(
        render_task_list(
            tasks,
            title="Sorted tasks:",
            show_ids=False,
            use_emoji=state.settings.use_emoji,
        )
    )


def cmd_help(state: AppState) -> None:
    state.emit(registry.build_help())


def cmd_exit(state: AppState) -> None:
    state.stop()


registry.register(UserCommand.ADD, cmd_add, "Add a new task", usage="1 / add")
registry.register(UserCommand.LIST, cmd_list, "Show all tasks", usage="2 / list")
registry.register(
    UserCommand.COMPLETE, cmd_complete, "Mark a task as completed", usage="3 / complete"
)
registry.register(UserCommand.REMOVE, cmd_remove, "Remove a task", usage="4 / remove")
registry.register(UserCommand.SORT, cmd_sort, "Sort tasks", usage="5 / sort")
registry.register(UserCommand.HELP, cmd_help, "Show this help")
registry.register(UserCommand.EXIT, cmd_exit, "Quit the application")

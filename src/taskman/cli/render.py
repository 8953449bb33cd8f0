# src/taskman/cli/render.py

"""Plain-text rendering for the console (no colors, human readable only)."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.models import Task

SEPARATOR = "─" * 41


def status_glyph(task: Task, *, use_emoji: bool = True) -> str:
    if use_emoji:
        return "✅" if task.completed else "⭕️"
    return "[x]" if task.completed else "[ ]"


def format_task_line(index: int, task: Task, *, use_emoji: bool = True) -> str:
    return f"{index:2d}. {status_glyph(task, use_emoji=use_emoji)} {task.title}"


def render_task_list(
    tasks: Sequence[Task],
    *,
    title: str = "Tasks:",
    show_ids: bool = True,
    id_prefix_len: int = 8,
    use_emoji: bool = True,
) -> str:
    """
    Numbered list, one task per line.

    With show_ids, each task gets an "ID: <prefix>..." line under it and the
    block ends with a total count.
    """
    lines = ["", title, SEPARATOR]
    for i, task in enumerate(tasks, start=1):
        lines.append(format_task_line(i, task, use_emoji=use_emoji))
        if show_ids:
            lines.append(f"    ID: {task.short_id(id_prefix_len)}...")
    lines.append(SEPARATOR)
    if show_ids:
        lines.append(f"Total tasks: {len(tasks)}")
    return "\n".join(lines)


def render_help(entries: Sequence[tuple[str, str]]) -> str:
    width = max((len(usage) for usage, _ in entries), default=0)
    lines = ["", "Help:", SEPARATOR, "Available commands:"]
    for usage, text in entries:
        lines.append(f"  {usage.ljust(width)} - {text}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def render_menu() -> str:
    return "\n".join(
        [
            "",
            "--- Menu ---",
            "1. Add task",
            "2. Show all tasks",
            "3. Mark task as completed",
            "4. Remove task",
            "5. Sort tasks",
            "help - Help",
            "exit - Quit",
        ]
    )


def render_banner(app_name: str) -> str:
    inner = f"  {app_name}  "
    width = max(len(inner), 40)
    return "\n".join(["", "╔" + "═" * width + "╗", "║" + inner.ljust(width) + "║", "╚" + "═" * width + "╝"])

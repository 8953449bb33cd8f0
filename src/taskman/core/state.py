# src/taskman/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .service import TaskService

LineReader = Callable[[str], str | None]
# Prints a prompt and returns the entered line, or None on end of input.

Emitter = Callable[[str], None]


class LoopState(StrEnum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class AppState:
    """
    Runtime container passed to command handlers.

    Holds settings, the task service and the console I/O functions so handlers
    never touch stdin/stdout directly.
    """

    settings: Any
    service: TaskService
    read_line: LineReader
    emit: Emitter

    loop_state: LoopState = field(default=LoopState.RUNNING)

    @property
    def running(self) -> bool:
        return self.loop_state is LoopState.RUNNING

    def stop(self) -> None:
        self.loop_state = LoopState.STOPPED

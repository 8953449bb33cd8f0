# src/taskman/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the in-memory storage and the task service,
- binds console I/O into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import read_stdin_line
from ..core.models import Task
from ..core.service import TaskService
from ..core.state import AppState, Emitter, LineReader
from ..storage.memory import InMemoryStorage

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    read_line: LineReader | None = None,
    emit: Emitter | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and I/O are injectable for tests; defaults are get_settings(),
    input() and print().
    """
    if settings is None:
        settings = get_settings()

    storage: InMemoryStorage[Task] = InMemoryStorage()
    service = TaskService(storage, reorder_on_complete=settings.reorder_on_complete)

    logger.debug("State created (reorder_on_complete=%s).", settings.reorder_on_complete)
    return AppState(
        settings=settings,
        service=service,
        read_line=read_line or read_stdin_line,
        emit=emit or print,
    )

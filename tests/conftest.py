# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskman.core.models import Task
from taskman.core.service import TaskService
from taskman.core.state import AppState
from taskman.storage.memory import InMemoryStorage

from .fakes import CapturedOutput, ScriptedInput


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Task Manager",
        id_prefix_len=8,
        exit_on_eof=True,
        use_emoji=False,
        reorder_on_complete=False,
    )


@pytest.fixture()
def storage() -> InMemoryStorage[Task]:
    return InMemoryStorage()


@pytest.fixture()
def service(storage: InMemoryStorage[Task]) -> TaskService:
    return TaskService(storage)


@pytest.fixture()
def scripted_input() -> ScriptedInput:
    return ScriptedInput()


@pytest.fixture()
def output() -> CapturedOutput:
    return CapturedOutput()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    service: TaskService,
    scripted_input: ScriptedInput,
    output: CapturedOutput,
) -> AppState:
    """AppState wired to scripted stdin and captured stdout."""
    return AppState(
        settings=settings,
        service=service,
        read_line=scripted_input,
        emit=output,
    )

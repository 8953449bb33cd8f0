# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskman.cli.bootstrap import create_initial_state
from taskman.config import Settings
from taskman.core.state import LoopState

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_TO_FILE",
    "ID_PREFIX_LEN",
    "EXIT_ON_EOF",
    "USE_EMOJI",
    "REORDER_ON_COMPLETE",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(f"TASKMAN_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "Task Manager"
    assert s.log_level == "WARNING"
    assert s.log_dir == Path(".local/taskman")
    assert s.log_to_file is True
    assert s.id_prefix_len == 8
    assert s.exit_on_eof is True
    assert s.use_emoji is True
    assert s.reorder_on_complete is False


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASKMAN_APP_NAME", "Todo")
    clean_env.setenv("TASKMAN_LOG_LEVEL", "debug")
    clean_env.setenv("TASKMAN_LOG_DIR", str(tmp_path))
    clean_env.setenv("TASKMAN_ID_PREFIX_LEN", "4")
    clean_env.setenv("TASKMAN_EXIT_ON_EOF", "no")
    clean_env.setenv("TASKMAN_REORDER_ON_COMPLETE", "yes")

    s = Settings.from_env()

    assert s.app_name == "Todo"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.id_prefix_len == 4
    assert s.exit_on_eof is False
    assert s.reorder_on_complete is True


def test_bad_int_falls_back_to_default(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKMAN_ID_PREFIX_LEN", "many")
    assert Settings.from_env().id_prefix_len == 8

    clean_env.setenv("TASKMAN_ID_PREFIX_LEN", "0")
    assert Settings.from_env().id_prefix_len == 1


def test_bootstrap_wires_reorder_flag(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKMAN_REORDER_ON_COMPLETE", "1")
    state = create_initial_state(settings=Settings.from_env(), read_line=lambda p: None, emit=lambda t: None)

    a = state.service.add_task("a")
    state.service.add_task("b")
    state.service.complete_task(a.id)

    assert [t.title for t in state.service.get_all_tasks()] == ["b", "a"]
    assert state.loop_state is LoopState.RUNNING

# src/taskman/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every field has a default: the app runs with an empty environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMAN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Console ----
    id_prefix_len: int
    exit_on_eof: bool
    use_emoji: bool

    # ---- Service behaviour ----
    reorder_on_complete: bool

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            app_name=_env(_k("APP_NAME"), "Task Manager"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/taskman")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            id_prefix_len=max(1, _env_int(_k("ID_PREFIX_LEN"), 8)),
            exit_on_eof=_env_bool(_k("EXIT_ON_EOF"), True),
            use_emoji=_env_bool(_k("USE_EMOJI"), True),
            reorder_on_complete=_env_bool(_k("REORDER_ON_COMPLETE"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reads .env on first call, never overrides real env vars)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS

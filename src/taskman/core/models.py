# src/taskman/core/models.py

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class Task:
    """
    A unit of work.

    Notes:
    - frozen: `id` is assigned once, fields never change in place.
    - `completed` only moves False -> True, via complete() returning a new Task.
    - title validation is the service's job, not the entity's.
    """

    title: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    completed: bool = False

    @classmethod
    def create(cls, title: str) -> Task:
        return cls(title=title)

    def complete(self) -> Task:
        return dataclasses.replace(self, completed=True)

    def id_text(self) -> str:
        return str(self.id).lower()

    def short_id(self, length: int = 8) -> str:
        return self.id_text()[: max(1, length)]

    def matches_prefix(self, prefix: str) -> bool:
        return self.id_text().startswith(prefix.strip().casefold())


class StatusKind(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ServiceStatus:
    """Outcome of the most recent service call. `reason` is set only for ERROR."""

    kind: StatusKind
    reason: str | None = None

    @classmethod
    def idle(cls) -> ServiceStatus:
        return cls(StatusKind.IDLE)

    @classmethod
    def loading(cls) -> ServiceStatus:
        return cls(StatusKind.LOADING)

    @classmethod
    def loaded(cls) -> ServiceStatus:
        return cls(StatusKind.LOADED)

    @classmethod
    def error(cls, reason: str) -> ServiceStatus:
        return cls(StatusKind.ERROR, reason)

    @property
    def is_error(self) -> bool:
        return self.kind is StatusKind.ERROR

# src/taskman/core/ports.py

"""
Ports (interfaces) used by the core.

The service depends on these Protocols instead of concrete stores, so storage
backends stay swappable and tests can plug in fakes.
"""

from __future__ import annotations

import uuid
from typing import Protocol, TypeVar


class Identifiable(Protocol):
    """Anything carrying a stable UUID."""

    @property
    def id(self) -> uuid.UUID: ...


T = TypeVar("T", bound=Identifiable)


class Storage(Protocol[T]):
    """
    Ordered collection of identifiable items.

    Failure modes (all raised as TaskError):
    - remove/replace of an unknown id -> NOT_FOUND
    - fetch_all on an empty collection -> EMPTY_COLLECTION
    """

    def add(self, item: T) -> None: ...
    def remove(self, item_id: uuid.UUID) -> None: ...
    def replace(self, item: T) -> None: ...
    def fetch_all(self) -> list[T]: ...
    def fetch_all_or_empty(self) -> list[T]: ...

# src/todo_store/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps the backing storage swappable and makes testing easier.
"""

from typing import Any, Protocol


class SlotProvider(Protocol):
    """
    Named slots of opaque bytes that survive process restarts.

    read() returns None when the slot was never written (or was removed).
    Failures surface as exceptions (OSError, sqlite3.Error, ...).
    """

    def read(self, key: str) -> bytes | None: ...
    def write(self, key: str, data: bytes) -> None: ...
    def remove(self, key: str) -> None: ...


class TodoRepo(Protocol):
    """What the call bridge needs from a store."""

    def get_all(self) -> list[Any]: ...
    def get_one(self, todo_id: int | None) -> Any: ...
    def upsert(
            self,
            *,
            todo_id: int | None = None,
            name: Any,
            due_at: Any,
            done: Any,
    ) -> Any: ...
    def delete(self, todo_id: int | None) -> list[Any]: ...
    def clear_all(self) -> list[Any]: ...
    def count(self) -> int: ...

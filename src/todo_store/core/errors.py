# src/todo_store/core/errors.py

"""
Error taxonomy shared by the store and the call bridge.

- InvalidArgument / NotFound: raised before any in-memory change.
- DecodeError: backing bytes unreadable; absorbed by hydration (seed fallback).
- PersistenceError: raised AFTER the in-memory change was applied. The change
  holds for this run but may not survive a restart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..todos.todo_models import TodoItem


class TodoStoreError(Exception):
    code = "INTERNAL"


class InvalidArgument(TodoStoreError, ValueError):
    code = "INVALID_ARGUMENT"


class NotFound(TodoStoreError, LookupError):
    code = "NOT_FOUND"

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"ToDo with id {todo_id} not found!")
        self.todo_id = todo_id


class DecodeError(TodoStoreError, ValueError):
    code = "DECODE_ERROR"


class PersistenceError(TodoStoreError):
    code = "PERSISTENCE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        todos: list[TodoItem],
        todo_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.todos = todos
        self.todo_id = todo_id

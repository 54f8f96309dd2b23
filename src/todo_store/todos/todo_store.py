# src/todo_store/todos/todo_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.errors import DecodeError, InvalidArgument, NotFound, PersistenceError
from ..core.ports import SlotProvider
from .todo_codec import decode_all, encode_all
from .todo_models import TodoItem, default_seed, is_timestamp, is_valid_id

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "ToDoItems"


@dataclass(frozen=True, slots=True)
class UpsertResult:
    id: int
    todos: list[TodoItem]


class TodoStore:
    """
    In-memory ToDo list backed by a single storage slot.

    Lifecycle:
    - nothing is read until the first operation (lazy hydration)
    - hydration reads the slot once; absent or undecodable data -> seed list
    - every mutation is written through to the slot before returning

    Persistence policy:
    - a failed write raises PersistenceError but the in-memory change stays
      applied (no rollback); the slot is stale until the next successful write

    Thread-safety:
    - operations are serialized by an internal lock; the store still assumes a
      single process owns the slot
    """

    def __init__(
        self,
        provider: SlotProvider,
        *,
        slot_key: str = DEFAULT_SLOT_KEY,
        seed: Callable[[], dict[int, TodoItem]] = default_seed,
    ) -> None:
        self._provider = provider
        self._slot_key = slot_key
        self._seed = seed
        self._items: dict[int, TodoItem] | None = None
        self._lock = threading.RLock()

    @property
    def is_hydrated(self) -> bool:
        return self._items is not None

    # ---- hydration ----

    def _hydrated(self) -> dict[int, TodoItem]:
        if self._items is None:
            self._items = self._load()
        return self._items

    def _load(self) -> dict[int, TodoItem]:
        try:
            data = self._provider.read(self._slot_key)
        except Exception:
            logger.exception("Failed to read slot %s; starting from seed data.", self._slot_key)
            return self._seed()

        if data is None:
            logger.info("No data found for slot %s; starting from seed data.", self._slot_key)
            return self._seed()

        try:
            items = decode_all(data)
        except DecodeError as e:
            logger.warning(
                "Failed to decode slot %s (%s); starting from seed data.", self._slot_key, e
            )
            return self._seed()

        logger.info("Loaded %d todos from slot %s", len(items), self._slot_key)
        return items

    # ---- helpers ----

    @staticmethod
    def _sorted(items: dict[int, TodoItem]) -> list[TodoItem]:
        return [items[k] for k in sorted(items)]

    @staticmethod
    def _require_id(todo_id: Any) -> int:
        if todo_id is None:
            raise InvalidArgument("Malformed request, missing option id")
        if not is_valid_id(todo_id):
            raise InvalidArgument(f"Malformed request, invalid id: {todo_id!r}")
        return todo_id

    def _persist(self, items: dict[int, TodoItem], *, todo_id: int | None = None) -> None:
        try:
            self._provider.write(self._slot_key, encode_all(items))
        except Exception as e:
            logger.exception("Failed to persist %d todos to slot %s", len(items), self._slot_key)
            raise PersistenceError(
                f"Change applied but not saved: {e}",
                todos=self._sorted(items),
                todo_id=todo_id,
            ) from e

    # ---- public API ----

    def count(self) -> int:
        with self._lock:
            return len(self._hydrated())

    def get_all(self) -> list[TodoItem]:
        with self._lock:
            return self._sorted(self._hydrated())

    def get_one(self, todo_id: int | None) -> TodoItem:
        with self._lock:
            items = self._hydrated()
            key = self._require_id(todo_id)
            item = items.get(key)
            if item is None:
                raise NotFound(key)
            return item

    def generate_id(self) -> int:
        """
        Next free id above the current maximum.

        The scan loop only matters if ids above the maximum can ever be
        reserved elsewhere; with a plain dict the first candidate is free.
        """
        with self._lock:
            items = self._hydrated()
            candidate = max(items, default=0) + 1
            while candidate in items:
                candidate += 1
            return candidate

    def upsert(
        self,
        *,
        todo_id: int | None = None,
        name: Any,
        due_at: Any,
        done: Any,
    ) -> UpsertResult:
        """
        Insert or wholesale-replace one item.

        Without todo_id a fresh id is generated. All fields are validated
        before anything changes.
        """
        with self._lock:
            items = self._hydrated()

            if not isinstance(name, str) or not name.strip():
                raise InvalidArgument("Malformed request, can't upsert: name is required")
            if not is_timestamp(due_at):
                raise InvalidArgument("Malformed request, can't upsert: dueAt must be a number")
            if not isinstance(done, bool):
                raise InvalidArgument("Malformed request, can't upsert: done must be a boolean")
            if todo_id is not None and not is_valid_id(todo_id):
                raise InvalidArgument(f"Malformed request, can't upsert: invalid id {todo_id!r}")

            key = todo_id if todo_id is not None else self.generate_id()
            replaced = key in items

            items[key] = TodoItem(id=key, name=name, due_at=float(due_at), done=done)
            logger.debug("Todo %s id=%s done=%s", "replaced" if replaced else "added", key, done)

            self._persist(items, todo_id=key)
            return UpsertResult(id=key, todos=self._sorted(items))

    def delete(self, todo_id: int | None) -> list[TodoItem]:
        with self._lock:
            items = self._hydrated()
            key = self._require_id(todo_id)
            if key not in items:
                raise NotFound(key)

            del items[key]
            logger.debug("Todo deleted id=%s remaining=%d", key, len(items))

            self._persist(items, todo_id=key)
            return self._sorted(items)

    def clear_all(self) -> list[TodoItem]:
        with self._lock:
            items = self._hydrated()
            removed = len(items)
            items.clear()
            logger.info("All todos cleared (removed=%d)", removed)

            self._persist(items)
            return []

# src/todo_store/todos/todo_api.py

"""
Host call bridge.

Maps named calls with loosely-typed options ({"id": 3, "name": "..."}) onto
TodoStore operations and turns every outcome into a CallResult. Nothing
escapes as an exception: store errors become rejections with a stable code.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..core.errors import PersistenceError, TodoStoreError
from ..core.ports import TodoRepo
from .todo_codec import DUE_AT_KEYS
from .todo_models import TodoItem

logger = logging.getLogger(__name__)

Options = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class CallResult:
    ok: bool
    data: dict[str, Any] | None = None
    error: str | None = None
    code: str | None = None

    @classmethod
    def resolve(cls, data: dict[str, Any]) -> CallResult:
        return cls(ok=True, data=data)

    @classmethod
    def reject(cls, message: str, code: str, data: dict[str, Any] | None = None) -> CallResult:
        return cls(ok=False, data=data, error=message, code=code)


# ---- typed option getters (wrong type reads as missing) ----


def get_int(options: Options, key: str) -> int | None:
    v = options.get(key)
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return None


def get_float(options: Options, key: str) -> float | None:
    v = options.get(key)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    try:
        f = float(v)
    except OverflowError:
        return None
    return f if math.isfinite(f) else None


def get_str(options: Options, key: str) -> str | None:
    v = options.get(key)
    return v if isinstance(v, str) else None


def get_bool(options: Options, key: str) -> bool | None:
    v = options.get(key)
    return v if isinstance(v, bool) else None


def _todos(items: list[TodoItem]) -> list[dict[str, Any]]:
    return [t.to_caller_form() for t in items]


class TodoPlugin:
    """Dispatches getAll / getOne / upsert / delete / clearAll."""

    def __init__(self, store: TodoRepo) -> None:
        self._store = store
        self._methods: dict[str, Callable[[Options], dict[str, Any]]] = {
            "getAll": self._get_all,
            "getOne": self._get_one,
            "upsert": self._upsert,
            "delete": self._delete,
            "clearAll": self._clear_all,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    def call(self, method: str, options: Options | None = None) -> CallResult:
        handler = self._methods.get(method)
        if handler is None:
            return CallResult.reject(f"Method {method!r} not implemented", "UNIMPLEMENTED")

        options = options or {}
        try:
            return CallResult.resolve(handler(options))
        except PersistenceError as e:
            # The change is live in memory; hand the applied state back with the error.
            data: dict[str, Any] = {"todos": _todos(e.todos)}
            if method == "upsert" and e.todo_id is not None:
                data["id"] = e.todo_id
            logger.warning("%s applied but not persisted: %s", method, e)
            return CallResult.reject(
                f"{e} (applied for this session, may not survive restart)", e.code, data
            )
        except TodoStoreError as e:
            logger.info("%s rejected: %s", method, e)
            return CallResult.reject(str(e), e.code)
        except Exception:
            logger.exception("%s crashed", method)
            return CallResult.reject("Internal error", "INTERNAL")

    # ---- handlers ----

    def _get_all(self, options: Options) -> dict[str, Any]:
        return {"todos": _todos(self._store.get_all())}

    def _get_one(self, options: Options) -> dict[str, Any]:
        todo = self._store.get_one(get_int(options, "id"))
        return {"todo": todo.to_caller_form()}

    def _upsert(self, options: Options) -> dict[str, Any]:
        due_at = next(
            (v for v in (get_float(options, k) for k in DUE_AT_KEYS) if v is not None), None
        )
        result = self._store.upsert(
            todo_id=get_int(options, "id"),
            name=get_str(options, "name"),
            due_at=due_at,
            done=get_bool(options, "done"),
        )
        return {
            "id": result.id,
            "upsert": f"ToDo with id {result.id} updated/added!",
            "todos": _todos(result.todos),
        }

    def _delete(self, options: Options) -> dict[str, Any]:
        todo_id = get_int(options, "id")
        remaining = self._store.delete(todo_id)
        return {"eliminated": f"ToDo with id {todo_id} eliminated!", "todos": _todos(remaining)}

    def _clear_all(self, options: Options) -> dict[str, Any]:
        self._store.clear_all()
        return {"eliminated": "All ToDos deleted!", "todos": []}

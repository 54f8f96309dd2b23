# src/todo_store/todos/todo_codec.py

"""
Storage encoding for the whole list.

Format: one UTF-8 JSON object. Keys are stringified ids, values are the
caller form of each item:

    {"1": {"id": 1, "name": "...", "dueAt": 1634569785944.0, "done": true}, ...}

encode_all() and decode_all() are exact inverses for any valid mapping.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..core.errors import DecodeError
from .todo_models import TodoItem, is_timestamp, is_valid_id

# Older payloads (and the mobile bridge) spell the timestamp "dueDate".
DUE_AT_KEYS = ("dueAt", "dueDate")


def item_from_caller_form(obj: Any) -> TodoItem:
    """Strict inverse of TodoItem.to_caller_form(). Raises DecodeError."""
    if not isinstance(obj, dict):
        raise DecodeError(f"expected an object, got {type(obj).__name__}")

    todo_id = obj.get("id")
    if not is_valid_id(todo_id):
        raise DecodeError(f"invalid id: {todo_id!r}")

    name = obj.get("name")
    if not isinstance(name, str):
        raise DecodeError(f"invalid name for id {todo_id}")

    due_at = next((obj[k] for k in DUE_AT_KEYS if k in obj), None)
    if not is_timestamp(due_at):
        raise DecodeError(f"invalid dueAt for id {todo_id}")

    done = obj.get("done")
    if not isinstance(done, bool):
        raise DecodeError(f"invalid done flag for id {todo_id}")

    return TodoItem(id=todo_id, name=name, due_at=float(due_at), done=done)


def encode_all(items: Mapping[int, TodoItem]) -> bytes:
    payload = {str(todo_id): item.to_caller_form() for todo_id, item in items.items()}
    return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")


def decode_all(data: bytes) -> dict[int, TodoItem]:
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"not a JSON document: {e}") from e

    if not isinstance(raw, dict):
        raise DecodeError(f"expected a JSON object, got {type(raw).__name__}")

    out: dict[int, TodoItem] = {}
    for key, value in raw.items():
        item = item_from_caller_form(value)
        # Keys must be the canonical spelling ("7", not "07" or "+7").
        if key != str(item.id):
            raise DecodeError(f"key {key!r} does not match embedded id {item.id}")
        out[item.id] = item

    return out

# src/todo_store/todos/todo_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

# Shared due date of the demo list shown on a fresh install.
SEED_DUE_AT = 1_634_569_785_944.0


@dataclass(frozen=True, slots=True)
class TodoItem:
    """
    One task entry.

    Value type: no identity beyond `id`. Replacing an item with the same id
    overwrites every field.
    """

    id: int
    name: str
    due_at: float  # epoch milliseconds, never interpreted by the store
    done: bool

    def to_caller_form(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "dueAt": self.due_at, "done": self.done}


def is_valid_id(value: Any) -> bool:
    # bool is an int subclass; True must not pass for id 1.
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_timestamp(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def default_seed() -> dict[int, TodoItem]:
    """Fresh copy of the demo list used when nothing usable is stored."""
    return {
        1: TodoItem(id=1, name="Interview with Ionic", due_at=SEED_DUE_AT, done=True),
        2: TodoItem(id=2, name="Create amazing product", due_at=SEED_DUE_AT, done=False),
        3: TodoItem(id=3, name="???", due_at=SEED_DUE_AT, done=False),
        4: TodoItem(id=4, name="Profit", due_at=SEED_DUE_AT, done=False),
    }

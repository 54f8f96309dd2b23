# src/todo_store/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..todos.todo_api import TodoPlugin
from ..todos.todo_store import TodoStore
from .ports import SlotProvider


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    provider: SlotProvider
    store: TodoStore
    plugin: TodoPlugin

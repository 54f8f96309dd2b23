# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_store.core.state import AppState
from todo_store.storage import MemorySlotProvider
from todo_store.todos.todo_api import TodoPlugin
from todo_store.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the composition root.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-store-test",
        log_level="DEBUG",
        log_to_file=False,
        backend="memory",
        slot_key="ToDoItems",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todos.sqlite3",
    )


@pytest.fixture()
def provider() -> MemorySlotProvider:
    return MemorySlotProvider()


@pytest.fixture()
def store(provider: MemorySlotProvider) -> TodoStore:
    return TodoStore(provider)


@pytest.fixture()
def plugin(store: TodoStore) -> TodoPlugin:
    return TodoPlugin(store)


@pytest.fixture()
def state(settings: SimpleNamespace, provider: MemorySlotProvider, store: TodoStore, plugin: TodoPlugin) -> AppState:
    """AppState wired with an in-memory slot so tests never touch the real data dir."""
    return AppState(settings=settings, provider=provider, store=store, plugin=plugin)

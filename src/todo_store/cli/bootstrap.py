# src/todo_store/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the storage backend and wires store + call bridge into AppState.
"""

from __future__ import annotations

import logging

from ..config import BACKENDS, get_settings
from ..core.ports import SlotProvider
from ..core.state import AppState
from ..storage import FileSlotProvider, MemorySlotProvider, SqliteSlotProvider
from ..todos.todo_api import TodoPlugin
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def build_provider(settings) -> SlotProvider:
    backend = str(getattr(settings, "backend", "file")).lower()
    if backend == "file":
        return FileSlotProvider(settings.data_dir)
    if backend == "sqlite":
        return SqliteSlotProvider(settings.db_path)
    if backend == "memory":
        logger.warning("Memory backend selected: changes will not survive a restart.")
        return MemorySlotProvider()
    raise ValueError(f"Unknown storage backend {backend!r} (expected one of {', '.join(BACKENDS)})")


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    provider = build_provider(settings)
    store = TodoStore(provider, slot_key=settings.slot_key)

    return AppState(
        settings=settings,
        provider=provider,
        store=store,
        plugin=TodoPlugin(store),
    )

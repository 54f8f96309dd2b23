# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_store.cli.bootstrap import build_provider, create_initial_state
from todo_store.config import Settings
from todo_store.storage import FileSlotProvider, MemorySlotProvider, SqliteSlotProvider


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "BACKEND", "SLOT_KEY", "DATA_DIR", "DB_PATH", "LOG_TO_FILE"):
        monkeypatch.delenv(f"TODO_STORE_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "todo-store"
    assert s.backend == "file"
    assert s.slot_key == "ToDoItems"
    assert s.data_dir == Path(".local/todo_store")
    assert s.db_path == Path(".local/todo_store") / "todos.sqlite3"
    assert s.log_to_file is True


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORE_BACKEND", " SQLite ")
    monkeypatch.setenv("TODO_STORE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TODO_STORE_DB_PATH", raising=False)
    monkeypatch.setenv("TODO_STORE_LOG_TO_FILE", "no")

    s = Settings.from_env()

    assert s.backend == "sqlite"
    assert s.db_path == tmp_path / "todos.sqlite3"
    assert s.log_to_file is False


@pytest.mark.parametrize(
    ("backend", "expected"),
    [("file", FileSlotProvider), ("sqlite", SqliteSlotProvider), ("memory", MemorySlotProvider)],
)
def test_build_provider(settings, backend: str, expected: type) -> None:
    settings.backend = backend
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    assert isinstance(build_provider(settings), expected)


def test_unknown_backend_fails_loudly(settings) -> None:
    settings.backend = "cloud"
    with pytest.raises(ValueError):
        build_provider(settings)


def test_create_initial_state_wires_store_and_plugin(settings) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert not state.store.is_hydrated
    assert state.plugin.call("getAll").data["todos"][0]["id"] == 1


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    import logging

    from todo_store.logging_setup import setup_logging

    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", log_to_file=True)
        logging.getLogger("todo_store.test").info("hello log")
        for h in root.handlers:
            h.flush()
        assert "hello log" in (tmp_path / "logs" / "todo_store.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)

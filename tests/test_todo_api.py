# tests/test_todo_api.py

from __future__ import annotations

from todo_store.todos.todo_api import TodoPlugin
from todo_store.todos.todo_store import TodoStore

from .fakes import FlakySlotProvider


def test_get_all_returns_sorted_caller_form(plugin: TodoPlugin) -> None:
    result = plugin.call("getAll")

    assert result.ok
    todos = result.data["todos"]
    assert [t["id"] for t in todos] == [1, 2, 3, 4]
    assert todos[0] == {"id": 1, "name": "Interview with Ionic", "dueAt": 1634569785944.0, "done": True}


def test_get_one(plugin: TodoPlugin) -> None:
    assert plugin.call("getOne", {"id": 3}).data == {
        "todo": {"id": 3, "name": "???", "dueAt": 1634569785944.0, "done": False}
    }


def test_get_one_missing_or_unknown_id(plugin: TodoPlugin) -> None:
    missing = plugin.call("getOne", {})
    assert not missing.ok
    assert missing.code == "INVALID_ARGUMENT"

    unknown = plugin.call("getOne", {"id": 77})
    assert not unknown.ok
    assert unknown.code == "NOT_FOUND"
    assert "77" in unknown.error


def test_upsert_new_item(plugin: TodoPlugin) -> None:
    result = plugin.call("upsert", {"name": "Buy milk", "dueAt": 1000, "done": False})

    assert result.ok
    assert result.data["id"] == 5
    assert result.data["upsert"] == "ToDo with id 5 updated/added!"
    assert len(result.data["todos"]) == 5
    assert result.data["todos"][-1] == {"id": 5, "name": "Buy milk", "dueAt": 1000, "done": False}


def test_upsert_accepts_due_date_and_integral_float_id(plugin: TodoPlugin) -> None:
    result = plugin.call("upsert", {"id": 2.0, "name": "Renamed", "dueDate": 2000, "done": True})

    assert result.ok
    assert plugin.call("getOne", {"id": 2}).data["todo"] == {
        "id": 2,
        "name": "Renamed",
        "dueAt": 2000,
        "done": True,
    }


def test_upsert_wrong_typed_options_are_rejected(plugin: TodoPlugin) -> None:
    for options in (
        {"dueAt": 1, "done": False},
        {"name": "a", "dueAt": "1", "done": False},
        {"name": "a", "dueAt": 1, "done": "false"},
        {"name": "a", "dueAt": 10**400, "done": False},
        {"name": "a", "dueDate": 10**400, "done": False},
    ):
        result = plugin.call("upsert", options)
        assert not result.ok
        assert result.code == "INVALID_ARGUMENT"

    assert len(plugin.call("getAll").data["todos"]) == 4


def test_delete_and_clear_all(plugin: TodoPlugin) -> None:
    deleted = plugin.call("delete", {"id": 4})
    assert deleted.data["eliminated"] == "ToDo with id 4 eliminated!"
    assert [t["id"] for t in deleted.data["todos"]] == [1, 2, 3]

    assert plugin.call("delete", {"id": 4}).code == "NOT_FOUND"
    assert plugin.call("delete", {"id": "4"}).code == "INVALID_ARGUMENT"

    cleared = plugin.call("clearAll")
    assert cleared.data == {"eliminated": "All ToDos deleted!", "todos": []}
    assert plugin.call("getAll").data == {"todos": []}


def test_unknown_method(plugin: TodoPlugin) -> None:
    result = plugin.call("toggle", {"id": 1})
    assert not result.ok
    assert result.code == "UNIMPLEMENTED"
    assert set(plugin.methods) == {"getAll", "getOne", "upsert", "delete", "clearAll"}


def test_persistence_error_reports_applied_state() -> None:
    plugin = TodoPlugin(TodoStore(FlakySlotProvider(fail_writes=True)))

    result = plugin.call("upsert", {"name": "x", "dueAt": 1, "done": False})

    assert not result.ok
    assert result.code == "PERSISTENCE_ERROR"
    assert "may not survive restart" in result.error
    assert result.data["id"] == 5
    assert [t["id"] for t in result.data["todos"]] == [1, 2, 3, 4, 5]
    assert plugin.call("getOne", {"id": 5}).ok


def test_unexpected_store_crash_becomes_internal_rejection() -> None:
    class Broken:
        def get_all(self):
            raise RuntimeError("boom")

    result = TodoPlugin(Broken()).call("getAll")  # type: ignore[arg-type]
    assert not result.ok
    assert result.code == "INTERNAL"

# src/todo_store/cli/commands.py

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..core.state import AppState
from ..todos.todo_api import CallResult

CommandHandler = Callable[[AppState, list[str]], str]

_TRUE_WORDS = ("1", "true", "yes", "y", "done", "x")
_FALSE_WORDS = ("0", "false", "no", "n", "open", "-")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting / parsing helpers ----


def format_due(due_ms: float) -> str:
    try:
        return datetime.fromtimestamp(due_ms / 1000).astimezone().strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        # outside the platform's datetime range
        return f"{due_ms:.0f} ms"


def format_todo(todo: dict[str, Any]) -> str:
    mark = "x" if todo["done"] else " "
    return f"[{mark}] {todo['id']}. {todo['name']} (due {format_due(todo['dueAt'])})"


def format_list(todos: list[dict[str, Any]]) -> str:
    if not todos:
        return "No ToDos."
    return "\n".join(format_todo(t) for t in todos)


def parse_due(raw: str) -> float | None:
    """
    Accepts epoch milliseconds, "now", or an ISO date/datetime (local time).
    Returns None when the value can't be parsed.
    """
    if raw.lower() == "now":
        return time.time() * 1000
    try:
        return float(int(raw))
    except OverflowError:
        return None
    except ValueError:
        pass
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return None
    return dt.timestamp() * 1000


def parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def parse_done(raw: str) -> bool | None:
    word = raw.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def _render(result: CallResult, render_ok: Callable[[dict[str, Any]], str]) -> str:
    if result.ok and result.data is not None:
        return render_ok(result.data)
    reply = f"Error [{result.code}]: {result.error}"
    # Persistence failures still carry the applied list.
    if result.data and "todos" in result.data:
        reply += "\n" + format_list(result.data["todos"])
    return reply


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    return (
        "Status:\n"
        f"  Backend: {getattr(settings, 'backend', '?')}\n"
        f"  Slot: {getattr(settings, 'slot_key', '?')}\n"
        f"  Data dir: {getattr(settings, 'data_dir', '?')}\n"
        f"  ToDos: {state.store.count()}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render(state.plugin.call("getAll"), lambda d: format_list(d["todos"]))


def cmd_get(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or parse_id(args[0]) is None:
        return "Usage: /get <id>"
    result = state.plugin.call("getOne", {"id": parse_id(args[0])})
    return _render(result, lambda d: format_todo(d["todo"]))


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <due> <name...>   due: epoch ms | now | 2024-05-01 | 2024-05-01T09:30
    """
    if len(args) < 2:
        return "Usage: /add <due> <name...>"
    due = parse_due(args[0])
    if due is None:
        return f"Can't parse due date: {args[0]}"
    result = state.plugin.call("upsert", {"name": " ".join(args[1:]), "dueAt": due, "done": False})
    return _render(result, lambda d: f"{d['upsert']}\n{format_list(d['todos'])}")


def cmd_set(state: AppState, args: list[str]) -> str:
    """
    /set <id> <due> <done> <name...>   replaces the whole item
    """
    if len(args) < 4:
        return "Usage: /set <id> <due> <done> <name...>"
    todo_id, due, done = parse_id(args[0]), parse_due(args[1]), parse_done(args[2])
    if todo_id is None or due is None or done is None:
        return "Usage: /set <id> <due> <done> <name...>"
    result = state.plugin.call(
        "upsert", {"id": todo_id, "name": " ".join(args[3:]), "dueAt": due, "done": done}
    )
    return _render(result, lambda d: f"{d['upsert']}\n{format_list(d['todos'])}")


def _set_done(state: AppState, args: list[str], done: bool) -> str:
    if len(args) != 1 or parse_id(args[0]) is None:
        return f"Usage: /{'done' if done else 'undone'} <id>"
    current = state.plugin.call("getOne", {"id": parse_id(args[0])})
    if not current.ok or current.data is None:
        return _render(current, lambda d: "")
    todo = dict(current.data["todo"])
    todo["done"] = done
    result = state.plugin.call("upsert", todo)
    return _render(result, lambda d: format_list(d["todos"]))


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, True)


def cmd_undone(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, False)


def cmd_del(state: AppState, args: list[str]) -> str:
    if len(args) != 1 or parse_id(args[0]) is None:
        return "Usage: /del <id>"
    result = state.plugin.call("delete", {"id": parse_id(args[0])})
    return _render(result, lambda d: f"{d['eliminated']}\n{format_list(d['todos'])}")


def cmd_clear(state: AppState, args: list[str]) -> str:
    if [a.lower() for a in args] != ["yes"]:
        return "This deletes every ToDo. Confirm with: /clear yes"
    result = state.plugin.call("clearAll")
    return _render(result, lambda d: d["eliminated"])


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show backend, slot and item count.")
registry.register("list", cmd_list, help_text="List all ToDos.", aliases=["ls"])
registry.register("get", cmd_get, help_text="Show one ToDo: /get <id>.")
registry.register("add", cmd_add, help_text="Add a ToDo: /add <due> <name...>.")
registry.register("set", cmd_set, help_text="Replace a ToDo: /set <id> <due> <done> <name...>.")
registry.register("done", cmd_done, help_text="Mark a ToDo done: /done <id>.")
registry.register("undone", cmd_undone, help_text="Mark a ToDo open: /undone <id>.")
registry.register("del", cmd_del, help_text="Delete a ToDo: /del <id>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all ToDos: /clear yes.")

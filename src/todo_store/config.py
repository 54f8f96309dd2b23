# src/todo_store/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from disk at import time except the local .env.
- Every path lives under a gitignored local data dir by default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO_STORE"

BACKENDS = ("file", "sqlite", "memory")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Storage ----
    backend: str
    slot_key: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-store").strip() or "todo-store"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        # Validated by the composition root so a typo fails loudly there, not here.
        backend = _env(_k("BACKEND"), "file").strip().lower()
        slot_key = _env(_k("SLOT_KEY"), "ToDoItems").strip() or "ToDoItems"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo_store"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "todos.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            backend=backend,
            slot_key=slot_key,
            data_dir=data_dir,
            db_path=db_path,
        )


def get_settings() -> Settings:
    return Settings.from_env()

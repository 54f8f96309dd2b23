# src/todo_store/storage/memory_slots.py

from __future__ import annotations


class MemorySlotProvider:
    """Process-local slots. Nothing survives a restart; used for demos and tests."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.slots: dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes | None:
        return self.slots.get(key)

    def write(self, key: str, data: bytes) -> None:
        self.slots[key] = bytes(data)

    def remove(self, key: str) -> None:
        self.slots.pop(key, None)

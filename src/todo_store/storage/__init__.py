"""
Backing storage for the ToDo list.

Components:
- file_slots.py: one JSON file per slot (default)
- sqlite_slots.py: key/value table in a local SQLite database
- memory_slots.py: process-local dict, nothing persists
"""

from .file_slots import FileSlotProvider
from .memory_slots import MemorySlotProvider
from .sqlite_slots import SqliteSlotProvider

__all__ = ["FileSlotProvider", "MemorySlotProvider", "SqliteSlotProvider"]

"""Local persisted ToDo list: lazily hydrated store with write-through persistence."""

__version__ = "0.1.0"

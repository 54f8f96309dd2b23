"""
ToDo subsystem.

Components:
- todo_models.py: TodoItem value type + seed list
- todo_codec.py: JSON encoding of the whole list for the storage slot
- todo_store.py: lazily hydrated, write-through in-memory store
- todo_api.py: call bridge (named calls + options -> CallResult)
"""

"""Task storage backends."""

from todolist.storage.task_store import InMemoryTaskStore, TaskStore

__all__ = ["InMemoryTaskStore", "TaskStore"]

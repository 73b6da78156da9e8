"""Task store contract and the in-memory backend."""

from __future__ import annotations

import threading
from datetime import date
from typing import Callable, Protocol, runtime_checkable

from todolist.domain.task import TodoTask


@runtime_checkable
class TaskStore(Protocol):
    """Tasks keyed by name. Implementations must be safe for concurrent callers."""

    def save(self, task: TodoTask) -> TodoTask:
        """Insert or replace the task stored under task.name; returns task unchanged."""
        ...

    def save_if_absent(self, task: TodoTask) -> bool:
        """Atomically insert task unless its name is taken. Returns True when stored."""
        ...

    def find_active(self) -> list[TodoTask]:
        """Tasks with no end date or an end date after the current date."""
        ...

    def find_all(self) -> list[TodoTask]: ...

    def exists_by_name(self, name: str) -> bool: ...

    def find_by_name(self, name: str) -> TodoTask | None: ...

    def delete_by_name(self, name: str) -> None:
        """Remove the named task; unknown names are ignored."""
        ...


class InMemoryTaskStore:
    """
    Process-lifetime task store keyed by task name.

    Thread-safe: one re-entrant lock guards the mapping and reads return copies.
    Iteration follows insertion order; overwriting a name keeps its position.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._tasks: dict[str, TodoTask] = {}
        self._lock = threading.RLock()
        self._today = today

    def save(self, task: TodoTask) -> TodoTask:
        with self._lock:
            self._tasks[task.name] = task
        return task

    def save_if_absent(self, task: TodoTask) -> bool:
        with self._lock:
            if task.name in self._tasks:
                return False
            self._tasks[task.name] = task
            return True

    def find_active(self) -> list[TodoTask]:
        today = self._today()
        with self._lock:
            return [t for t in self._tasks.values() if t.is_active(today)]

    def find_all(self) -> list[TodoTask]:
        with self._lock:
            return list(self._tasks.values())

    def exists_by_name(self, name: str) -> bool:
        with self._lock:
            return name in self._tasks

    def find_by_name(self, name: str) -> TodoTask | None:
        with self._lock:
            return self._tasks.get(name)

    def delete_by_name(self, name: str) -> None:
        with self._lock:
            self._tasks.pop(name, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

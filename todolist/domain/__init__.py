"""Domain entities."""

from todolist.domain.task import TodoTask

__all__ = ["TodoTask"]

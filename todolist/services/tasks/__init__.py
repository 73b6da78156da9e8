"""Tasks domain services."""

from todolist.services.tasks.mapping import TaskCreateRequest, TaskView, to_view
from todolist.services.tasks.task_service import TaskService, parse_iso_date

__all__ = ["TaskCreateRequest", "TaskService", "TaskView", "parse_iso_date", "to_view"]

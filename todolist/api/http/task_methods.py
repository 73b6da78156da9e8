"""Helpers for task HTTP endpoint payloads."""

from __future__ import annotations

from fastapi import Response

from todolist.services.tasks.mapping import TaskCreateRequest, TaskView, to_view
from todolist.services.tasks.task_service import TaskService


def create_task_response(*, service: TaskService, body: TaskCreateRequest) -> TaskView:
    """Build response payload for POST /tasks. ServiceError propagates to the 400 handler."""
    task = service.create_task(body.name, body.end_date)
    return to_view(task)


def list_tasks_response(*, service: TaskService, contains_inactive: bool) -> list[TaskView]:
    """Build list response payload for GET /tasks."""
    return service.list_tasks(include_inactive=contains_inactive)


def delete_task_response(*, service: TaskService, name: str) -> Response:
    """Delete the named task and answer 204 with no body."""
    service.delete_task(name)
    return Response(status_code=204)

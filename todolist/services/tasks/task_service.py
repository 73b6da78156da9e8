"""Task business rules on top of a TaskStore."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Callable

from loguru import logger

from todolist.domain.task import TodoTask
from todolist.services.errors import InvalidArgumentError, InvalidDateError, TaskErrorKind
from todolist.services.tasks.mapping import DATE_FORMAT, TaskView, to_view
from todolist.storage.task_store import TaskStore

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(raw: str) -> date:
    """Parse a strict YYYY-MM-DD string. Raises ValueError otherwise."""
    if not isinstance(raw, str) or not _ISO_DATE_RE.match(raw):
        raise ValueError(f"not a YYYY-MM-DD date: {raw!r}")
    return datetime.strptime(raw, DATE_FORMAT).date()


def _require_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(TaskErrorKind.BLANK_NAME, "Task name cannot be empty")


def _duplicate_name(name: str) -> InvalidArgumentError:
    return InvalidArgumentError(TaskErrorKind.DUPLICATE_NAME, f"Task with name '{name}' already exists")


class TaskService:
    """
    Creates, lists and deletes tasks.

    Validation always happens before the store is touched, so a rejected
    request leaves no partial state behind.
    """

    def __init__(
        self,
        store: TaskStore,
        max_end_date: str,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.max_end_date_raw = max_end_date
        self.max_end_date = parse_iso_date(max_end_date)
        self._today = today

    def parse_end_date(self, raw: str) -> date:
        """Parse and bound-check a requested end date (tomorrow .. max_end_date inclusive)."""
        try:
            end_date = parse_iso_date(raw)
        except ValueError:
            raise InvalidDateError(
                TaskErrorKind.INVALID_DATE_FORMAT, "Date must be in yyyy-MM-dd format"
            ) from None

        earliest = self._today() + timedelta(days=1)
        if end_date < earliest:
            raise InvalidDateError(
                TaskErrorKind.DATE_TOO_SOON, "Task end date must be at least 1 day from now"
            )
        if end_date > self.max_end_date:
            raise InvalidDateError(
                TaskErrorKind.DATE_TOO_LATE,
                f"Task end date cannot be later than {self.max_end_date_raw}",
            )
        return end_date

    def create_task(self, name: str, end_date: str | None = None) -> TodoTask:
        try:
            _require_name(name)
            if self.store.exists_by_name(name):
                raise _duplicate_name(name)
            parsed = self.parse_end_date(end_date) if end_date is not None else None
        except (InvalidArgumentError, InvalidDateError) as e:
            logger.debug("Rejected task create name={!r}: {}", name, e.message)
            raise

        task = TodoTask(name=name, end_date=parsed)
        # Another request may have taken the name since the existence check.
        if not self.store.save_if_absent(task):
            logger.warning("Task name {!r} was taken concurrently", task.name)
            raise _duplicate_name(task.name)
        logger.info("Created task {} name={!r} end_date={}", task.id, task.name, task.end_date)
        return task

    def list_tasks(self, include_inactive: bool = False) -> list[TaskView]:
        tasks = self.store.find_all() if include_inactive else self.store.find_active()
        return [to_view(t) for t in tasks]

    def delete_task(self, name: str) -> None:
        _require_name(name)
        if self.store.find_by_name(name) is None:
            raise InvalidArgumentError(TaskErrorKind.NOT_FOUND, f"Task with name '{name}' not found")
        self.store.delete_by_name(name)
        logger.info("Deleted task name={!r}", name)

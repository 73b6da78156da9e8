"""Request/response payload models and the TodoTask to view mapping."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from todolist.domain.task import TodoTask

DATE_FORMAT = "%Y-%m-%d"


class TaskCreateRequest(BaseModel):
    """Body of POST /api/tasks."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    end_date: str | None = Field(default=None, alias="endDate")


class TaskView(BaseModel):
    """Externally visible task: id, name and end date as YYYY-MM-DD."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    end_date: str | None = Field(default=None, alias="endDate")


def format_date(value: date | None) -> str | None:
    return value.strftime(DATE_FORMAT) if value is not None else None


def to_view(task: TodoTask) -> TaskView:
    return TaskView(id=task.id, name=task.name, end_date=format_date(task.end_date))

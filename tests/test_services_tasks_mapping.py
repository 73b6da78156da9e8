from datetime import date

from todolist.domain.task import TodoTask
from todolist.services.tasks.mapping import TaskCreateRequest, TaskView, format_date, to_view


def test_request_accepts_alias_and_field_name():
    assert TaskCreateRequest.model_validate({"name": "a", "endDate": "2026-07-01"}).end_date == "2026-07-01"
    assert TaskCreateRequest(name="a", end_date="2026-07-01").end_date == "2026-07-01"
    assert TaskCreateRequest(name="a").end_date is None


def test_to_view_formats_end_date():
    task = TodoTask(name="a", end_date=date(2026, 1, 5))
    view = to_view(task)
    assert view == TaskView(id=task.id, name="a", end_date="2026-01-05")
    assert view.model_dump(by_alias=True) == {"id": task.id, "name": "a", "endDate": "2026-01-05"}


def test_to_view_without_end_date():
    assert to_view(TodoTask(name="a")).end_date is None
    assert format_date(None) is None

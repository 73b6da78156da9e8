from datetime import date, timedelta

import pytest

from todolist.domain.task import TodoTask

TODAY = date(2026, 6, 15)


def test_new_tasks_get_distinct_ids():
    a = TodoTask(name="a")
    b = TodoTask(name="a")
    assert a.id and b.id
    assert a.id != b.id


def test_task_is_immutable():
    task = TodoTask(name="a")
    with pytest.raises(AttributeError):
        task.id = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("end_date", "active"),
    [
        (None, True),
        (TODAY + timedelta(days=1), True),
        (TODAY, False),
        (TODAY - timedelta(days=1), False),
    ],
)
def test_is_active(end_date, active):
    assert TodoTask(name="t", end_date=end_date).is_active(TODAY) is active

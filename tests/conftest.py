"""Pytest hooks and fixtures."""

from datetime import date

import pytest

from todolist.services.tasks.task_service import TaskService
from todolist.storage.task_store import InMemoryTaskStore

TODAY = date(2026, 6, 15)
MAX_END_DATE = "2026-12-01"


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line("markers", "slow: thread-heavy concurrency tests")


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def store(today):
    return InMemoryTaskStore(today=today)


@pytest.fixture
def service(store, today):
    return TaskService(store, MAX_END_DATE, today=today)

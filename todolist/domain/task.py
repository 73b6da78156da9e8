"""To-do task entity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date


def _new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class TodoTask:
    """A single named to-do item. `end_date` of None means it never expires."""

    name: str
    end_date: date | None = None
    id: str = field(default_factory=_new_task_id)

    def is_active(self, today: date) -> bool:
        """Active while there is no end date or the end date is after today."""
        return self.end_date is None or self.end_date > today

"""Shared service-layer error types."""

from __future__ import annotations

from enum import Enum


class ServiceError(Exception):
    """Domain error raised by shared services."""

    def __init__(self, *, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class TaskErrorKind(Enum):
    """Why a task operation was rejected."""

    BLANK_NAME = "BLANK_NAME"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    NOT_FOUND = "NOT_FOUND"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    DATE_TOO_SOON = "DATE_TOO_SOON"
    DATE_TOO_LATE = "DATE_TOO_LATE"


class TaskError(ServiceError):
    """Task operation rejected because of client input."""

    def __init__(self, kind: TaskErrorKind, message: str):
        super().__init__(code=kind.value, message=message)
        self.kind = kind


class InvalidArgumentError(TaskError):
    """Blank name, duplicate name on create, or unknown name on delete."""


class InvalidDateError(TaskError):
    """End date is malformed, too soon, or later than the configured maximum."""

"""Utility functions for todolist."""

from todolist.utils.exceptions import (
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)

__all__ = [
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
]

"""Shared helpers for consistent HTTP error body formatting."""

from __future__ import annotations

from typing import Any, Sequence


def error_body(message: str) -> dict[str, str]:
    """Every 4xx/5xx body is {"message": ...}."""
    return {"message": message}


def request_validation_detail(errors: Sequence[dict[str, Any]]) -> str:
    """Condense pydantic request validation errors into one line."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        where = ".".join(loc)
        msg = err.get("msg") or "invalid value"
        parts.append(f"{where}: {msg}" if where else msg)
    return "; ".join(parts) or "Invalid request"

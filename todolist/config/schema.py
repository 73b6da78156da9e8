"""Configuration schema using Pydantic.

Single data model with defaults, persisted to ~/.todolist/config.json.
"""

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TodoConfig(BaseModel):
    """Task rules."""
    max_end_date: str = "2026-12-01"  # Latest accepted task end date, YYYY-MM-DD (inclusive)

    @field_validator("max_end_date")
    @classmethod
    def _check_max_end_date(cls, value: str) -> str:
        value = value.strip()
        if not _ISO_DATE_RE.match(value):
            raise ValueError(f"max_end_date must be YYYY-MM-DD, got {value!r}")
        datetime.strptime(value, "%Y-%m-%d")
        return value


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 8080


class LoggingConfig(BaseModel):
    """Log sink configuration."""
    level: str = "INFO"
    file: bool = True  # Also write ~/.todolist/logs/<command>.log


class Config(BaseSettings):
    """Root configuration for todolist."""
    todo: TodoConfig = Field(default_factory=TodoConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        env_nested_delimiter="__",
    )

"""
todo Configuration
==================
Where the list lives and how chatty the logs are.

Environment:
    TODO_FILE        storage file (default: ~/.todo)
    TODO_LOG_LEVEL   DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import InvalidArgument, StorageUnavailable

FILENAME = ".todo"  # stored in the user's home directory
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TodoConfig(BaseModel):
    storage_path: Path
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> TodoConfig:
        """Build the configuration from environment variables."""
        environ = os.environ if environ is None else environ

        override = environ.get("TODO_FILE", "")
        storage_path = Path(override).expanduser() if override else default_storage_path()

        try:
            return cls(
                storage_path=storage_path,
                log_level=environ.get("TODO_LOG_LEVEL", "") or "WARNING",
            )
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise InvalidArgument(f"invalid configuration: {messages}") from e


def default_storage_path() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageUnavailable("unable to get user's home directory") from e
    return home / FILENAME

"""
todo Storage Codec
==================
Line-oriented persistence for the todo list.

Format:
    [x] a completed todo
    [ ] an incomplete todo

One todo per line, UTF-8, every line terminated by a newline. Bytes that
are not valid UTF-8 are kept as they are. Lines without a known prefix
are read as incomplete todos with the whole line as description, so
hand-written files survive a load/save cycle (normalized to the
canonical prefixes).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .errors import StorageUnavailable
from .store import Todo, TodoList

logger = logging.getLogger(__name__)

COMPLETE_PREFIX = "[x] "
INCOMPLETE_PREFIX = "[ ] "
PREFIX_LEN = len(COMPLETE_PREFIX)  # both prefixes have the same length

# Bytes that are not valid UTF-8 round-trip unchanged through load and save
STORAGE_ERRORS = "surrogateescape"


def prefix_for(complete: bool) -> str:
    return COMPLETE_PREFIX if complete else INCOMPLETE_PREFIX


def decode_line(line: str) -> Todo:
    complete = line.startswith(COMPLETE_PREFIX)
    if complete or line.startswith(INCOMPLETE_PREFIX):
        line = line[PREFIX_LEN:]
    return Todo(line, complete)


def decode(text: str) -> list[Todo]:
    """Decode file contents into todos.

    Only "\\n" separates lines; a trailing "\\r" is dropped from each line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [decode_line(line[:-1] if line.endswith("\r") else line)
            for line in lines]


def encode(todos: Iterable[Todo]) -> str:
    return "".join(f"{prefix_for(todo.complete)}{todo.description}\n"
                   for todo in todos)


# ─────────────────────────────────────────────────────────────
#  File I/O
# ─────────────────────────────────────────────────────────────

def load_list(path: str | Path) -> TodoList:
    """Load the todo list, creating an empty storage file if missing."""
    path = Path(path)
    try:
        if not path.exists():
            path.touch()
            logger.debug("created empty storage file %s", path)
        text = path.read_bytes().decode("utf-8", STORAGE_ERRORS)
    except OSError as e:
        raise StorageUnavailable(f"unable to read {path}: {e}") from e

    todos = decode(text)
    logger.debug("loaded %d todos from %s", len(todos), path)
    return TodoList(todos)


def save_list(path: str | Path, todos: Iterable[Todo]):
    """Overwrite the storage file with the given todos."""
    path = Path(path)
    todos = list(todos)
    try:
        data = encode(todos).encode("utf-8", STORAGE_ERRORS)
    except UnicodeEncodeError as e:
        raise StorageUnavailable(f"unable to write {path}: {e}") from e

    try:
        path.write_bytes(data)
    except OSError as e:
        raise StorageUnavailable(f"unable to write {path}: {e}") from e
    logger.debug("saved %d todos to %s", len(todos), path)

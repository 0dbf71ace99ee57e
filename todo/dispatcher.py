"""
todo Command Dispatcher
=======================
Runs one resolved Action against the stored list.

Sequence:
    1. load the list from storage
    2. validate every id the action refers to (nothing is touched on failure)
    3. run the action
    4. for mutating actions: print the incomplete todos, then save
       for print actions: print, and leave storage alone
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from .actions import Action, ActionKind
from .codec import load_list, prefix_for, save_list
from .prompt import ask_yes_no
from .store import Confirm, Todo, TodoList

logger = logging.getLogger(__name__)


def format_todo(todo_id: int, todo: Todo) -> str:
    return f"{todo_id} {prefix_for(todo.complete)}{todo.description}"


class Dispatcher:
    """Executes actions against the list stored at storage_path.

    The list is loaded fresh by every run() and belongs to that call.
    """

    def __init__(self, storage_path: str | Path, confirm: Optional[Confirm] = None,
                 out: Optional[TextIO] = None):
        """
        Args:
            storage_path: The todo file.
            confirm: Yes/no question callback used by the remove actions.
            out: Stream the list is printed to (default: stdout).
        """
        self.storage_path = Path(storage_path)
        self.confirm = confirm or ask_yes_no
        self.out = out or sys.stdout

        self._handlers: dict[ActionKind, Callable[[TodoList, Action], None]] = {
            ActionKind.ADD: self._add,
            ActionKind.EDIT: self._edit,
            ActionKind.REPLACE: self._replace,
            ActionKind.MARK_COMPLETE: self._mark_complete,
            ActionKind.MARK_INCOMPLETE: self._mark_incomplete,
            ActionKind.SWAP: self._swap,
            ActionKind.REMOVE: self._remove,
            ActionKind.REMOVE_COMPLETE: self._remove_complete,
            ActionKind.PRINT_ALL: self._print_all,
            ActionKind.PRINT_INCOMPLETE: self._print_incomplete,
        }

    def run(self, action: Action) -> TodoList:
        """Run a single action. Returns the list as it was left."""
        todos = load_list(self.storage_path)
        todos.validate_ids(action.ids)

        logger.debug("running %s on %d todos", action.kind.name, len(todos))
        self._handlers[action.kind](todos, action)

        if action.persists:
            self._print_incomplete(todos, action)
            save_list(self.storage_path, todos)
        return todos

    # ─── Handlers ─────────────────────────────────────────

    def _add(self, todos: TodoList, action):
        todos.add(action.description)

    def _edit(self, todos: TodoList, action):
        todos.edit(action.todo_id, action.description)

    def _replace(self, todos: TodoList, action):
        todos.replace(action.todo_id, action.old, action.new)

    def _mark_complete(self, todos: TodoList, action):
        todos.mark_complete(action.todo_ids)

    def _mark_incomplete(self, todos: TodoList, action):
        todos.mark_incomplete(action.todo_ids)

    def _swap(self, todos: TodoList, action):
        todos.swap(action.first, action.second)

    def _remove(self, todos: TodoList, action):
        removed = todos.remove(action.todo_ids, self.confirm)
        logger.debug("removed %d of %d requested todos", removed, len(set(action.todo_ids)))

    def _remove_complete(self, todos: TodoList, action):
        removed = todos.remove_complete(self.confirm)
        logger.debug("removed %d completed todos", removed)

    def _print_all(self, todos: TodoList, action):
        for todo_id, todo in enumerate(todos):
            print(format_todo(todo_id, todo), file=self.out)

    def _print_incomplete(self, todos: TodoList, action):
        for todo_id, todo in todos.enumerate_incomplete():
            print(format_todo(todo_id, todo), file=self.out)

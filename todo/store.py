"""
todo List Store
===============
In-memory ordered list of todos and the mutations applied to it.

An item's id is its zero-based position in the list. Ids are not stable:
removing or swapping items renumbers everything that follows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .errors import InvalidId

Confirm = Callable[[str], bool]


@dataclass
class Todo:
    """A single todo list item."""

    description: str
    complete: bool = False


class TodoList:
    """Ordered collection of todos addressed by position.

    Operations assume their ids were checked with validate_ids() against
    this same list beforehand.
    """

    def __init__(self, todos: Iterable[Todo] = ()):
        self._todos: list[Todo] = list(todos)

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._todos)

    def __getitem__(self, todo_id: int) -> Todo:
        return self._todos[todo_id]

    def __repr__(self) -> str:
        return f"TodoList({self._todos!r})"

    @property
    def todos(self) -> list[Todo]:
        """All todos (read-only view)."""
        return list(self._todos)

    def enumerate_incomplete(self) -> Iterator[tuple[int, Todo]]:
        """Yield (id, todo) for every incomplete todo."""
        for todo_id, todo in enumerate(self._todos):
            if not todo.complete:
                yield todo_id, todo

    def validate_ids(self, ids: Iterable[int]):
        """Raise InvalidId for the first id outside [0, len-1]."""
        last = len(self._todos) - 1
        for todo_id in ids:
            if todo_id < 0 or todo_id > last:
                raise InvalidId(f"invalid id {todo_id}")

    # ─── Mutations ────────────────────────────────────────

    def add(self, description: str) -> int:
        """Append an incomplete todo. Returns its id."""
        self._todos.append(Todo(description))
        return len(self._todos) - 1

    def edit(self, todo_id: int, description: str):
        self._todos[todo_id].description = description

    def replace(self, todo_id: int, old: str, new: str):
        """Replace every occurrence of old with new in the description.

        An empty old string leaves the description untouched.
        """
        if not old:
            return
        todo = self._todos[todo_id]
        todo.description = todo.description.replace(old, new)

    def mark_complete(self, ids: Iterable[int]):
        for todo_id in ids:
            self._todos[todo_id].complete = True

    def mark_incomplete(self, ids: Iterable[int]):
        for todo_id in ids:
            self._todos[todo_id].complete = False

    def swap(self, first: int, second: int):
        todos = self._todos
        todos[first], todos[second] = todos[second], todos[first]

    def remove(self, ids: Iterable[int], confirm: Confirm) -> int:
        """Remove the given todos. Returns how many were removed.

        Incomplete todos are only removed if confirm() agrees; each one is
        asked about once, even when its id is listed several times.
        """
        targets = set(ids)

        def should_remove(todo_id: int, todo: Todo) -> bool:
            if todo_id not in targets:
                return False
            return todo.complete or confirm(f"todo {todo_id} is incomplete. Remove it?")

        return self.remove_if(should_remove)

    def remove_complete(self, confirm: Confirm) -> int:
        """Remove all complete todos after a single confirmation."""
        if not confirm("remove all completed todos?"):
            return 0
        return self.remove_if(lambda todo_id, todo: todo.complete)

    def remove_if(self, predicate: Callable[[int, Todo], bool]) -> int:
        """Drop every todo for which predicate(id, todo) is true.

        The predicate sees ids as they were before the call; the
        remaining todos are renumbered afterwards.
        """
        kept = [todo for todo_id, todo in enumerate(self._todos)
                if not predicate(todo_id, todo)]
        removed = len(self._todos) - len(kept)
        self._todos = kept
        return removed

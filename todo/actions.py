"""
todo Actions
============
The closed set of things one invocation can do. Each variant is a frozen
dataclass carrying only the operands it needs.

    Add(description)              desc...
    Edit(id, description)         -e id desc...
    Replace(id, old, new)         -e id /old/new/
    MarkComplete(ids)             -c id...
    MarkIncomplete(ids)           -i id...
    Swap(first, second)           -s id id
    Remove(ids)                   -r id...
    RemoveComplete()              -r
    PrintAll()                    -c
    PrintIncomplete()             (no arguments)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


class ActionKind(Enum):
    """One member per action variant."""
    ADD              = auto()
    EDIT             = auto()
    REPLACE          = auto()
    MARK_COMPLETE    = auto()
    MARK_INCOMPLETE  = auto()
    SWAP             = auto()
    REMOVE           = auto()
    REMOVE_COMPLETE  = auto()
    PRINT_ALL        = auto()
    PRINT_INCOMPLETE = auto()


class Action:
    """Base for all action variants.

    ids is every todo id the action refers to; the dispatcher validates
    them against the loaded list before running the action. persists is
    false for the read-only print actions.
    """

    kind: ClassVar[ActionKind]
    persists: ClassVar[bool] = True

    @property
    def ids(self) -> tuple[int, ...]:
        return ()


@dataclass(frozen=True)
class Add(Action):
    kind: ClassVar[ActionKind] = ActionKind.ADD

    description: str


@dataclass(frozen=True)
class Edit(Action):
    kind: ClassVar[ActionKind] = ActionKind.EDIT

    todo_id: int
    description: str

    @property
    def ids(self) -> tuple[int, ...]:
        return (self.todo_id,)


@dataclass(frozen=True)
class Replace(Action):
    kind: ClassVar[ActionKind] = ActionKind.REPLACE

    todo_id: int
    old: str
    new: str

    @property
    def ids(self) -> tuple[int, ...]:
        return (self.todo_id,)


@dataclass(frozen=True)
class MarkComplete(Action):
    kind: ClassVar[ActionKind] = ActionKind.MARK_COMPLETE

    todo_ids: tuple[int, ...]

    @property
    def ids(self) -> tuple[int, ...]:
        return self.todo_ids


@dataclass(frozen=True)
class MarkIncomplete(Action):
    kind: ClassVar[ActionKind] = ActionKind.MARK_INCOMPLETE

    todo_ids: tuple[int, ...]

    @property
    def ids(self) -> tuple[int, ...]:
        return self.todo_ids


@dataclass(frozen=True)
class Swap(Action):
    kind: ClassVar[ActionKind] = ActionKind.SWAP

    first: int
    second: int

    @property
    def ids(self) -> tuple[int, ...]:
        return (self.first, self.second)


@dataclass(frozen=True)
class Remove(Action):
    kind: ClassVar[ActionKind] = ActionKind.REMOVE

    todo_ids: tuple[int, ...]

    @property
    def ids(self) -> tuple[int, ...]:
        return self.todo_ids


@dataclass(frozen=True)
class RemoveComplete(Action):
    kind: ClassVar[ActionKind] = ActionKind.REMOVE_COMPLETE


@dataclass(frozen=True)
class PrintAll(Action):
    kind: ClassVar[ActionKind] = ActionKind.PRINT_ALL
    persists: ClassVar[bool] = False


@dataclass(frozen=True)
class PrintIncomplete(Action):
    kind: ClassVar[ActionKind] = ActionKind.PRINT_INCOMPLETE
    persists: ClassVar[bool] = False

"""
todo: a command-line todo list
==============================
Keeps an ordered list of todos in a single text file and edits it by
position.

Modules:
    codec       line format, load/save of the storage file
    store       Todo, TodoList and the list mutations
    actions     the closed set of actions an invocation can perform
    resolver    command-line tokens -> Action
    dispatcher  runs an Action against the stored list
    prompt      yes/no terminal confirmation
    config      storage path and log level from the environment
"""
from .actions import (
    Action, ActionKind,
    Add, Edit, Replace, MarkComplete, MarkIncomplete, Swap,
    Remove, RemoveComplete, PrintAll, PrintIncomplete,
)
from .codec import COMPLETE_PREFIX, INCOMPLETE_PREFIX, decode, encode, load_list, save_list
from .config import TodoConfig
from .dispatcher import Dispatcher
from .errors import TodoError, InvalidArgument, InvalidId, StorageUnavailable
from .resolver import build_parser, resolve
from .store import Todo, TodoList

__version__ = "0.1.0"
__all__ = [
    "Action", "ActionKind",
    "Add", "Edit", "Replace", "MarkComplete", "MarkIncomplete", "Swap",
    "Remove", "RemoveComplete", "PrintAll", "PrintIncomplete",
    "COMPLETE_PREFIX", "INCOMPLETE_PREFIX", "decode", "encode", "load_list", "save_list",
    "TodoConfig",
    "Dispatcher",
    "TodoError", "InvalidArgument", "InvalidId", "StorageUnavailable",
    "build_parser", "resolve",
    "Todo", "TodoList",
]

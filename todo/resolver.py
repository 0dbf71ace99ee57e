"""
todo Action Resolver
====================
Turns command-line tokens into exactly one Action.

Flags are only recognized before the first positional token; everything
from there on is ids and/or description text. When several action flags
are given the first one in the order -c, -i, -e, -s, -r wins.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .actions import (
    Action, Add, Edit, MarkComplete, MarkIncomplete, PrintAll,
    PrintIncomplete, Remove, RemoveComplete, Replace, Swap,
)
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

USAGE = "%(prog)s [-c|-i|-e|-s|-r|-h] [id...] [desc...]"

HELP_TEXT = """\
command line todo list
todos are stored at {storage_path}

  desc...          add new todo
  -c               print also completed todos
  -c id...         mark specified todos as complete
  -i id...         mark specified todos as incomplete
  -e id desc...    edit description of specified todo
  -e id /sub/rep/  replace substring sub with rep in description of specified todo
  -s id id         swap position of specified todos
  -r               remove completed todos
  -r id...         remove specified todos
  -h               show usage message
"""

# Action flags, highest priority first
ACTION_FLAGS = ("c", "i", "e", "s", "r")


def build_parser(storage_path: str = "~/.todo") -> argparse.ArgumentParser:
    """Create the command-line parser. The storage path is only shown in help."""
    parser = argparse.ArgumentParser(
        prog="todo",
        usage=USAGE,
        description=HELP_TEXT.format(storage_path=storage_path),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-c", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("-i", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("-e", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("-s", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("-r", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def resolve(argv: Sequence[str], parser: Optional[argparse.ArgumentParser] = None) -> Action:
    """Parse argv (without the program name) into an Action.

    Unknown flags and -h are handled by argparse, which exits. A leading
    "--" ends the flags and is dropped.
    """
    parser = parser or build_parser()
    ns = parser.parse_args(list(argv))
    flags = {name for name in ACTION_FLAGS if getattr(ns, name)}
    args = ns.args
    if args[:1] == ["--"]:  # end of flags
        args = args[1:]
    action = resolve_tokens(flags, args)
    logger.debug("resolved %s from %r", action, list(argv))
    return action


def resolve_tokens(flags: set[str] | frozenset[str], args: Sequence[str]) -> Action:
    """Pick the action for the given set of flags and positional tokens."""
    args = list(args)

    if "c" in flags:
        if not args:
            return PrintAll()
        return MarkComplete(parse_ids(args))

    if "i" in flags:
        return MarkIncomplete(parse_ids(args))

    if "e" in flags:
        (todo_id,) = parse_ids(args, expected=1)
        description = parse_description(args[1:])
        parts = description.split("/")
        if len(parts) == 4 and parts[0] == "" and parts[3] == "":  # /sub/rep/
            return Replace(todo_id, parts[1], parts[2])
        return Edit(todo_id, description)

    if "s" in flags:
        first, second = parse_ids(args, expected=2)
        return Swap(first, second)

    if "r" in flags:
        if not args:
            return RemoveComplete()
        return Remove(parse_ids(args))

    if not args:
        return PrintIncomplete()
    return Add(parse_description(args))


# ─────────────────────────────────────────────────────────────
#  Operand parsing
# ─────────────────────────────────────────────────────────────

def parse_id(token: str) -> int:
    """Parse a base-10 integer id (a leading sign is allowed)."""
    digits = token[1:] if token[:1] in "+-" else token
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidArgument(f'invalid id "{token}"')
    return int(token)


def parse_ids(tokens: Sequence[str], expected: Optional[int] = None) -> tuple[int, ...]:
    """Parse ids from the front of tokens.

    With expected set, exactly that many ids are taken and the remaining
    tokens are left alone; otherwise every token must be an id.
    """
    if expected is not None:
        tokens = tokens[:expected]
    ids = tuple(parse_id(token) for token in tokens)
    if expected is not None and len(ids) != expected:
        raise InvalidArgument(f"expected {expected} ids but got {len(ids)}")
    return ids


def parse_description(tokens: Sequence[str]) -> str:
    description = " ".join(tokens)
    if not description:
        raise InvalidArgument("missing description")
    return description

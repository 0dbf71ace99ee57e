"""
todo CLI
========
Entry point for the command-line todo list.

Usage:
    todo buy milk             # add a todo
    todo                      # show incomplete todos
    todo -c                   # show all todos
    todo -c 0 2               # mark todos 0 and 2 as complete
    todo -e 0 /milk/bread/    # replace "milk" with "bread" in todo 0
    todo -r                   # remove completed todos

Environment:
    TODO_FILE, TODO_LOG_LEVEL (see todo.config)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import TodoConfig
from .dispatcher import Dispatcher
from .errors import TodoError
from .log import setup_logging
from .resolver import build_parser, resolve

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one todo command. Returns the process exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if hasattr(sys.stdout, "reconfigure"):
        # descriptions may carry raw non-UTF-8 bytes from argv or the storage file
        sys.stdout.reconfigure(errors="surrogateescape")

    try:
        config = TodoConfig.from_env()
        setup_logging(config.log_level)

        parser = build_parser(str(config.storage_path))
        action = resolve(argv, parser)

        Dispatcher(config.storage_path).run(action)
    except TodoError as e:
        logger.debug("aborting", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

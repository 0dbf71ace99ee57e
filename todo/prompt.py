"""
todo Confirmation Prompt
========================
Blocking yes/no question on the terminal. Anything other than "y" or
"yes" (case-insensitive), including EOF or a read error, is a "no".
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

AFFIRMATIVE = frozenset({"y", "yes"})


def ask_yes_no(question: str, stdin: Optional[TextIO] = None,
               stdout: Optional[TextIO] = None) -> bool:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(f"{question} [y/N]: ")
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError):
        return False

    return line.strip().lower() in AFFIRMATIVE

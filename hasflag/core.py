"""Check whether a command-line flag is present in an argument vector.

The search honours the conventional ``--`` terminator: a flag that only
appears after ``--`` is a positional value, not an active option.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .errors import InvalidFlagError

__all__ = ["TERMINATOR", "full_flag", "has_flag"]

TERMINATOR = "--"


def full_flag(flag: str) -> str:
    """Return the token actually searched for when checking ``flag``.

    ``-x`` and ``--long`` are used verbatim, ``x`` becomes ``-x`` and any
    longer name (including the empty string) gets a ``--`` prefix.
    """

    if not isinstance(flag, str):
        raise InvalidFlagError(flag)
    if flag.startswith("-"):
        return flag
    if len(flag) == 1:
        return "-" + flag
    return "--" + flag


def _index(argv: Sequence[str], token: str) -> int:
    try:
        return argv.index(token)
    except ValueError:
        return -1


def has_flag(flag: str, argv: Optional[Sequence[str]] = None) -> bool:
    """Return ``True`` when ``flag`` is present and precedes any ``--``.

    ``argv`` defaults to ``sys.argv`` as it is at call time. Nothing is
    sliced off the front; pass ``sys.argv[1:]`` to skip the script name.
    A flag of ``"--"`` (or ``""``, which derives the same token) is the
    terminator itself, so it is never reported present.
    """

    token = full_flag(flag)
    if argv is None:
        argv = sys.argv

    position = _index(argv, token)
    if position == -1:
        return False

    terminator = _index(argv, TERMINATOR)
    return terminator == -1 or position < terminator

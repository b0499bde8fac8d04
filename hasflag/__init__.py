"""Check whether a command-line flag is present, honouring ``--``."""

from __future__ import annotations

from .core import TERMINATOR, full_flag, has_flag
from .errors import BenchmarkMismatchError, HasFlagError, InvalidFlagError
from .version import __version__

__all__ = [
    "TERMINATOR",
    "BenchmarkMismatchError",
    "HasFlagError",
    "InvalidFlagError",
    "__version__",
    "full_flag",
    "has_flag",
]

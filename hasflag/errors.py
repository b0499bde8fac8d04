"""Exception types raised by hasflag."""

from __future__ import annotations

__all__ = ["HasFlagError", "InvalidFlagError", "BenchmarkMismatchError"]


class HasFlagError(Exception):
    """Base class for hasflag errors."""


class InvalidFlagError(HasFlagError, TypeError):
    """Raised when the flag name is not a string."""

    def __init__(self, flag: object) -> None:
        super().__init__(f"flag must be a str, not {type(flag).__name__}")
        self.flag = flag


class BenchmarkMismatchError(HasFlagError):
    """Raised when the two benchmarked variants disagree on a scenario."""

    def __init__(self, scenario: str, flag: str, reference: bool, optimized: bool) -> None:
        super().__init__(
            f"variants disagree on {scenario!r} for flag {flag!r}: "
            f"reference={reference} optimized={optimized}"
        )
        self.scenario = scenario
        self.flag = flag
        self.reference = reference
        self.optimized = optimized

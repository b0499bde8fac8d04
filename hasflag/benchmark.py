"""Time the optimized ``has_flag`` against the straightforward formulation.

Both variants must give the same answer for every scenario; agreement is
checked before any timing starts.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .colors import style
from .config import DEFAULT_ITERATIONS, DEFAULT_WARMUP
from .core import has_flag
from .errors import BenchmarkMismatchError

__all__ = [
    "DEFAULT_SCENARIOS",
    "BenchmarkReport",
    "Scenario",
    "Timing",
    "check_agreement",
    "filter_scenarios",
    "has_flag_reference",
    "render_report",
    "run_benchmark",
    "time_variant",
]

_LOGGER = logging.getLogger("hasflag.benchmark")

Variant = Callable[[str, Sequence[str]], bool]
Clock = Callable[[], float]


def has_flag_reference(flag: str, argv: Sequence[str]) -> bool:
    """Baseline variant: always searches for both tokens."""

    prefix = "" if flag.startswith("-") else ("-" if len(flag) == 1 else "--")
    position = argv.index(prefix + flag) if prefix + flag in argv else -1
    terminator = argv.index("--") if "--" in argv else -1
    return position != -1 and (terminator == -1 or position < terminator)


@dataclass(frozen=True)
class Scenario:
    name: str
    argv: Tuple[str, ...]
    flag: Optional[str] = None
    cycle_flags: Tuple[str, ...] = ()
    repeated: bool = False

    def flags(self) -> Tuple[str, ...]:
        if self.cycle_flags:
            return self.cycle_flags
        if self.flag is None:
            raise ValueError(f"scenario {self.name!r} has no flag to check")
        return (self.flag,)


def _long_flags(start: int, stop: int) -> Tuple[str, ...]:
    return tuple(f"--flag{i}" for i in range(start, stop + 1))


DEFAULT_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("Short flag in small argv", ("-f", "-u", "-b"), "u"),
    Scenario("Long flag in small argv", ("--foo", "--unicorn", "--bar"), "unicorn"),
    Scenario("Flag with value", ("--foo", "--unicorn=rainbow", "--bar"), "unicorn=rainbow"),
    Scenario("Flag before terminator", ("--unicorn", "--", "--foo"), "unicorn"),
    Scenario("Flag after terminator (not found)", ("--foo", "--", "--unicorn"), "unicorn"),
    Scenario("Large argv (20 flags)", _long_flags(1, 20), "flag15"),
    Scenario(
        "Large argv with terminator",
        _long_flags(1, 5) + ("--",) + _long_flags(6, 10),
        "flag3",
    ),
    Scenario("Flag not found in large argv", _long_flags(1, 10), "notfound"),
    Scenario(
        "Repeated checks (same argv, same flag)",
        ("--foo", "--bar", "--baz"),
        "bar",
        repeated=True,
    ),
    Scenario(
        "Repeated checks (same argv, different flags)",
        ("--foo", "--bar", "--baz", "--qux", "--quux"),
        cycle_flags=("foo", "bar", "baz", "qux", "quux"),
        repeated=True,
    ),
)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return float("inf") if numerator > 0 else 1.0
    return numerator / denominator


@dataclass
class Timing:
    scenario: str
    reference_ms: float
    optimized_ms: float

    @property
    def improvement(self) -> float:
        """Percentage of reference time saved by the optimized variant."""
        if self.reference_ms == 0:
            return 0.0
        return (self.reference_ms - self.optimized_ms) / self.reference_ms * 100

    @property
    def speedup(self) -> float:
        return _ratio(self.reference_ms, self.optimized_ms)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario": self.scenario,
            "reference_ms": self.reference_ms,
            "optimized_ms": self.optimized_ms,
            "improvement": self.improvement,
            "speedup": self.speedup if math.isfinite(self.speedup) else None,
        }


@dataclass
class BenchmarkReport:
    iterations: int
    timings: List[Timing] = field(default_factory=list)

    @property
    def total(self) -> Timing:
        return Timing(
            scenario="Overall",
            reference_ms=sum(t.reference_ms for t in self.timings),
            optimized_ms=sum(t.optimized_ms for t in self.timings),
        )

    def to_dict(self) -> Dict[str, Any]:
        total = self.total
        return {
            "iterations": self.iterations,
            "scenarios": [t.to_dict() for t in self.timings],
            "total": {key: value for key, value in total.to_dict().items() if key != "scenario"},
        }


def filter_scenarios(
    scenarios: Iterable[Scenario], needles: Optional[Iterable[str]] = None
) -> List[Scenario]:
    """Keep scenarios whose name contains any of ``needles`` (case-insensitive)."""
    wanted = [n.strip().lower() for n in (needles or []) if n.strip()]
    items = list(scenarios)
    if not wanted:
        return items
    return [s for s in items if any(n in s.name.lower() for n in wanted)]


def check_agreement(
    scenarios: Iterable[Scenario],
    *,
    reference: Variant = has_flag_reference,
    optimized: Variant = has_flag,
) -> None:
    for scenario in scenarios:
        for flag in scenario.flags():
            expected = reference(flag, scenario.argv)
            actual = optimized(flag, scenario.argv)
            if expected != actual:
                raise BenchmarkMismatchError(scenario.name, flag, expected, actual)


def time_variant(
    fn: Variant,
    scenario: Scenario,
    iterations: int,
    *,
    warmup: int = DEFAULT_WARMUP,
    clock: Clock = time.perf_counter,
) -> float:
    """Return the milliseconds ``fn`` needs for ``iterations`` calls."""

    flags = scenario.flags()
    argv = scenario.argv
    count = len(flags)

    for i in range(warmup):
        fn(flags[i % count], argv)

    start = clock()
    for i in range(iterations):
        fn(flags[i % count], argv)
    end = clock()
    return (end - start) * 1000.0


def run_benchmark(
    scenarios: Optional[Sequence[Scenario]] = None,
    *,
    iterations: int = DEFAULT_ITERATIONS,
    warmup: int = DEFAULT_WARMUP,
    clock: Clock = time.perf_counter,
    reference: Variant = has_flag_reference,
    optimized: Variant = has_flag,
) -> BenchmarkReport:
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    if warmup < 0:
        raise ValueError("warmup must not be negative")
    items = list(DEFAULT_SCENARIOS if scenarios is None else scenarios)
    check_agreement(items, reference=reference, optimized=optimized)

    report = BenchmarkReport(iterations=iterations)
    for scenario in items:
        _LOGGER.debug("timing %r (%d iterations)", scenario.name, iterations)
        reference_ms = time_variant(reference, scenario, iterations, warmup=warmup, clock=clock)
        optimized_ms = time_variant(optimized, scenario, iterations, warmup=warmup, clock=clock)
        timing = Timing(scenario.name, reference_ms, optimized_ms)
        _LOGGER.debug(
            "%r: reference=%.2fms optimized=%.2fms", scenario.name, reference_ms, optimized_ms
        )
        report.timings.append(timing)
    return report


def _improvement_line(timing: Timing) -> str:
    value = timing.improvement
    text = f"{value:.2f}% faster"
    return style(text, "faster" if value >= 0 else "slower")


def render_report(report: BenchmarkReport) -> str:
    """Format ``report`` for the console."""
    lines: List[str] = [
        style("Has-Flag Performance Benchmark", "heading"),
        "==============================",
        "",
        f"Iterations per test: {report.iterations:,}",
        "",
    ]
    for timing in report.timings:
        lines.extend(
            [
                style(f"Scenario: {timing.scenario}", "scenario"),
                f"  Original:  {timing.reference_ms:.2f}ms",
                f"  Optimized: {timing.optimized_ms:.2f}ms",
                f"  Improvement: {_improvement_line(timing)}",
                f"  Speedup: {timing.speedup:.2f}x",
                "",
            ]
        )
    total = report.total
    lines.extend(
        [
            style("Overall Results", "heading"),
            "===============",
            f"Total Original Time:  {total.reference_ms:.2f}ms",
            f"Total Optimized Time: {total.optimized_ms:.2f}ms",
            f"Overall Improvement: {_improvement_line(total)}",
            f"Overall Speedup: {total.speedup:.2f}x",
        ]
    )
    return "\n".join(lines)

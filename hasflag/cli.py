"""Command-line entrypoint for the hasflag benchmark."""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from .benchmark import DEFAULT_SCENARIOS, filter_scenarios, render_report, run_benchmark
from .colors import style
from .config import get_runtime_config
from .errors import BenchmarkMismatchError
from .version import __version__

_LOGGER = logging.getLogger("hasflag.cli")


def _positive_int(value: str) -> int:
    try:
        number = int(value.replace("_", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value.replace("_", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def build_parser(prog: str = "hasflag-bench") -> argparse.ArgumentParser:
    """Construct the benchmark argument parser."""
    config = get_runtime_config()
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Compare the optimized has_flag against the reference formulation.",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=config.iterations,
        metavar="N",
        help=f"Timed calls per scenario and variant (default: {config.iterations:,}).",
    )
    parser.add_argument(
        "--warmup",
        type=_non_negative_int,
        default=config.warmup,
        metavar="N",
        help=f"Untimed calls before each measurement (default: {config.warmup:,}).",
    )
    parser.add_argument(
        "--scenario",
        action="append",
        metavar="TEXT",
        help="Only run scenarios whose name contains TEXT (repeatable).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List scenario names and exit.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of a formatted summary.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None, *, prog: str = "hasflag-bench") -> argparse.Namespace:
    parser = build_parser(prog=prog)
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_runtime_config().log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the benchmark and print the report."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    scenarios = filter_scenarios(DEFAULT_SCENARIOS, args.scenario)
    if not scenarios:
        print(style("No scenarios match the given filter.", "warning"))
        return 2
    if args.list:
        for scenario in scenarios:
            suffix = " (repeated)" if scenario.repeated else ""
            print(f"{scenario.name}{suffix}")
        return 0

    _LOGGER.info("running %d scenarios", len(scenarios))
    try:
        report = run_benchmark(scenarios, iterations=args.iterations, warmup=args.warmup)
    except BenchmarkMismatchError as exc:
        _LOGGER.error("%s", exc)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, allow_nan=False))
    else:
        print(render_report(report))
    return 0


__all__ = ["build_parser", "parse_args", "main"]

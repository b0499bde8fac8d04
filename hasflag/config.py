"""Runtime configuration for the hasflag benchmark runner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_WARMUP",
    "BenchConfig",
    "get_runtime_config",
    "reload_config",
]

ITERATIONS_ENV = "HASFLAG_BENCH_ITERATIONS"
WARMUP_ENV = "HASFLAG_BENCH_WARMUP"
LOG_LEVEL_ENV = "HASFLAG_LOG_LEVEL"

DEFAULT_ITERATIONS = 500_000
DEFAULT_WARMUP = 1_000
DEFAULT_LOG_LEVEL = "WARNING"

_LOGGER = logging.getLogger("hasflag.config")


@dataclass(slots=True)
class BenchConfig:
    iterations: int = DEFAULT_ITERATIONS
    warmup: int = DEFAULT_WARMUP
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "BenchConfig":
        return cls(
            iterations=_env_int(ITERATIONS_ENV, DEFAULT_ITERATIONS, minimum=1),
            warmup=_env_int(WARMUP_ENV, DEFAULT_WARMUP, minimum=0),
            log_level=_env_level(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        )


def _env_int(key: str, default: int, *, minimum: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip().replace("_", ""))
    except ValueError:
        _LOGGER.warning("Ignoring %s=%r: not an integer", key, raw)
        return default
    if value < minimum:
        _LOGGER.warning("Ignoring %s=%r: must be >= %d", key, raw, minimum)
        return default
    return value


def _env_level(key: str, default: str) -> str:
    raw = (os.getenv(key) or "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        _LOGGER.warning("Ignoring %s=%r: unknown log level", key, raw)
        return default
    return raw


@lru_cache(maxsize=1)
def get_runtime_config() -> BenchConfig:
    """Return the cached environment configuration."""

    return BenchConfig.from_env()


def reload_config() -> BenchConfig:
    """Drop the cached configuration and read the environment again."""

    get_runtime_config.cache_clear()
    return get_runtime_config()

from __future__ import annotations

import pytest

from hasflag.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_WARMUP,
    BenchConfig,
    get_runtime_config,
    reload_config,
)


def test_config_defaults() -> None:
    config = get_runtime_config()
    assert config == BenchConfig()
    assert config.iterations == DEFAULT_ITERATIONS
    assert config.warmup == DEFAULT_WARMUP
    assert config.log_level == "WARNING"


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HASFLAG_BENCH_ITERATIONS", "10_000")
    monkeypatch.setenv("HASFLAG_BENCH_WARMUP", "0")
    monkeypatch.setenv("HASFLAG_LOG_LEVEL", "debug")
    config = reload_config()
    assert config.iterations == 10000
    assert config.warmup == 0
    assert config.log_level == "DEBUG"


def test_config_is_cached_until_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_runtime_config()
    monkeypatch.setenv("HASFLAG_BENCH_ITERATIONS", "5")
    assert get_runtime_config() is first
    assert reload_config().iterations == 5


@pytest.mark.parametrize(
    "key, value",
    [
        ("HASFLAG_BENCH_ITERATIONS", "lots"),
        ("HASFLAG_BENCH_ITERATIONS", "0"),
        ("HASFLAG_BENCH_WARMUP", "-3"),
        ("HASFLAG_LOG_LEVEL", "chatty"),
    ],
)
def test_config_invalid_values_fall_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, key: str, value: str
) -> None:
    monkeypatch.setenv(key, value)
    with caplog.at_level("WARNING", logger="hasflag.config"):
        config = reload_config()
    assert config == BenchConfig()
    assert key in caplog.text

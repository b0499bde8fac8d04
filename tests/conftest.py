"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _hasflag_env_defaults(monkeypatch):
    """Keep benchmark settings and colour output independent of the host shell."""

    from hasflag.config import reload_config

    for key in ("HASFLAG_BENCH_ITERATIONS", "HASFLAG_BENCH_WARMUP", "HASFLAG_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    reload_config()
    yield
    reload_config()

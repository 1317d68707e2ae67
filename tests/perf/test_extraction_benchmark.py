"""Performance sentinels (gated)."""

from __future__ import annotations

import os

import pytest

from classheader.api import read_header


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_LARGE_DATA_MS = _budget_from_env("CLASSHEADER_MAX_LARGE_DATA_MS", 50.0)
MAX_MANY_STRINGS_MS = _budget_from_env("CLASSHEADER_MAX_MANY_STRINGS_MS", 50.0)


def _assert_budget(benchmark, max_ms: float) -> None:
    mean_ms = benchmark.stats.stats.mean * 1000.0
    assert mean_ms < max_ms, f"Mean {mean_ms:.2f} ms exceeded budget {max_ms:.2f} ms"


@pytest.mark.perf
def test_large_data_array(benchmark):
    fields = {"k": 1, "mv": [1, 1, 0], "d1": ["x" * 64] * 20_000}
    header = benchmark(read_header, fields)
    assert len(header.data) == 20_000
    _assert_budget(benchmark, MAX_LARGE_DATA_MS)


@pytest.mark.perf
def test_many_strings_incompatible(benchmark):
    fields = {"k": 1, "mv": [9, 0, 0], "d1": ["p"], "d2": [str(i) for i in range(20_000)]}
    header = benchmark(read_header, fields)
    assert header.incompatible_data == ("p",)
    _assert_budget(benchmark, MAX_MANY_STRINGS_MS)

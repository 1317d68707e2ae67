"""Pytest configuration for tests.

Gates the extraction timing sentinels in tests/perf behind --run-perf and
keeps the version-check environment switch out of every test unless the
test sets it itself. No sys.path hacks - tests import the installed package.
"""

import pytest

from classheader.config import SKIP_METADATA_VERSION_CHECK_ENV


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run extraction timing sentinels (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@pytest.fixture(autouse=True)
def _clean_version_check_env(monkeypatch):
    """Extractors read the skip switch from the environment; start every test without it."""
    monkeypatch.delenv(SKIP_METADATA_VERSION_CHECK_ENV, raising=False)

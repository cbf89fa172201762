"""Shared pytest configuration for the SwagLabs suite.

This module provides:
- Registration of the suite's pytest plugin (fixtures, reporter, sharding)
- Auto-skip of browser tests unless explicitly requested
- Environment isolation for browser-free tests

Run the browser scenarios explicitly with:
    pytest tests/e2e -m e2e
"""

import os
from collections.abc import Generator

import pytest
import structlog

pytest_plugins = ["swaglabs.testing.fixtures", "pytester"]


# =============================================================================
# Collection
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip e2e tests unless explicitly requested.

    They need a browser and network access to the shop, so they only run
    when selected with -m e2e or by pointing pytest at tests/e2e.
    """
    markexpr = config.getoption("-m", default="")
    explicit_e2e = "e2e" in markexpr
    running_e2e_path = any("e2e" in str(arg) for arg in config.args)

    skip_e2e = pytest.mark.skip(
        reason="e2e tests drive a real browser. Run with: pytest tests/e2e -m e2e"
    )

    for item in items:
        if "e2e" in item.keywords and not explicit_e2e and not running_e2e_path:
            item.add_marker(skip_e2e)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove SWAGLABS_* and CI variables so settings see their defaults."""
    for key in list(os.environ):
        if key.startswith("SWAGLABS_") or key == "CI":
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_structlog_config() -> Generator[None, None, None]:
    """Undo structlog configuration done by a test (CLI main, pytester runs).

    configure_logging binds the current sys.stderr, which inside a test is a
    capture stream that is closed once the test ends.
    """
    config = structlog.get_config()
    yield
    structlog.configure(**config)

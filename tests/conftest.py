"""
Pytest configuration shared by unit and e2e tests
"""
import importlib.util
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _playwright_available() -> bool:
    return importlib.util.find_spec("playwright.sync_api") is not None


def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line("markers", "e2e: browser campaigns (skipped without playwright)")
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip e2e tests if playwright is not installed."""
    if _playwright_available():
        return

    skip_e2e = pytest.mark.skip(reason="Playwright not installed")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

"""
Playwright E2E Fixtures

A campaign is a test module whose steps share one browser context and one
tab, in order. The context lives for the whole module; the Playwright
browser itself comes from pytest-playwright and lives for the session.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Generator

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import Browser, BrowserContext, Page

from bo_e2e.config import E2EConfig
from bo_e2e.utils import helpers
from bo_e2e.utils.test_context import get_context_item

logger = logging.getLogger(__name__)


# =============================================================================
# Shop Fixtures
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def shop_server() -> str:
    """
    Make sure the shop answers before any browser is launched.

    Campaigns are skipped rather than failed when no shop is running.
    """
    print(f"\n[E2E] Waiting for shop at {E2EConfig.BO_URL}")
    if not helpers.wait_for_shop(E2EConfig.BO_URL, E2EConfig.SHOP_WAIT):
        pytest.skip(f"Shop not reachable at {E2EConfig.BO_URL}")

    logger.info("E2E configuration: %s", E2EConfig.to_dict())
    return E2EConfig.BO_URL


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: Dict) -> Dict[str, Any]:
    """Browser launch arguments."""
    args = {**browser_type_launch_args, "slow_mo": E2EConfig.SLOW_MO}
    if not E2EConfig.HEADLESS:
        args["headless"] = False
    return args


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: Dict) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "viewport": {"width": 1680, "height": 900},
        "ignore_https_errors": True,
        "accept_downloads": True,
    }

    if E2EConfig.RECORD_VIDEO:
        E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(E2EConfig.ARTIFACTS_DIR / "videos")

    return args


@pytest.fixture(scope="module")
def bo_context(
    shop_server: str, browser: Browser, browser_context_args: Dict
) -> Generator[BrowserContext, None, None]:
    """One browser context per campaign."""
    context = helpers.create_browser_context(browser, **browser_context_args)

    yield context

    helpers.close_browser_context(context)


@pytest.fixture(scope="module")
def bo_page(bo_context: BrowserContext) -> Page:
    """The tab every step of a campaign runs in."""
    return helpers.new_tab(bo_context)


# =============================================================================
# Failure Artifacts
# =============================================================================


@pytest.fixture(autouse=True)
def screenshot_on_failure(request) -> Generator[None, None, None]:
    """Capture a screenshot of the campaign tab when a step fails."""
    yield

    rep = getattr(request.node, "rep_call", None)
    if rep is None or not rep.failed or not E2EConfig.SCREENSHOT_ON_FAILURE:
        return
    if "bo_page" not in request.fixturenames:
        return

    page = request.getfixturevalue("bo_page")
    E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    test_name = get_context_item(request, "testIdentifier", request.node.name)
    base_context = get_context_item(request, "baseContext", "e2e")
    screenshot_path = E2EConfig.ARTIFACTS_DIR / f"failure_{base_context}_{test_name}_{timestamp}.png"
    page.screenshot(path=str(screenshot_path), full_page=True)
    print(f"\n[E2E] Screenshot saved: {screenshot_path}")

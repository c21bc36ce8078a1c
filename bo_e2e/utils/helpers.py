"""
Browser lifecycle helpers

Each campaign owns one browser context and one tab for its whole run.
"""
import logging
import time

import requests
from playwright.sync_api import Browser, BrowserContext, Page

from bo_e2e.config import E2EConfig

logger = logging.getLogger(__name__)


def create_browser_context(browser: Browser, **context_args) -> BrowserContext:
    """Open a browser context with the configured timeouts."""
    context = browser.new_context(**context_args)
    context.set_default_timeout(E2EConfig.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)
    return context


def new_tab(context: BrowserContext) -> Page:
    return context.new_page()


def close_browser_context(context: BrowserContext) -> None:
    """Close every open tab, then the context itself."""
    for page in list(context.pages):
        page.close()
    context.close()


def wait_for_shop(url: str, max_wait: int = E2EConfig.SHOP_WAIT) -> bool:
    """
    Poll the shop until it answers.

    Any status below 500 counts as up: the BO answers the login page with a
    redirect or a 200, a broken install answers 5xx.
    """
    # Probe at least once, even with no wait budget
    for _ in range(max(1, max_wait * 2)):
        try:
            resp = requests.get(url, timeout=1)
            if resp.status_code < 500:
                logger.info("Shop is up at %s", url)
                return True
            logger.debug("Shop answered %s, retrying", resp.status_code)
        except requests.exceptions.RequestException:
            pass
        time.sleep(0.5)

    logger.warning("Shop at %s did not answer within %ss", url, max_wait)
    return False

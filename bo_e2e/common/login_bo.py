"""
Shared back-office login step.
"""
import logging

from playwright.sync_api import Page

from bo_e2e.config import E2EConfig
from bo_e2e.pages import DashboardPage, LoginPage
from bo_e2e.utils.test_context import add_context_item

logger = logging.getLogger(__name__)

BASE_CONTEXT = "loginBO"


def login_bo(request, page: Page) -> None:
    """Log into the back office and check the dashboard is displayed."""
    add_context_item(request, "testIdentifier", "loginBO", BASE_CONTEXT)

    login_page = LoginPage(page)
    login_page.navigate()
    login_page.successful_login(E2EConfig.EMAIL, E2EConfig.PASSWORD)

    dashboard_page = DashboardPage(page)
    page_title = dashboard_page.get_page_title()
    assert DashboardPage.PAGE_TITLE in page_title, f"Unexpected title after login: {page_title}"
    logger.info("Logged into the back office as %s", E2EConfig.EMAIL)

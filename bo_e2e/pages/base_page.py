"""
Base Page Object

Thin wrapper over a Playwright page shared by every page object.
"""
import logging

from playwright.sync_api import Page

from bo_e2e.config import E2EConfig

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, base_url: str = E2EConfig.BO_URL):
        self.page = page
        self.base_url = base_url

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        url = f"{self.base_url}{path}"
        logger.debug("Navigating to %s", url)
        self.page.goto(url)

    def get_page_title(self) -> str:
        """Get the document title."""
        return self.page.title()

    def click_and_wait_for_navigation(self, selector: str) -> None:
        """Click an element that triggers a full page load."""
        with self.page.expect_navigation():
            self.page.click(selector)
        self.wait_for_load_state()

    # =========================================================================
    # Element Interaction
    # =========================================================================

    def click(self, selector: str, timeout: int = None) -> None:
        self.page.click(selector, timeout=timeout)

    def fill(self, selector: str, value: str) -> None:
        """Replace the content of an input field."""
        self.page.fill(selector, value)

    def select(self, selector: str, label: str) -> None:
        """Select a dropdown option by its visible label."""
        self.page.select_option(selector, label=label)

    def hover(self, selector: str) -> None:
        self.page.hover(selector)

    # =========================================================================
    # Element State
    # =========================================================================

    def is_visible(self, selector: str) -> bool:
        return self.page.is_visible(selector)

    def get_text(self, selector: str) -> str:
        """Get element text content, stripped."""
        return (self.page.text_content(selector) or "").strip()

    def count(self, selector: str) -> int:
        """Count matching elements."""
        return self.page.locator(selector).count()

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_selector(self, selector: str, state: str = "visible", timeout: int = None):
        """Wait for element to reach state."""
        return self.page.wait_for_selector(selector, state=state, timeout=timeout)

    def wait_for_load_state(self, state: str = "load") -> None:
        self.page.wait_for_load_state(state)

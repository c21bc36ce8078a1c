"""
Back-office Base Page

Chrome shared by every admin page: side menu, Symfony debug toolbar,
success alerts and growl notifications.
"""
import logging

from .base_page import BasePage

logger = logging.getLogger(__name__)


class BOBasePage(BasePage):
    """Base class for back-office page objects."""

    PAGE_TITLE = ""

    # Messages
    SUCCESSFUL_UPDATE_MESSAGE = "Successful update"

    # Symfony debug toolbar (dev mode only)
    SF_TOOLBAR_MAIN_CONTENT = "div[id*='sfToolbarMainContent']"
    SF_TOOLBAR_HIDE_BUTTON = "a[id*='sfToolbarHideButton']"

    # Notifications
    ALERT_SUCCESS_BLOCK = "div.alert.alert-success:not([style*='display: none'])"
    ALERT_SUCCESS_PARAGRAPH = f"{ALERT_SUCCESS_BLOCK} div.alert-text p"
    GROWL_MESSAGE = "#growls .growl-message:last-of-type"

    # =========================================================================
    # Side menu
    # =========================================================================

    def go_to_sub_menu(self, parent_selector: str, link_selector: str) -> None:
        """Open a parent menu entry and follow one of its links."""
        logger.info("Opening sub menu %s > %s", parent_selector, link_selector)
        self.click(parent_selector)
        # A collapsed sidebar opens the sub menu on hover only
        if not self.is_visible(link_selector):
            self.hover(parent_selector)
        self.wait_for_selector(link_selector)
        self.click_and_wait_for_navigation(link_selector)

    # =========================================================================
    # Debug toolbar
    # =========================================================================

    def close_sf_toolbar(self) -> None:
        """Hide the Symfony debug toolbar when the shop runs in dev mode."""
        if self.is_visible(self.SF_TOOLBAR_MAIN_CONTENT):
            self.click(self.SF_TOOLBAR_HIDE_BUTTON)
            logger.debug("Symfony toolbar hidden")

    # =========================================================================
    # Notifications
    # =========================================================================

    def get_alert_success_block_paragraph_content(self) -> str:
        """Text of the green alert shown after a form is saved."""
        self.wait_for_selector(self.ALERT_SUCCESS_PARAGRAPH)
        return self.get_text(self.ALERT_SUCCESS_PARAGRAPH)

    def get_growl_message_content(self) -> str:
        """Text of the latest growl notification."""
        self.wait_for_selector(self.GROWL_MESSAGE)
        return self.get_text(self.GROWL_MESSAGE)

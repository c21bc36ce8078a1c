"""
Login Page Object

Back-office employee login form.
"""
import logging

from .bo_base_page import BOBasePage

logger = logging.getLogger(__name__)


class LoginPage(BOBasePage):
    """Page object for the back-office login page."""

    # Selectors
    EMAIL_INPUT = "#email"
    PASSWORD_INPUT = "#passwd"
    SUBMIT_BUTTON = "#submit_login"

    def navigate(self) -> "LoginPage":
        """Open the back office, which lands on the login form."""
        self.goto()
        self.wait_for_selector(self.EMAIL_INPUT)
        return self

    def successful_login(self, email: str, password: str) -> None:
        """Fill the form and wait for the dashboard to load."""
        logger.info("Logging in as %s", email)
        self.fill(self.EMAIL_INPUT, email)
        self.fill(self.PASSWORD_INPUT, password)
        self.click_and_wait_for_navigation(self.SUBMIT_BUTTON)


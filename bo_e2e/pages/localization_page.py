"""
Localization Page Object

International > Localization, whose tabs include Currencies.
"""
import logging

from .bo_base_page import BOBasePage

logger = logging.getLogger(__name__)


class LocalizationPage(BOBasePage):
    """Page object for the localization settings page."""

    PAGE_TITLE = "Localization"

    CURRENCIES_SUB_TAB = "#subtab-AdminCurrencies"

    def go_to_sub_tab_currencies(self) -> None:
        logger.info("Opening the currencies tab")
        self.click_and_wait_for_navigation(self.CURRENCIES_SUB_TAB)

"""
Add / Edit Currency Page Object

The currency form embeds a grid of CLDR formats, one per language. Each
format can be customised (symbol, number pattern) in a modal or reset to
the CLDR default.
"""
import logging

from .bo_base_page import BOBasePage
from .currencies_page import CurrenciesPage

logger = logging.getLogger(__name__)


class AddCurrencyPage(BOBasePage):
    """Page object for the add/edit currency form."""

    RESET_CURRENCY_FORMAT_MESSAGE = "Format reset successfully"

    # Form
    CURRENCY_FORM = "#currency_form"
    SAVE_BUTTON = f"{CURRENCY_FORM} #save-button"

    # Currency formats grid
    FORMATS_TABLE = "#currency_formatter table"
    FORMATS_ROWS = f"{FORMATS_TABLE} tbody tr"

    # Format edition modal
    FORMAT_MODAL = "#currency_formatter .modal.show"
    FORMAT_SYMBOL_INPUT = f"{FORMAT_MODAL} #custom-symbol"
    FORMAT_SAVE_BUTTON = f"{FORMAT_MODAL} .modal-footer button.btn-primary"

    @staticmethod
    def page_title_edit(name: str) -> str:
        return f"Editing currency {name}"

    @classmethod
    def format_row(cls, row: int) -> str:
        return f"{cls.FORMATS_ROWS}:nth-child({row})"

    @classmethod
    def format_column(cls, row: int, column: int) -> str:
        return f"{cls.format_row(row)} td:nth-child({column})"

    @classmethod
    def format_edit_button(cls, row: int) -> str:
        return f"{cls.format_row(row)} td.actions .btn-group button:nth-child(1)"

    @classmethod
    def format_reset_button(cls, row: int) -> str:
        return f"{cls.format_row(row)} td.actions .btn-group button:nth-child(2)"

    # =========================================================================
    # Currency formats
    # =========================================================================

    def get_number_of_element_in_grid(self) -> int:
        """Number of currency formats (one per installed language)."""
        self.wait_for_selector(self.FORMATS_TABLE)
        return self.count(self.FORMATS_ROWS)

    def get_text_column_from_table(self, row: int, column: int) -> str:
        return self.get_text(self.format_column(row, column))

    def edit_currency_format(self, row: int) -> bool:
        """Open the format modal of a row and report whether it showed up."""
        logger.info("Editing currency format in row %d", row)
        self.click(self.format_edit_button(row))
        self.wait_for_selector(self.FORMAT_MODAL)
        return self.is_visible(self.FORMAT_MODAL)

    def set_currency_format_symbol(self, symbol: str) -> None:
        self.fill(self.FORMAT_SYMBOL_INPUT, symbol)

    def save_currency_format(self) -> None:
        """Apply the modal changes to the formats grid (not persisted yet)."""
        self.click(self.FORMAT_SAVE_BUTTON)
        self.wait_for_selector(self.FORMAT_MODAL, state="hidden")

    def reset_currency_format(self, row: int) -> str:
        """Reset a format to its CLDR default and return the growl text."""
        logger.info("Resetting currency format in row %d", row)
        self.click(self.format_reset_button(row))
        return self.get_growl_message_content()

    # =========================================================================
    # Form
    # =========================================================================

    def save_currency_form(self) -> str:
        """Submit the form and return the alert shown on the currencies grid."""
        logger.info("Saving currency form")
        self.click_and_wait_for_navigation(self.SAVE_BUTTON)
        return CurrenciesPage(self.page, self.base_url).get_alert_success_block_paragraph_content()

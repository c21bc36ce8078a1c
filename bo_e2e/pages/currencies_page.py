"""
Currencies Page Object

Encapsulates the currencies grid: filters, columns and row actions.
"""
import logging
import re

from .bo_base_page import BOBasePage

logger = logging.getLogger(__name__)


class CurrenciesPage(BOBasePage):
    """Page object for International > Localization > Currencies."""

    PAGE_TITLE = "Currencies"

    # Grid
    GRID_PANEL = "#currency_grid_panel"
    GRID_HEADER_TITLE = f"{GRID_PANEL} h3.card-header-title"
    GRID_TABLE = "#currency_grid_table"
    FILTER_ROW = f"{GRID_TABLE} tr.column-filters"
    FILTER_SEARCH_BUTTON = f"{GRID_TABLE} .grid-search-button"
    FILTER_RESET_BUTTON = f"{GRID_TABLE} .grid-reset-button"
    TABLE_BODY = f"{GRID_TABLE} tbody"
    EMPTY_ROW = f"{TABLE_BODY} tr.empty_row"

    FILTER_TYPES = ("input", "select")

    @classmethod
    def filter_column(cls, filter_by: str) -> str:
        return f"{cls.FILTER_ROW} [name='currency[{filter_by}]']"

    @classmethod
    def table_row(cls, row: int) -> str:
        return f"{cls.TABLE_BODY} tr:nth-child({row})"

    @classmethod
    def table_column(cls, row: int, column: str) -> str:
        return f"{cls.table_row(row)} td.column-{column}"

    @classmethod
    def edit_row_link(cls, row: int) -> str:
        return f"{cls.table_row(row)} td.column-actions a.grid-edit-row-link"

    @staticmethod
    def parse_grid_count(header: str) -> int:
        """Extract N from a grid header such as 'Currencies (N)'."""
        match = re.search(r"\((\d+)\)", header)
        if not match:
            raise ValueError(f"No element count in grid header {header!r}")
        return int(match.group(1))

    # =========================================================================
    # Filters
    # =========================================================================

    def reset_filter(self) -> None:
        """Clear every grid filter, if any is active."""
        if self.is_visible(self.FILTER_RESET_BUTTON):
            logger.info("Resetting currency filters")
            self.click_and_wait_for_navigation(self.FILTER_RESET_BUTTON)

    def get_number_of_element_in_grid(self) -> int:
        return self.parse_grid_count(self.get_text(self.GRID_HEADER_TITLE))

    def reset_and_get_number_of_lines(self) -> int:
        self.reset_filter()
        return self.get_number_of_element_in_grid()

    def filter_table(self, filter_type: str, filter_by: str, value: str) -> None:
        """
        Filter the grid on one column.

        Args:
            filter_type: 'input' for text filters, 'select' for dropdowns
            filter_by: Grid column name (e.g. 'iso_code')
            value: Text to type, or option label to select
        """
        if filter_type not in self.FILTER_TYPES:
            raise ValueError(f"Filter {filter_type} was not found")

        logger.info("Filtering currencies on %s=%s", filter_by, value)
        selector = self.filter_column(filter_by)
        if filter_type == "input":
            self.fill(selector, value)
            self.click_and_wait_for_navigation(self.FILTER_SEARCH_BUTTON)
        else:
            # Dropdown filters submit the grid on change
            with self.page.expect_navigation():
                self.select(selector, value)
            self.wait_for_load_state()

    # =========================================================================
    # Rows
    # =========================================================================

    def get_text_column_from_table_currency(self, row: int, column: str) -> str:
        return self.get_text(self.table_column(row, column))

    def go_to_edit_currency_page(self, row: int) -> None:
        """Open the edit form of a grid row."""
        logger.info("Editing currency in row %d", row)
        self.click_and_wait_for_navigation(self.edit_row_link(row))

"""
Dashboard Page Object
"""
from .bo_base_page import BOBasePage


class DashboardPage(BOBasePage):
    """Page object for the back-office dashboard."""

    PAGE_TITLE = "Dashboard"

    # Side menu entries reachable from the dashboard
    INTERNATIONAL_PARENT_LINK = "li#subtab-AdminInternational"
    LOCALIZATION_LINK = "li#subtab-AdminParentLocalization"

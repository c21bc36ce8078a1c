"""
Page Object Models for the back office

Each page object wraps one admin page: its selectors, its actions and the
texts the campaigns assert on.
"""

from .add_currency_page import AddCurrencyPage
from .base_page import BasePage
from .bo_base_page import BOBasePage
from .currencies_page import CurrenciesPage
from .dashboard_page import DashboardPage
from .localization_page import LocalizationPage
from .login_page import LoginPage

__all__ = [
    "BasePage",
    "BOBasePage",
    "LoginPage",
    "DashboardPage",
    "LocalizationPage",
    "CurrenciesPage",
    "AddCurrencyPage",
]

"""
Demo currencies

Currencies installed with the demo data set. Symbols are the CLDR defaults
the back office falls back to when a custom format is reset.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Currency:
    name: str
    iso_code: str
    symbol: str
    exchange_rate: float = 1.0
    decimals: int = 2
    enabled: bool = True


EURO = Currency(name="Euro", iso_code="EUR", symbol="€")
US_DOLLAR = Currency(name="US Dollar", iso_code="USD", symbol="$", exchange_rate=1.08)
BRITISH_POUND = Currency(name="British Pound", iso_code="GBP", symbol="£", exchange_rate=0.86)

CURRENCIES: Dict[str, Currency] = {
    currency.iso_code: currency for currency in (EURO, US_DOLLAR, BRITISH_POUND)
}


def get_currency(iso_code: str) -> Currency:
    """Look up a demo currency by ISO code (case-insensitive)."""
    try:
        return CURRENCIES[iso_code.upper()]
    except KeyError:
        raise KeyError(f"No demo currency with ISO code {iso_code!r}") from None

"""
ISO 4217 currency codes accepted by SIPS.

SIPS identifies currencies by their numeric code; callers use the
alphabetic one.
"""

from types import MappingProxyType
from typing import Mapping

DEFAULT_CURRENCY_CODE = "978"

CURRENCY_CODES: Mapping[str, str] = MappingProxyType({
    "EUR": "978",  # Euro
    "USD": "840",  # US Dollar
    "CHF": "756",  # Swiss Franc
    "GBP": "826",  # Pound Sterling
    "CAD": "124",  # Canadian Dollar
    "JPY": "392",  # Yen
    "MXN": "484",  # Mexican Peso
    "TRY": "949",  # Turkish Lira
    "AUD": "036",  # Australian Dollar
    "NZD": "554",  # New Zealand Dollar
    "NOK": "578",  # Norwegian Krone
    "BRL": "986",  # Brazilian Real
    "ARS": "032",  # Argentine Peso
    "KHR": "116",  # Riel
    "TWD": "901",  # New Taiwan Dollar
    "SEK": "752",  # Swedish Krona
    "DKK": "208",  # Danish Krone
    "KRW": "410",  # Won
    "SGD": "702",  # Singapore Dollar
    "XPF": "953",  # CFP Franc
    "XOF": "952",  # CFA Franc BCEAO
})

# Currencies without a minor unit
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW", "XPF", "XOF"})
ZERO_DECIMAL_CODES = frozenset(CURRENCY_CODES[c] for c in ZERO_DECIMAL_CURRENCIES)


def get_currency_code(currency: str) -> str:
    """
    Get the numeric code SIPS expects for an alphabetic currency code.

    Unknown currencies fall back to the Euro.
    """
    return CURRENCY_CODES.get(currency, DEFAULT_CURRENCY_CODE)

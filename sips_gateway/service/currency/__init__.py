"""
Currency handling for the SIPS gateway.
"""

from .table import (
    CURRENCY_CODES,
    DEFAULT_CURRENCY_CODE,
    ZERO_DECIMAL_CODES,
    ZERO_DECIMAL_CURRENCIES,
    get_currency_code,
)
from .conversion import (
    convert_amount_from_gateway_format,
    convert_amount_to_gateway_format,
    to_decimal,
)

__all__ = [
    # Table
    "CURRENCY_CODES",
    "DEFAULT_CURRENCY_CODE",
    "ZERO_DECIMAL_CODES",
    "ZERO_DECIMAL_CURRENCIES",
    "get_currency_code",
    # Conversion
    "convert_amount_to_gateway_format",
    "convert_amount_from_gateway_format",
    "to_decimal",
]

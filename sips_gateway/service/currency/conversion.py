"""
Amount conversion between major units and the SIPS wire format.

SIPS expects amounts as an integer count of minor units (cents), except
for currencies that have none, which are sent as-is.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from sips_gateway.domain.exceptions import InvalidAmountException

from .table import ZERO_DECIMAL_CODES, ZERO_DECIMAL_CURRENCIES

Amount = Union[Decimal, int, float, str]

_MINOR_UNIT_EXPONENT = 2


def to_decimal(amount: Amount) -> Decimal:
    """
    Coerce an amount to Decimal.

    Floats go through their shortest repr so 19.99 stays 19.99.
    """
    if isinstance(amount, bool):
        raise InvalidAmountException(amount)
    if isinstance(amount, float):
        amount = repr(amount)
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountException(amount) from None
    if not value.is_finite():
        raise InvalidAmountException(amount)
    return value


def convert_amount_to_gateway_format(amount: Amount, currency: str) -> str:
    """
    Convert a major-unit amount to the string SIPS expects.

    Rounds half away from zero to a whole number of minor units.

    Args:
        amount: Amount in major units (e.g. 10.50 euros)
        currency: ISO 4217 alphabetic code

    Returns:
        Integer string without separator (e.g. "1050")

    Raises:
        InvalidAmountException: If the amount is not a number or has more
            digits than the decimal context can hold
    """
    value = to_decimal(amount)
    try:
        if currency not in ZERO_DECIMAL_CURRENCIES:
            value = value.scaleb(_MINOR_UNIT_EXPONENT)
        rounded = value.quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountException(amount) from None
    # -0 would print as "-0"
    return str(abs(rounded)) if rounded == 0 else str(rounded)


def convert_amount_from_gateway_format(amount: Amount, currency_code: str) -> Decimal:
    """
    Convert a SIPS amount back to major units.

    Args:
        amount: Amount as sent or returned by SIPS
        currency_code: ISO 4217 numeric code (as returned by SIPS)

    Returns:
        Amount in major units
    """
    value = to_decimal(amount)
    if currency_code in ZERO_DECIMAL_CODES:
        return value
    return value.scaleb(-_MINOR_UNIT_EXPONENT)

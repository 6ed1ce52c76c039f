"""Price parsing helpers."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from qrmenu.core.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS


_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)

# Largest value a Numeric(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES) column holds
MAX_PRICE = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES) - _QUANTUM


def price_in_range(price: Decimal) -> bool:
    """Check that a price fits the stored column."""
    return price.copy_abs() <= MAX_PRICE


def parse_price(value: Any) -> Decimal | None:
    """Parse loosely typed price input into a two-place Decimal.

    Accepts numbers and numeric strings such as ``"4.75"`` or ``" 3 "``.
    Booleans, empty strings, non-numeric text and non-finite values are
    unparseable. The sign is preserved and values beyond ``MAX_PRICE``
    come back unrounded; range checks belong to callers.

    Args:
        value: Raw value from a request body

    Returns:
        The price rounded half-up to cents, or None if unparseable

    Examples:
        >>> parse_price("4.75")
        Decimal('4.75')
        >>> parse_price("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        return None

    try:
        price = Decimal(text)
        if not price.is_finite():
            return None
        if not price_in_range(price):
            return price
        return price.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

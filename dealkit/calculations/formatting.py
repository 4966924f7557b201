"""
Display Formatting

Currency, percentage and number formatting for UI-ready output.
Rounding is half-up (away from zero), the way spreadsheets display values.
Non-finite input renders as "N/A" instead of raising.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

NOT_AVAILABLE = "N/A"

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _round_half_up(value: float, decimals: int) -> Decimal:
    exact = Decimal(value)
    # Enough digits for the integer part plus the requested decimals
    digits = len(str(int(abs(exact)))) + decimals + 2
    with localcontext() as context:
        context.prec = max(context.prec, digits)
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _to_fixed(value: float, decimals: int) -> str:
    """Fixed-point string with half-up rounding."""
    return str(_round_half_up(value, decimals))


def _group(value: float, decimals: int = 0) -> str:
    """Comma-grouped string with half-up rounding."""
    return f"{_round_half_up(value, decimals):,.{decimals}f}"


def _abbreviate(amount: float, divisor: float, suffix: str) -> str:
    formatted = _TRAILING_ZEROS.sub("", _to_fixed(amount / divisor, 3))
    return formatted + suffix


def format_currency(amount: float, is_monthly: bool = False) -> str:
    """
    Format a dollar amount with K/M notation.

    Args:
        amount: Amount to format
        is_monthly: Monthly payments always render the full comma-grouped value

    Returns:
        Formatted string, e.g. "$1.5M", "$75K", "$2,500", "-$50K"
    """
    if not _is_finite(amount):
        return NOT_AVAILABLE

    abs_amount = abs(amount)
    prefix = "-$" if amount < 0 else "$"

    if is_monthly:
        return prefix + _group(abs_amount)

    if abs_amount >= 1_000_000:
        return prefix + _abbreviate(abs_amount, 1_000_000, "M")
    if abs_amount >= 1_000:
        return prefix + _abbreviate(abs_amount, 1_000, "K")
    return prefix + _group(abs_amount)


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a decimal as a percentage (0.065 -> "6.5%")."""
    if not _is_finite(value):
        return NOT_AVAILABLE
    return _to_fixed(value * 100, decimals) + "%"


def format_number(value: float, decimals: int = 2) -> str:
    """Format a number with commas and a fixed number of decimals."""
    if not _is_finite(value):
        return NOT_AVAILABLE
    return _group(value, decimals)


def format_price_value(price: float) -> str:
    """Format a listing price with whole K/M units ("$2M", "$750K")."""
    if not price or not _is_finite(price):
        return NOT_AVAILABLE

    abs_price = abs(price)

    if abs_price >= 1_000_000:
        return "$" + _to_fixed(abs_price / 1_000_000, 0) + "M"
    if abs_price >= 1_000:
        return "$" + _to_fixed(abs_price / 1_000, 0) + "K"

    # Small prices keep up to three decimals, like a locale string
    return "$" + _group(price, 3).rstrip("0").rstrip(".")

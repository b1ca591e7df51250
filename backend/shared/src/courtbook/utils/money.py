"""Money and percentage helpers.

All amounts are whole currency units (no sub-units), so every computed
value is rounded to an int with round-half-up, never banker's rounding.
"""

from decimal import ROUND_HALF_UP, Decimal

HUNDRED = Decimal(100)


def round_half_up(value: Decimal | int) -> int:
    """Round to the nearest whole unit, ties away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percent_of(amount: int, percent: Decimal | int) -> int:
    """Return ``percent`` % of ``amount`` rounded half-up."""
    return round_half_up(Decimal(amount) * Decimal(percent) / HUNDRED)


def format_amount(amount: int) -> str:
    """Format an amount with dot thousands separators (e.g. 12.500)."""
    return f"{amount:,}".replace(",", ".")

from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` decimals, rounding halves away from zero."""
    exponent = Decimal(1).scaleb(-digits)
    return str(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def as_percent(score: float) -> str:
    return to_fixed(score * 100, 1)

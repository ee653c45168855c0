"""Money helpers shared by the burger domain."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTS = Decimal("0.01")


def to_price(value: Decimal | int | float | str) -> Decimal:
    """Coerce a price to Decimal and reject negatives."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    try:
        # floats go through str() so 0.75 stays 0.75
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {value!r}") from exc
    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    if price < 0:
        raise ValueError(f"Price must be non-negative, got {price}")
    if price == 0:
        # drop the sign of -0
        price = abs(price)
    return price


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    """Format an amount with two fractional digits, rounding halves up."""
    rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{currency_symbol}{rounded:.2f}"

from decimal import Decimal, ROUND_HALF_UP

MONEY_ZERO = Decimal("0")
CENTS = Decimal("0.01")


def to_money(amount) -> Decimal:
    """Convert a configured dollar amount (int, float, str or Decimal) to an exact Decimal."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def format_money(amount: Decimal) -> str:
    """Cents for display and log lines; the stored amount stays exact."""
    return str(to_money(amount).quantize(CENTS, rounding=ROUND_HALF_UP))

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

MAX_EXPENSE_AMOUNT = Decimal("999999999.99")


def parse_money(value: str) -> Decimal:
    if value is None:
        raise ValueError("missing money value")

    normalized = value.strip()
    if not normalized:
        raise ValueError("empty money value")

    is_negative = normalized.startswith("(") and normalized.endswith(")")
    normalized = normalized.replace("$", "").replace("₱", "").replace(",", "")

    if is_negative:
        normalized = normalized[1:-1]

    try:
        amount = Decimal(normalized).quantize(
            Decimal("0.01"),
            rounding=ROUND_HALF_UP
        )
    except InvalidOperation as exc:
        raise ValueError("invalid money value") from exc

    return -amount if is_negative else amount


def parse_expense_amount(value: str) -> float:
    """Spend amount as a positive float.

    Bank exports record spending as negatives, so the sign is dropped.
    """
    amount = abs(parse_money(value))
    if amount == 0:
        raise ValueError("expense amount must be positive")
    if amount > MAX_EXPENSE_AMOUNT:
        raise ValueError("expense amount too large")
    return float(amount)

"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENTS = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal rounded to cents.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "R$ 50"

    The sign of a transaction comes from its type, so a leading minus is kept
    and left for the transaction service to reject.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount with two fractional digits

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    # Remove currency symbols and thousands separators
    cleaned = re.sub(r"(R\$|[$€£¥])", "", cleaned)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")

    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)

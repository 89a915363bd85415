"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles "123.45", "-123.45", "1,234.56", "+10" and "(123.45)" (negative
    in parentheses). Currency symbols are not accepted.

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    is_negative = text.startswith("(") and text.endswith(")")
    if is_negative:
        text = text[1:-1]

    text = re.sub(r"[,\s]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount_str}'")
    return -amount if is_negative else amount

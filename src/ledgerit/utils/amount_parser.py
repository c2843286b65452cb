"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

_CURRENCY = re.compile(r"[$€£¥]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a statement amount into a Decimal rounded to cents.

    Handles "123.45", "-$123.45", "1,234.56", "(123.45)" (negative in
    parentheses) and a trailing minus ("123.45-").

    Raises:
        ValueError: If the amount cannot be parsed
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1]
    elif text.endswith("-"):
        negative = True
        text = text[:-1]

    text = _CURRENCY.sub("", text).replace(",", "").strip()
    if text.startswith("-"):
        negative = not negative
        text = _CURRENCY.sub("", text[1:]).strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return (-amount if negative else amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

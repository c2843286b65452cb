"""Single-line transaction rendering for prompts."""

from decimal import Decimal
from typing import Union

import click

from ledgerit.domain.entities import CategorizedTransaction, Transaction


def format_amount(amount: Decimal) -> str:
    return f"${abs(amount):,.2f}".rjust(9)


def format_transaction(
    transaction: Union[Transaction, CategorizedTransaction], with_category: bool = False
) -> str:
    """Render date, coloured amount, optional category and description."""
    colour = "red" if transaction.is_debit else "green"
    parts = [transaction.date.isoformat(), click.style(format_amount(transaction.amount), fg=colour)]
    if with_category:
        parts.append(getattr(transaction, "category", "") or "-")
    parts.append(transaction.description)
    return " ".join(parts)

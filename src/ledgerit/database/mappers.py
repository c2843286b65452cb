"""Mapper functions between ledger rows and domain transactions."""

from decimal import Decimal
from typing import Union

from ledgerit.domain.entities import CategorizedTransaction, Origin, quantize_amount
from ledgerit.domain.formula import evaluate_reimbursement
from ledgerit.database.models import CreditEntry, DebitEntry


def entry_to_domain(entry: Union[DebitEntry, CreditEntry]) -> CategorizedTransaction:
    """Convert a ledger row to a ledger-origin CategorizedTransaction."""
    return CategorizedTransaction(
        date=entry.date,
        amount=quantize_amount(Decimal(entry.amount)),
        description=entry.description,
        origin=Origin.LEDGER,
        category=entry.category or "",
        reimbursement_formula=entry.reimbursement_formula or "",
        reimbursed=Decimal(entry.reimbursed) if entry.reimbursed is not None else None,
    )


def domain_to_entry(transaction: CategorizedTransaction) -> Union[DebitEntry, CreditEntry]:
    """Build the row for a categorized transaction.

    The reimbursed value is evaluated from the formula text so the row
    always agrees with its formula.
    """
    reimbursed = None
    if transaction.reimbursement_formula:
        reimbursed = evaluate_reimbursement(transaction.reimbursement_formula, transaction.amount)
    fields = dict(
        category=transaction.category,
        date=transaction.date,
        amount=quantize_amount(transaction.amount),
        reimbursed=reimbursed,
        reimbursement_formula=transaction.reimbursement_formula or None,
        description=transaction.description,
    )
    if transaction.is_debit:
        return DebitEntry(paid=quantize_amount(transaction.amount + (reimbursed or 0)), **fields)
    return CreditEntry(**fields)

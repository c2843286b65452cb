"""Domain model entities for ledgerit.

Plain data classes for statement rows and ledger entries, independent of
the ledger store's schema.
"""

import enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")

# Description text of the flat fee the card issuer adds to foreign purchases.
FEE_MARKER = "INTNL TRANSACTION FEE"


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to whole cents."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def identity_key(txn_date: date, amount: Decimal, description: str) -> str:
    """Build the dedup identity of a transaction.

    Ledger rows and freshly parsed statement rows must produce the same key,
    so the amount is always rendered with two decimal places.
    """
    return f"{txn_date.isoformat()}:{quantize_amount(amount)}:{description}"


class Origin(enum.Enum):
    """Where a categorized transaction came from."""

    PARSED = "parsed"
    LEDGER = "ledger"


@dataclass(frozen=True)
class Transaction:
    """Raw statement row."""

    date: date
    amount: Decimal
    description: str

    @property
    def identity_key(self) -> str:
        return identity_key(self.date, self.amount, self.description)

    @property
    def is_debit(self) -> bool:
        return self.amount < 0


@dataclass(eq=False)
class CategorizedTransaction:
    """Transaction with its resolved category and reimbursement formula.

    Compared by identity so several equal-looking rows can sit in the same
    date bucket.
    """

    date: date
    amount: Decimal
    description: str
    origin: Origin
    category: str = ""
    reimbursement_formula: str = ""
    is_fee_marker: bool = False
    reimbursed: Optional[Decimal] = None

    @classmethod
    def from_transaction(
        cls, transaction: Transaction, fee_marker: str = FEE_MARKER
    ) -> "CategorizedTransaction":
        """Wrap a freshly parsed statement row."""
        return cls(
            date=transaction.date,
            amount=transaction.amount,
            description=transaction.description,
            origin=Origin.PARSED,
            is_fee_marker=transaction.description == fee_marker,
        )

    @property
    def identity_key(self) -> str:
        return identity_key(self.date, self.amount, self.description)

    @property
    def is_debit(self) -> bool:
        return self.amount < 0

    @property
    def is_reloaded(self) -> bool:
        return self.origin is Origin.LEDGER

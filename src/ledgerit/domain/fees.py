"""Deferred handling of international transaction fee rows.

A fee row is withheld until every other transaction of its date has been
categorized, then the user may attach it to one of that day's categories.
"""

from datetime import date
from typing import Optional

from ledgerit.domain.dedup import DedupCache
from ledgerit.domain.disambiguation import Disambiguator
from ledgerit.domain.display import format_transaction
from ledgerit.domain.entities import CategorizedTransaction, FEE_MARKER, Transaction
from ledgerit.domain.errors import PreconditionError
from ledgerit.domain.prompts import PromptKind
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


class FeeDeferral:
    """Withholds fee rows and resolves them once their date is complete."""

    def __init__(self, dedup: DedupCache, disambiguator: Disambiguator, marker: str = FEE_MARKER):
        self.dedup = dedup
        self.disambiguator = disambiguator
        self.marker = marker
        self._withheld: list[CategorizedTransaction] = []

    @property
    def withheld(self) -> list[CategorizedTransaction]:
        return list(self._withheld)

    def is_fee(self, transaction: Transaction) -> bool:
        return transaction.description == self.marker

    def is_withheld(self, transaction: Transaction) -> bool:
        key = transaction.identity_key
        return any(fee.identity_key == key for fee in self._withheld)

    def withhold(self, fee: CategorizedTransaction) -> None:
        self._check_pending(fee)
        self._withheld.append(fee)
        logger.debug("Withholding fee %s until %s is complete", fee.identity_key, fee.date)

    def drain(self, txn_date: Optional[date] = None) -> list[CategorizedTransaction]:
        """Remove and return withheld fees, optionally only those of one date."""
        if txn_date is None:
            drained, self._withheld = self._withheld, []
        else:
            drained = [fee for fee in self._withheld if fee.date == txn_date]
            self._withheld = [fee for fee in self._withheld if fee.date != txn_date]
        return drained

    def discard(self) -> int:
        count = len(self._withheld)
        self._withheld = []
        return count

    def _check_pending(self, fee: CategorizedTransaction) -> None:
        if not fee.is_fee_marker or fee.is_reloaded or fee.category:
            raise PreconditionError(
                f"Transaction {fee.identity_key} is not an uncategorized fee from a statement"
            )

    def related_category(self, fee: CategorizedTransaction) -> Optional[str]:
        """Ask which same-day category the fee belongs to.

        Returns:
            The chosen category, or None when the user enters a blank line or
            no other transaction was recorded for the fee's date

        Raises:
            PreconditionError: If the fee is not an uncategorized parsed fee row
        """
        self._check_pending(fee)
        related = self.dedup.related_on_date(fee.date)
        if not related:
            logger.debug("No transactions on %s to attach fee to", fee.date)
            return None

        categories = list(dict.fromkeys(t.category for t in related if t.category))
        self.disambiguator.prompter.echo()
        return self.disambiguator.choose(
            fee,
            categories,
            heading="Transactions for same day as above international transaction fee",
            message="Enter matching category or empty line to assign to new> ",
            kind=PromptKind.FEE,
            listing=[format_transaction(t, with_category=True) for t in related],
        )

    def resolve(self, fee: CategorizedTransaction) -> None:
        """Categorize a flushed fee in place.

        A chosen same-day category is inherited as is, with no pattern learned;
        otherwise the fee goes through ordinary categorization.
        """
        category = self.related_category(fee)
        if category:
            logger.info("Attaching fee %s to category %r", fee.identity_key, category)
            self.disambiguator.assign(fee, category)
        else:
            matches = self.disambiguator.registry.find(fee.amount, fee.description)
            self.disambiguator.resolve(fee, matches)

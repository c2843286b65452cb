"""Reconciliation orchestrator.

Processes statement rows in ascending date order: skips rows already in the
ledger, withholds fee rows until their date is complete, and categorizes and
appends everything else.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ledgerit.database.base import LedgerStore
from ledgerit.domain.category import CategoryRegistry
from ledgerit.domain.dedup import DedupCache
from ledgerit.domain.disambiguation import Disambiguator
from ledgerit.domain.entities import CategorizedTransaction, FEE_MARKER, Transaction
from ledgerit.domain.fees import FeeDeferral
from ledgerit.domain.prompts import Prompter, ask_yes_no
from ledgerit.domain.reimbursement import ReimbursementResolver
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class ReconcileSession:
    """State owned by one reconciliation run."""

    registry: CategoryRegistry
    ledger: LedgerStore
    dedup: DedupCache
    debits_added: int = 0
    credits_added: int = 0
    skipped: int = 0
    current_date: Optional[date] = None

    @property
    def rows_added(self) -> int:
        return self.debits_added + self.credits_added

    @property
    def config_changed(self) -> bool:
        return self.registry.dirty


@dataclass(frozen=True)
class ReconcileResult:
    """Counts reported at the end of a run."""

    debits_added: int
    credits_added: int
    skipped: int


def open_session(registry: CategoryRegistry, ledger: LedgerStore) -> ReconcileSession:
    """Create a session whose dedup cache holds every existing ledger row."""
    dedup = DedupCache()
    loaded = dedup.record_all(ledger.load_entries())
    logger.info("Loaded %d existing ledger rows", loaded)
    return ReconcileSession(registry=registry, ledger=ledger, dedup=dedup)


class Reconciler:
    """Drives categorization of statement rows into the ledger."""

    def __init__(self, session: ReconcileSession, prompter: Prompter, fee_marker: str = FEE_MARKER):
        self.session = session
        self.prompter = prompter
        self.fee_marker = fee_marker
        self.resolver = ReimbursementResolver(prompter)
        self.disambiguator = Disambiguator(session.registry, self.resolver, prompter)
        self.fees = FeeDeferral(session.dedup, self.disambiguator, fee_marker)

    def run(self, statements: Iterable[Sequence[Transaction]]) -> ReconcileResult:
        """Reconcile every statement in turn.

        Args:
            statements: Parsed statements, each a sequence of rows in file order

        Returns:
            ReconcileResult with added and skipped counts
        """
        for transactions in statements:
            for transaction in sorted(transactions, key=lambda t: t.date):
                if self.session.current_date is not None and transaction.date != self.session.current_date:
                    self.flush_fees()
                self.session.current_date = transaction.date
                self.process(transaction)
        self.flush_fees()
        return ReconcileResult(
            debits_added=self.session.debits_added,
            credits_added=self.session.credits_added,
            skipped=self.session.skipped,
        )

    def process(self, transaction: Transaction) -> Optional[CategorizedTransaction]:
        """Handle one statement row.

        Returns:
            The categorized transaction when it was written, else None
        """
        if self.session.dedup.contains(transaction) or self.fees.is_withheld(transaction):
            logger.debug("Skipping already recorded %s", transaction.identity_key)
            self.session.skipped += 1
            return None

        categorized = CategorizedTransaction.from_transaction(transaction, self.fee_marker)
        if categorized.is_fee_marker:
            self.fees.withhold(categorized)
            return None

        matches = self.session.registry.find(categorized.amount, categorized.description)
        self.disambiguator.resolve(categorized, matches)
        self.write(categorized)
        return categorized

    def flush_fees(self) -> int:
        """Resolve and write every withheld fee."""
        fees = self.fees.drain()
        if fees:
            logger.info("Resolving %d withheld fee(s) for %s", len(fees), fees[0].date)
        for fee in fees:
            self.fees.resolve(fee)
            self.write(fee)
        return len(fees)

    def write(self, transaction: CategorizedTransaction) -> None:
        self.session.ledger.append(transaction)
        if transaction.is_debit:
            self.session.debits_added += 1
        else:
            self.session.credits_added += 1
        self.session.dedup.record(transaction)

    def discard_pending(self) -> int:
        """Drop withheld fees that were never resolved."""
        count = self.fees.discard()
        if count:
            logger.info("Discarding %d unresolved fee(s)", count)
        return count


def checkpoint(
    session: ReconcileSession, prompter: Prompter, save_config: Callable[[], None]
) -> bool:
    """Offer to persist ledger rows and registry changes after an interruption.

    Args:
        session: Interrupted session
        prompter: Prompter for the save questions
        save_config: Persists the category registry

    Returns:
        False if saving the ledger was requested and failed
    """
    saved = True
    if session.rows_added:
        if ask_yes_no(prompter, "Save ledger"):
            saved = session.ledger.save()
        else:
            session.ledger.discard()
    if session.config_changed and ask_yes_no(prompter, "Save new categories"):
        save_config()
    return saved

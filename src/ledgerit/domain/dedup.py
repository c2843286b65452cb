"""Dedup cache over transactions already present in the ledger."""

from datetime import date
from typing import Iterable, Union

from ledgerit.domain.entities import CategorizedTransaction, Transaction
from ledgerit.domain.errors import ConflictError, duplicate_transaction
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


class DedupCache:
    """Identity keys of recorded transactions plus a per-date index.

    ``record`` must be called once for every transaction that ends up in the
    ledger, both rows loaded at startup and newly categorized ones.
    """

    def __init__(self):
        self._keys: set[str] = set()
        self._by_date: dict[date, list[CategorizedTransaction]] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, transaction: Union[Transaction, CategorizedTransaction]) -> bool:
        return self.contains(transaction)

    def contains(self, transaction: Union[Transaction, CategorizedTransaction]) -> bool:
        return transaction.identity_key in self._keys

    def record(self, transaction: CategorizedTransaction) -> None:
        """Add a transaction's key and index it by date.

        Raises:
            ConflictError: If a parsed transaction is recorded twice
        """
        key = transaction.identity_key
        if key in self._keys:
            if not transaction.is_reloaded:
                raise ConflictError(duplicate_transaction(key))
            # Hand-edited ledgers may already hold duplicate rows.
            logger.warning("Ledger already contains duplicate row %s", key)
        self._keys.add(key)
        self._by_date.setdefault(transaction.date, []).append(transaction)

    def record_all(self, transactions: Iterable[CategorizedTransaction]) -> int:
        count = 0
        for transaction in transactions:
            self.record(transaction)
            count += 1
        return count

    def related_on_date(self, txn_date: date) -> list[CategorizedTransaction]:
        """Return the transactions recorded for a date, in recording order."""
        return list(self._by_date.get(txn_date, ()))

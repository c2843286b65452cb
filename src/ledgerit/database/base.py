"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerit.domain.entities import CategorizedTransaction

DEBIT = "debit"
CREDIT = "credit"


class LedgerStore(ABC):
    """Abstract store for the categorized debit and credit ledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the connection, discarding unsaved rows."""
        pass

    @abstractmethod
    def load_entries(self) -> list[CategorizedTransaction]:
        """Return every saved row, debits first, as ledger-origin transactions."""
        pass

    @abstractmethod
    def append(self, transaction: CategorizedTransaction) -> None:
        """Stage a categorized transaction as a new debit or credit row."""
        pass

    @abstractmethod
    def save(self) -> bool:
        """Persist staged rows. Returns False, without raising, on failure."""
        pass

    @abstractmethod
    def discard(self) -> None:
        """Drop staged rows."""
        pass

    @abstractmethod
    def list_entries(
        self,
        section: Optional[str] = None,
        category: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CategorizedTransaction]:
        """List saved rows with optional filters.

        Args:
            section: Optional "debit" or "credit"
            category: Optional exact category name
            start_date: Optional start date filter
            end_date: Optional end date filter
        """
        pass

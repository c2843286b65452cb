"""SQLAlchemy ledger store implementation."""

from datetime import date
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledgerit.database.base import CREDIT, DEBIT, LedgerStore
from ledgerit.database.mappers import domain_to_entry, entry_to_domain
from ledgerit.database.models import CreditEntry, DebitEntry, create_session_factory
from ledgerit.domain.entities import CategorizedTransaction
from ledgerit.domain.errors import LedgerError
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


class SQLAlchemyLedger(LedgerStore):
    """SQLAlchemy-based ledger with staged appends committed by ``save``."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy ledger.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            LedgerError: If the database cannot be opened or its schema created
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise LedgerError(f"Could not open ledger {database_url}: {e}") from e
        self._session: Optional[Session] = None
        self._pending = 0

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    @property
    def pending(self) -> int:
        return self._pending

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self._pending = 0

    def load_entries(self) -> list[CategorizedTransaction]:
        """Return every saved row, debits first, as ledger-origin transactions."""
        session = self._get_session()
        try:
            debits = session.query(DebitEntry).order_by(DebitEntry.id).all()
            credits = session.query(CreditEntry).order_by(CreditEntry.id).all()
        except SQLAlchemyError as e:
            raise LedgerError(f"Could not read ledger {self.database_url}: {e}") from e
        return [entry_to_domain(entry) for entry in [*debits, *credits]]

    def append(self, transaction: CategorizedTransaction) -> None:
        """Stage a categorized transaction as a new row."""
        self._get_session().add(domain_to_entry(transaction))
        self._pending += 1

    def save(self) -> bool:
        """Commit staged rows; report failure without raising."""
        session = self._get_session()
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.warning("Could not save ledger %s: %s", self.database_url, e)
            return False
        logger.info("Saved %d row(s) to %s", self._pending, self.database_url)
        self._pending = 0
        return True

    def discard(self) -> None:
        """Roll back staged rows."""
        if self._session is not None:
            self._session.rollback()
        self._pending = 0

    def list_entries(
        self,
        section: Optional[str] = None,
        category: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CategorizedTransaction]:
        """List saved rows with optional filters, ordered by date."""
        if section not in (None, DEBIT, CREDIT):
            raise ValueError(f"Unknown ledger section '{section}'")
        models = [m for s, m in ((DEBIT, DebitEntry), (CREDIT, CreditEntry)) if section in (None, s)]

        session = self._get_session()
        entries = []
        for model in models:
            query = session.query(model)
            if category is not None:
                query = query.filter(model.category == category)
            if start_date is not None:
                query = query.filter(model.date >= start_date)
            if end_date is not None:
                query = query.filter(model.date <= end_date)
            entries.extend(query.all())
        entries.sort(key=lambda entry: (entry.date, entry.id))
        return [entry_to_domain(entry) for entry in entries]

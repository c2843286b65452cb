"""SQLAlchemy models for the ledger database."""

from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class LedgerColumns:
    """Columns shared by debit and credit rows."""

    id = Column(Integer, primary_key=True)
    category = Column(String, nullable=False, default="")
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    reimbursed = Column(Numeric(12, 2), nullable=True)
    # Formula text over "amount"; the reimbursed value is recomputable from it.
    reimbursement_formula = Column(String, nullable=True)
    description = Column(String, nullable=False)
    recorded_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class DebitEntry(LedgerColumns, Base):
    """Expense row."""

    __tablename__ = "debits"

    paid = Column(Numeric(12, 2), nullable=False)


class CreditEntry(LedgerColumns, Base):
    """Income row."""

    __tablename__ = "credits"


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)

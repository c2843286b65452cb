"""Factory functions for creating ledger store instances."""

from pathlib import Path
from typing import Union

from ledgerit.database.sqlalchemy_db import SQLAlchemyLedger


def create_sqlite_ledger(database_path: Union[str, Path]) -> SQLAlchemyLedger:
    """Create a SQLite ledger store.

    A missing database file is created, giving a fresh ledger.

    Args:
        database_path: Path to SQLite database file

    Returns:
        SQLAlchemyLedger instance configured for SQLite

    Raises:
        LedgerError: If the file exists but is not a usable database
    """
    return SQLAlchemyLedger(f"sqlite:///{database_path}")

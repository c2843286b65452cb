"""Ledger storage layer for ledgerit."""

from ledgerit.database.base import LedgerStore
from ledgerit.database.factories import create_sqlite_ledger

__all__ = ["LedgerStore", "create_sqlite_ledger"]

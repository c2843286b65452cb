"""Tests for the dedup cache."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerit.domain.dedup import DedupCache
from ledgerit.domain.entities import CategorizedTransaction, Origin, identity_key
from ledgerit.domain.errors import ConflictError
from tests.helpers import make_txn


def ledger_row(day, amount, description, category="Misc"):
    return CategorizedTransaction(
        date=date.fromisoformat(day),
        amount=Decimal(amount),
        description=description,
        origin=Origin.LEDGER,
        category=category,
    )


def test_identity_key_normalizes_amount_precision():
    """Statement and ledger amounts of equal value share one key."""
    assert identity_key(date(2024, 1, 5), Decimal("-42.1"), "COFFEE") == identity_key(
        date(2024, 1, 5), Decimal("-42.10"), "COFFEE"
    )
    assert identity_key(date(2024, 1, 5), Decimal("-42.10"), "COFFEE") == "2024-01-05:-42.10:COFFEE"


def test_contains_after_record():
    cache = DedupCache()
    cache.record(ledger_row("2024-01-05", "-42.10", "COFFEE SHOP 123"))

    assert cache.contains(make_txn("2024-01-05", "-42.1", "COFFEE SHOP 123"))
    assert make_txn("2024-01-05", "-42.10", "COFFEE SHOP 123") in cache
    assert not cache.contains(make_txn("2024-01-06", "-42.10", "COFFEE SHOP 123"))
    assert not cache.contains(make_txn("2024-01-05", "-42.11", "COFFEE SHOP 123"))
    assert not cache.contains(make_txn("2024-01-05", "-42.10", "COFFEE SHOP"))


def test_related_on_date():
    cache = DedupCache()
    first = ledger_row("2024-02-01", "-100.00", "HOTEL")
    second = ledger_row("2024-02-01", "-20.00", "TAXI")
    other = ledger_row("2024-02-02", "-5.00", "CAFE")
    cache.record_all([first, second, other])

    assert cache.related_on_date(date(2024, 2, 1)) == [first, second]
    assert cache.related_on_date(date(2024, 3, 1)) == []
    assert len(cache) == 3


def test_recording_parsed_duplicate_is_a_conflict():
    cache = DedupCache()
    txn = CategorizedTransaction.from_transaction(make_txn("2024-01-05", "-1.00", "X"))
    cache.record(txn)
    again = CategorizedTransaction.from_transaction(make_txn("2024-01-05", "-1.00", "X"))

    with pytest.raises(ConflictError):
        cache.record(again)


def test_duplicate_ledger_rows_are_tolerated():
    """Rows already duplicated in the saved ledger still load."""
    cache = DedupCache()
    cache.record(ledger_row("2024-01-05", "-1.00", "X"))
    cache.record(ledger_row("2024-01-05", "-1.00", "X"))
    assert len(cache) == 1
    assert len(cache.related_on_date(date(2024, 1, 5))) == 2

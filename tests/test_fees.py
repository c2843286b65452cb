"""Tests for deferred international transaction fees."""

import pytest

from ledgerit.domain.dedup import DedupCache
from ledgerit.domain.disambiguation import Disambiguator
from ledgerit.domain.entities import CategorizedTransaction, Origin
from ledgerit.domain.errors import PreconditionError
from ledgerit.domain.fees import FeeDeferral
from ledgerit.domain.prompts import PromptKind
from ledgerit.domain.reimbursement import ReimbursementResolver
from tests.helpers import make_txn


@pytest.fixture
def dedup():
    return DedupCache()


@pytest.fixture
def fees(registry, prompter, dedup):
    disambiguator = Disambiguator(registry, ReimbursementResolver(prompter), prompter)
    return FeeDeferral(dedup, disambiguator)


def fee(day="2024-02-01", amount="-3.50"):
    return CategorizedTransaction.from_transaction(make_txn(day, amount, "INTNL TRANSACTION FEE"))


def recorded(dedup, day, amount, description, category):
    txn = CategorizedTransaction.from_transaction(make_txn(day, amount, description))
    txn.category = category
    dedup.record(txn)
    return txn


def test_fee_marker_is_exact_match(fees):
    assert fee().is_fee_marker
    assert fees.is_fee(make_txn("2024-02-01", "-3.50", "INTNL TRANSACTION FEE"))
    assert not fees.is_fee(make_txn("2024-02-01", "-3.50", "INTNL TRANSACTION FEE REFUND"))


def test_withhold_and_drain(fees):
    first = fee()
    second = fee(amount="-1.20")
    fees.withhold(first)
    fees.withhold(second)

    assert fees.is_withheld(make_txn("2024-02-01", "-3.5", "INTNL TRANSACTION FEE"))
    assert fees.drain() == [first, second]
    assert fees.withheld == []


def test_drain_by_date(fees):
    first = fee("2024-02-01")
    second = fee("2024-02-02")
    fees.withhold(first)
    fees.withhold(second)

    assert fees.drain(first.date) == [first]
    assert fees.withheld == [second]


def test_attach_to_same_day_category(fees, dedup, registry, prompter):
    recorded(dedup, "2024-02-01", "-120.00", "HOTEL PARIS", "Travel")
    recorded(dedup, "2024-02-01", "-8.00", "MART EXPRESS", "Groceries")
    recorded(dedup, "2024-02-01", "-9.00", "MART EXPRESS 2", "Groceries")
    prompter.answers.extend(["Travel"])
    pending = fee()

    fees.resolve(pending)

    assert pending.category == "Travel"
    kind, message, candidates = prompter.asked[0]
    assert kind is PromptKind.FEE
    assert candidates == ["Travel", "Groceries"]
    assert "Transactions for same day" in prompter.text
    assert "HOTEL PARIS" in prompter.text
    assert not registry.dirty
    assert registry.get("Travel", True).patterns == ["HOTEL", "AIRLINE"]


def test_unlisted_category_reprompts(fees, dedup, prompter):
    recorded(dedup, "2024-02-01", "-120.00", "HOTEL PARIS", "Travel")
    prompter.answers.extend(["Dining", "Travel"])
    pending = fee()

    fees.resolve(pending)

    assert pending.category == "Travel"
    assert prompter.kinds() == [PromptKind.FEE, PromptKind.FEE]


def test_blank_routes_to_ordinary_categorization(fees, dedup, registry, prompter):
    registry.create("Bank Fees", True, "TRANSACTION FEE$")
    recorded(dedup, "2024-02-01", "-120.00", "HOTEL PARIS", "Travel")
    prompter.answers.extend([""])
    pending = fee()

    fees.resolve(pending)

    assert pending.category == "Bank Fees"
    assert prompter.kinds() == [PromptKind.FEE]


def test_no_same_day_transactions_falls_through(fees, dedup, prompter):
    recorded(dedup, "2024-01-31", "-120.00", "HOTEL PARIS", "Travel")
    prompter.answers.extend(["Fees", "", ""])
    pending = fee()

    fees.resolve(pending)

    assert pending.category == "Fees"
    assert PromptKind.FEE not in prompter.kinds()


def test_inherited_category_formula_is_confirmed(fees, dedup, registry, prompter):
    registry.set_reimbursement_formula("Travel", True, "amount")
    recorded(dedup, "2024-02-01", "-120.00", "HOTEL PARIS", "Travel")
    prompter.answers.extend(["Travel", "y"])
    pending = fee()

    fees.resolve(pending)

    assert pending.reimbursement_formula == "amount"
    assert str(pending.reimbursed) == "3.50"


def test_categorized_fee_violates_precondition(fees, dedup):
    recorded(dedup, "2024-02-01", "-120.00", "HOTEL PARIS", "Travel")
    pending = fee()
    pending.category = "Travel"

    with pytest.raises(PreconditionError):
        fees.resolve(pending)


def test_reloaded_row_violates_precondition(fees):
    reloaded = fee()
    reloaded.origin = Origin.LEDGER

    with pytest.raises(PreconditionError):
        fees.withhold(reloaded)


def test_non_fee_cannot_be_withheld(fees):
    txn = CategorizedTransaction.from_transaction(make_txn("2024-02-01", "-3.50", "HOTEL"))

    with pytest.raises(PreconditionError):
        fees.withhold(txn)

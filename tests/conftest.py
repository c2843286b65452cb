"""Shared pytest fixtures for ledgerit tests."""

import json
from pathlib import Path
import pytest

from ledgerit.database.factories import create_sqlite_ledger
from ledgerit.domain.category import CategoryRegistry
from ledgerit.domain.reconcile import Reconciler, open_session
from tests.helpers import ScriptedPrompter


@pytest.fixture
def prompter():
    """Create an empty ScriptedPrompter; tests queue answers on it."""
    return ScriptedPrompter()


@pytest.fixture
def registry():
    """Create a registry with a few debit and credit categories."""
    return CategoryRegistry.from_config(
        {
            "Groceries": {"name": "Groceries", "matches": ["MART"]},
            "Pharmacy": {"name": "Pharmacy", "matches": ["PHARM"]},
            "Travel": {"name": "Travel", "matches": ["HOTEL", "AIRLINE"]},
            "Work Lunch": {"name": "Work Lunch", "matches": ["^DELI"], "reimbursementFormula": "amount / 2"},
        },
        {
            "Salary": {"name": "Salary", "matches": ["PAYROLL"]},
        },
    )


@pytest.fixture
def ledger_path(tmp_path):
    """Return a path for a temporary ledger database."""
    return tmp_path / "ledger.db"


@pytest.fixture
def ledger(ledger_path):
    """Create a temporary SQLite ledger."""
    store = create_sqlite_ledger(ledger_path)
    yield store
    store.disconnect()


@pytest.fixture
def session(registry, ledger):
    """Open a reconciliation session over the temporary ledger."""
    return open_session(registry, ledger)


@pytest.fixture
def reconciler(session, prompter):
    """Create a Reconciler wired to the scripted prompter."""
    return Reconciler(session, prompter)


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path."""

    def _write(data=None, name="config.json"):
        if data is None:
            data = {
                "outputFilename": "ledger.db",
                "debitCategories": {"Dining": {"name": "Dining", "matches": ["^COFFEE SHOP"]}},
                "creditCategories": {},
            }
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_statement(tmp_path):
    """Write a statement CSV and return its path."""

    def _write(rows, name="statement.csv"):
        path = tmp_path / name
        path.write_text("".join(f"{row}\n" for row in rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"

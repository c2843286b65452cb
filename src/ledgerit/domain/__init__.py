"""Domain layer for ledgerit.

The reconciliation orchestrator lives in ``ledgerit.domain.reconcile`` and is
not re-exported here, since it depends on the ledger store.
"""

from ledgerit.domain.category import CategoryDefinition, CategoryRegistry
from ledgerit.domain.dedup import DedupCache
from ledgerit.domain.disambiguation import Disambiguator
from ledgerit.domain.fees import FeeDeferral
from ledgerit.domain.reimbursement import ReimbursementResolver
from ledgerit.domain.statement import StatementParser

__all__ = [
    "CategoryDefinition",
    "CategoryRegistry",
    "DedupCache",
    "Disambiguator",
    "FeeDeferral",
    "ReimbursementResolver",
    "StatementParser",
]

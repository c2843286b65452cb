"""Reimbursement formula resolution with interactive confirmation."""

from decimal import Decimal
from typing import Optional

from ledgerit.domain.entities import CategorizedTransaction
from ledgerit.domain.errors import FormulaError
from ledgerit.domain.formula import evaluate_reimbursement
from ledgerit.domain.prompts import PromptKind, Prompter, ask_yes_no
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


class ReimbursementResolver:
    """Turns formula text into a confirmed reimbursed value.

    The accepted formula text, not the value, is what gets stored on the
    transaction so the ledger can recompute it.
    """

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def resolve(self, formula: str, amount: Decimal) -> Decimal:
        """Evaluate a formula with the absolute transaction amount.

        Raises:
            FormulaError: If the formula is malformed
        """
        return evaluate_reimbursement(formula, amount)

    def _ask_formula(self, question: str) -> str:
        return self.prompter.ask(PromptKind.FORMULA, f"{question} >").strip()

    def confirm(
        self, transaction: CategorizedTransaction, formula: str, question: Optional[str] = None
    ) -> Optional[str]:
        """Show the computed value until the user accepts a formula.

        Rejecting asks for a replacement formula; a blank replacement aborts.

        Args:
            transaction: Transaction being reimbursed
            formula: First formula to try
            question: Prompt used when asking for a replacement

        Returns:
            The accepted formula, or None if the user aborted
        """
        question = question or f"Reimbursement for {transaction.category}"
        while formula:
            try:
                value = self.resolve(formula, transaction.amount)
            except FormulaError as e:
                self.prompter.echo(f"Invalid formula: {e}")
            else:
                if ask_yes_no(self.prompter, f"Reimbursed ${value:,.2f}"):
                    logger.debug("Accepted formula %r (%s) for %s", formula, value, transaction.identity_key)
                    return formula
            formula = self._ask_formula(question)
        return None

    def apply(
        self, transaction: CategorizedTransaction, formula: str, question: Optional[str] = None
    ) -> bool:
        """Confirm a formula and attach it to the transaction when accepted."""
        accepted = self.confirm(transaction, formula, question)
        if accepted is None:
            return False
        transaction.reimbursement_formula = accepted
        transaction.reimbursed = self.resolve(accepted, transaction.amount)
        return True

    def request(self, transaction: CategorizedTransaction, question: str) -> bool:
        """Ask for a new formula, confirm it and attach it when accepted."""
        return self.apply(transaction, self._ask_formula(question), question)

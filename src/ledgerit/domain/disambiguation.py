"""Interactive category resolution for zero, one or many pattern matches."""

from typing import Optional, Sequence

from ledgerit.domain.category import CategoryRegistry
from ledgerit.domain.display import format_transaction
from ledgerit.domain.entities import CategorizedTransaction
from ledgerit.domain.errors import ValidationError, pattern_does_not_match
from ledgerit.domain.matching import compile_pattern
from ledgerit.domain.prompts import PromptKind, Prompter, ask_yes_no
from ledgerit.domain.reimbursement import ReimbursementResolver


class Disambiguator:
    """Assigns a category to a transaction, asking the user when needed."""

    def __init__(
        self,
        registry: CategoryRegistry,
        resolver: ReimbursementResolver,
        prompter: Prompter,
    ):
        self.registry = registry
        self.resolver = resolver
        self.prompter = prompter

    def resolve(self, transaction: CategorizedTransaction, matches: Sequence[str]) -> None:
        """Resolve the category of a transaction in place.

        Args:
            transaction: Transaction to categorize
            matches: Category names whose patterns matched the description
        """
        candidates = list(matches)
        if len(candidates) > 1:
            choice = self.choose(
                transaction,
                candidates,
                heading="Multiple categories matched:",
                message="Enter matching category or empty line to create new category> ",
                kind=PromptKind.CATEGORY,
            )
            candidates = [choice] if choice else []

        if len(candidates) == 1:
            self.assign(transaction, candidates[0])
        else:
            self.create_or_extend(transaction)

    def choose(
        self,
        transaction: CategorizedTransaction,
        candidates: Sequence[str],
        heading: str,
        message: str,
        kind: PromptKind,
        listing: Optional[Sequence[str]] = None,
    ) -> Optional[str]:
        """Ask for one of the candidates; blank input returns None."""
        listing = listing if listing is not None else [f"  {name}" for name in candidates]
        while True:
            self.prompter.echo(format_transaction(transaction))
            self.prompter.echo(heading)
            for line in listing:
                self.prompter.echo(line)
            answer = self.prompter.ask(kind, message, candidates).strip()
            if answer == "":
                return None
            if answer in candidates:
                return answer

    def assign(self, transaction: CategorizedTransaction, name: str) -> None:
        """Set the category and confirm its saved formula, if any."""
        transaction.category = name
        self.prompter.echo(format_transaction(transaction, with_category=True))
        definition = self.registry.get(name, transaction.is_debit)
        if definition is not None and definition.reimbursement_formula:
            self.resolver.apply(transaction, definition.reimbursement_formula)

    def ask_pattern(self, question: str, description: str) -> Optional[str]:
        """Ask for a pattern that matches the description; blank returns None."""
        while True:
            pattern = self.prompter.ask(PromptKind.PATTERN, f"{question} >")
            if pattern == "":
                return None
            try:
                compiled = compile_pattern(pattern)
            except ValidationError as e:
                self.prompter.echo(str(e))
                continue
            if compiled.search(description):
                return pattern
            self.prompter.echo(pattern_does_not_match(pattern, description))

    def _ask_category_name(self, transaction: CategorizedTransaction) -> str:
        existing = self.registry.names(transaction.is_debit)
        while True:
            name = self.prompter.ask(
                PromptKind.CATEGORY, "Category for above transaction> ", existing
            ).strip()
            if name:
                return name
            self.prompter.echo("Category name must not be empty")

    def create_or_extend(self, transaction: CategorizedTransaction) -> None:
        """Ask for a category; create it or teach an existing one a new pattern."""
        self.prompter.echo(format_transaction(transaction))
        name = self._ask_category_name(transaction)
        transaction.category = name
        is_debit = transaction.is_debit

        definition = self.registry.get(name, is_debit)
        if definition is None:
            pattern = self.ask_pattern(f"Pattern for {name}", transaction.description)
            self.registry.create(name, is_debit, pattern)
            if self.resolver.request(transaction, f"Reimbursement for {name}"):
                if ask_yes_no(self.prompter, f"Save formula to {name}"):
                    self.registry.set_reimbursement_formula(name, is_debit, transaction.reimbursement_formula)
        else:
            pattern = self.ask_pattern(f"Pattern to add to {name}", transaction.description)
            if pattern:
                self.registry.add_pattern(name, is_debit, pattern)
            if definition.reimbursement_formula:
                self.resolver.apply(transaction, definition.reimbursement_formula)


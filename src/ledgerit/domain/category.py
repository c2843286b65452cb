"""Category registry.

Categories live in two namespaces, one for debits and one for credits, each
keeping the insertion order of the configuration file.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterator, Mapping, Optional

from ledgerit.domain.errors import (
    ConfigError,
    ConflictError,
    NotFoundError,
    ValidationError,
    category_exists,
    category_not_found,
    empty_category_name,
)
from ledgerit.domain.matching import compile_pattern, compile_patterns, matches
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class CategoryDefinition:
    """A named category with its description patterns.

    ``compiled_patterns`` is derived from ``patterns`` on first use and
    rebuilt whenever a pattern is added; it is never serialized.
    """

    name: str
    patterns: list[str] = field(default_factory=list)
    reimbursement_formula: Optional[str] = None
    _compiled: Optional[list[re.Pattern]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_patterns(self) -> list[re.Pattern]:
        if self._compiled is None:
            self._compiled = compile_patterns(self.patterns)
        return self._compiled

    def add_pattern(self, pattern: str) -> None:
        compile_pattern(pattern)
        self.patterns.append(pattern)
        self._compiled = None

    def matches(self, description: str) -> bool:
        return matches(self.compiled_patterns, description)

    def to_config(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "matches": list(self.patterns)}
        if self.reimbursement_formula:
            data["reimbursementFormula"] = self.reimbursement_formula
        return data

    @classmethod
    def from_config(cls, name: str, data: Mapping[str, Any]) -> "CategoryDefinition":
        """Build a definition from its configuration entry.

        Raises:
            ConfigError: If the entry is not shaped like a category
            ValidationError: If a pattern does not compile
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Category '{name}' must be an object")
        patterns = data.get("matches") or []
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ConfigError(f"Category '{name}': 'matches' must be a list of strings")
        formula = data.get("reimbursementFormula") or None
        if formula is not None and not isinstance(formula, str):
            raise ConfigError(f"Category '{name}': 'reimbursementFormula' must be a string")
        display_name = data.get("name") or name
        if not isinstance(display_name, str):
            raise ConfigError(f"Category '{name}': 'name' must be a string")

        definition = cls(name=display_name, patterns=list(patterns), reimbursement_formula=formula)
        try:
            definition.compiled_patterns
        except ValidationError as e:
            raise ValidationError(f"Category '{name}': {e}") from e
        return definition


class CategoryRegistry:
    """Debit and credit categories, with a dirty flag for unsaved changes."""

    def __init__(
        self,
        debit_categories: Optional[Mapping[str, CategoryDefinition]] = None,
        credit_categories: Optional[Mapping[str, CategoryDefinition]] = None,
    ):
        self._debit: dict[str, CategoryDefinition] = dict(debit_categories or {})
        self._credit: dict[str, CategoryDefinition] = dict(credit_categories or {})
        self._dirty = False

    @classmethod
    def from_config(
        cls,
        debit_categories: Optional[Mapping[str, Any]],
        credit_categories: Optional[Mapping[str, Any]],
    ) -> "CategoryRegistry":
        """Build a registry from the raw configuration sections.

        Every pattern is compiled here so a malformed one fails at load time.

        Raises:
            ConfigError: If a category entry is malformed
            ValidationError: If any pattern does not compile
        """
        return cls(
            {name: CategoryDefinition.from_config(name, data) for name, data in (debit_categories or {}).items()},
            {name: CategoryDefinition.from_config(name, data) for name, data in (credit_categories or {}).items()},
        )

    @property
    def dirty(self) -> bool:
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    def namespace(self, is_debit: bool) -> dict[str, CategoryDefinition]:
        return self._debit if is_debit else self._credit

    def names(self, is_debit: bool) -> list[str]:
        return list(self.namespace(is_debit))

    def get(self, name: str, is_debit: bool) -> Optional[CategoryDefinition]:
        return self.namespace(is_debit).get(name)

    def __contains__(self, item: tuple[str, bool]) -> bool:
        name, is_debit = item
        return name in self.namespace(is_debit)

    def __iter__(self) -> Iterator[tuple[bool, CategoryDefinition]]:
        for definition in self._debit.values():
            yield True, definition
        for definition in self._credit.values():
            yield False, definition

    def require(self, name: str, is_debit: bool) -> CategoryDefinition:
        definition = self.get(name, is_debit)
        if definition is None:
            raise NotFoundError(category_not_found(name, is_debit))
        return definition

    def find(self, amount: Decimal, description: str) -> list[str]:
        """Return every category in the amount's namespace matching the description.

        Args:
            amount: Signed amount; negative selects the debit categories
            description: Transaction description

        Returns:
            Matching category names in registry order
        """
        return [
            name
            for name, definition in self.namespace(amount < 0).items()
            if definition.matches(description)
        ]

    def create(self, name: str, is_debit: bool, pattern: Optional[str] = None) -> CategoryDefinition:
        """Register a new category.

        Args:
            name: Category name
            is_debit: Namespace to create the category in
            pattern: Optional first pattern

        Returns:
            The new CategoryDefinition

        Raises:
            ValidationError: If the name is empty or the pattern is invalid
            ConflictError: If the category already exists
        """
        if not name or not name.strip():
            raise ValidationError(empty_category_name())
        categories = self.namespace(is_debit)
        if name in categories:
            raise ConflictError(category_exists(name, is_debit))

        definition = CategoryDefinition(name=name)
        if pattern:
            definition.add_pattern(pattern)
        categories[name] = definition
        self._dirty = True
        logger.info("Created %s category %r", "debit" if is_debit else "credit", name)
        return definition

    def add_pattern(self, name: str, is_debit: bool, pattern: str) -> None:
        """Append a pattern to an existing category."""
        self.require(name, is_debit).add_pattern(pattern)
        self._dirty = True
        logger.info("Added pattern %r to category %r", pattern, name)

    def set_reimbursement_formula(self, name: str, is_debit: bool, formula: str) -> None:
        """Attach or overwrite the saved reimbursement formula of a category."""
        self.require(name, is_debit).reimbursement_formula = formula
        self._dirty = True
        logger.info("Saved reimbursement formula %r on category %r", formula, name)

    def to_config(self) -> dict[str, dict[str, Any]]:
        return {
            "debitCategories": {name: d.to_config() for name, d in self._debit.items()},
            "creditCategories": {name: d.to_config() for name, d in self._credit.items()},
        }

"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class ConfigError(DomainError):
    """Configuration is missing, unreadable or incomplete."""


class StatementError(DomainError):
    """A statement file is absent or malformed."""


class LedgerError(DomainError):
    """The ledger store cannot be opened or read."""


class FormulaError(ValidationError):
    """A reimbursement formula failed to compile or evaluate."""


class PreconditionError(RuntimeError):
    """Engine invariant violated; the session cannot continue."""


def category_not_found(name: str, is_debit: bool) -> str:
    """Return message for a missing category."""
    return f"{'Debit' if is_debit else 'Credit'} category '{name}' not found"


def category_exists(name: str, is_debit: bool) -> str:
    """Return message for a category that is already registered."""
    return f"{'Debit' if is_debit else 'Credit'} category '{name}' already exists"


def empty_category_name() -> str:
    """Return message for a blank category name."""
    return "Category name must not be empty"


def invalid_pattern(pattern: str, reason: object) -> str:
    """Return message for a pattern that does not compile."""
    return f"Invalid pattern '{pattern}': {reason}"


def pattern_does_not_match(pattern: str, description: str) -> str:
    """Return message for a pattern that misses its own description."""
    return f"Pattern '{pattern}' does not match description '{description}'"


def duplicate_transaction(key: str) -> str:
    """Return message for a transaction recorded twice."""
    return f"Transaction '{key}' is already recorded"


def statement_row_error(path: str, row_num: int, reason: object) -> str:
    """Return message for a malformed statement row."""
    return f"{path}: row {row_num}: {reason}"

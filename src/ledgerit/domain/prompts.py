"""Interactive prompt protocol used by the categorization engine."""

import enum
from typing import Optional, Protocol, Sequence


class PromptKind(enum.Enum):
    """Prompt categories; each keeps its own input history."""

    GENERAL = "general"
    CATEGORY = "category"
    PATTERN = "pattern"
    FORMULA = "formula"
    FEE = "fee"


class PromptCancelled(Exception):
    """The user interrupted the prompt that was awaiting input."""


class Prompter(Protocol):
    """Line input and output for the engine."""

    def ask(
        self, kind: PromptKind, message: str, candidates: Optional[Sequence[str]] = None
    ) -> str:
        """Read one line, completing against candidates when given.

        Raises:
            PromptCancelled: If the user interrupts input
        """
        ...

    def echo(self, message: str = "") -> None:
        """Write one line to the user."""
        ...


def ask_yes_no(prompter: Prompter, question: str) -> bool:
    """Ask until the answer is 'y' or 'n'."""
    answer = ""
    while answer not in ("y", "n"):
        answer = prompter.ask(PromptKind.GENERAL, f"{question} (y/n)> ").strip().lower()
    return answer == "y"

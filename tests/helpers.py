"""Test helpers: a scripted prompter and statement row builder."""

from datetime import date
from decimal import Decimal

import click

from ledgerit.domain.entities import Transaction
from ledgerit.domain.prompts import PromptCancelled

# Answer that makes ScriptedPrompter behave like Ctrl-C at that prompt
CANCEL = object()


class ScriptedPrompter:
    """Prompter that replays canned answers and records the conversation."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.asked = []
        self.output = []

    def ask(self, kind, message, candidates=None):
        self.asked.append((kind, message, list(candidates) if candidates else None))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise PromptCancelled()
        return answer

    def echo(self, message=""):
        self.output.append(click.unstyle(message))

    @property
    def text(self):
        return "\n".join(self.output)

    def kinds(self):
        return [kind for kind, _, _ in self.asked]

    def messages(self):
        return [message for _, message, _ in self.asked]


def make_txn(day, amount, description):
    """Build a statement row from an ISO date and a string amount."""
    return Transaction(date=date.fromisoformat(day), amount=Decimal(amount), description=description)

"""Terminal prompts (prompt_toolkit-based).

Every prompt kind gets its own ``PromptSession`` so input history typed at
one kind of question never shows up at another.
"""

from typing import Any, Optional, Sequence

import click
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from ledgerit.domain.prompts import PromptCancelled, PromptKind


class TerminalPrompter:
    """Interactive line input with prefix completion over candidates."""

    def __init__(self, input: Any = None, output: Any = None):
        self._input = input
        self._output = output
        self._sessions: dict[PromptKind, PromptSession] = {}

    def session(self, kind: PromptKind) -> PromptSession:
        if kind not in self._sessions:
            self._sessions[kind] = PromptSession(
                history=InMemoryHistory(), input=self._input, output=self._output
            )
        return self._sessions[kind]

    def ask(
        self, kind: PromptKind, message: str, candidates: Optional[Sequence[str]] = None
    ) -> str:
        completer = None
        if candidates:
            # sentence=True completes the whole line, so names with spaces work
            completer = WordCompleter(list(candidates), sentence=True)
        try:
            return self.session(kind).prompt(message, completer=completer)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled() from e

    def echo(self, message: str = "") -> None:
        click.echo(message)

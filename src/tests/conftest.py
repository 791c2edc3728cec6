"""Shared fakes for the installer's external collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

import pytest
from rich.console import Console

from shlink_installer.runner import CommandResult


class ScriptedPromptDevice:
    """PromptDevice answering from a fixed script, in order.

    Records every question as (kind, message, choices_or_default).
    """

    def __init__(self, answers: Sequence[str | None]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, object]] = []

    def _next(self) -> str | None:
        if not self.answers:
            raise AssertionError("Prompt script exhausted")
        return self.answers.pop(0)

    def select(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
    ) -> str | None:
        self.calls.append(("select", message, list(choices)))
        return self._next()

    def text(self, message: str, default: str = "") -> str | None:
        self.calls.append(("text", message, default))
        return self._next()


class RecordingRunner:
    """ProcessRunner returning canned exit codes and recording commands."""

    def __init__(self, returncodes: Sequence[int] = (), output: str = "") -> None:
        self.returncodes = list(returncodes)
        self.output = output
        self.commands: list[str] = []

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        returncode = self.returncodes.pop(0) if self.returncodes else 0
        return CommandResult(command=command, returncode=returncode, output=self.output)


class FixedRandomSource:
    """Deterministic RandomSource: reverses text, repeats the first symbol."""

    def __init__(self) -> None:
        self.shuffled: list[str] = []
        self.tokens: list[int] = []

    def shuffle(self, text: str) -> str:
        self.shuffled.append(text)
        return text[::-1]

    def token(self, length: int, alphabet: str) -> str:
        self.tokens.append(length)
        return alphabet[0] * length


@pytest.fixture
def make_prompts() -> type[ScriptedPromptDevice]:
    """Factory for scripted prompt devices."""
    return ScriptedPromptDevice


@pytest.fixture
def make_runner() -> type[RecordingRunner]:
    """Factory for recording process runners."""
    return RecordingRunner


@pytest.fixture
def random_source() -> FixedRandomSource:
    return FixedRandomSource()


@pytest.fixture
def console() -> Console:
    """Console writing plain text to an in-memory buffer."""
    return Console(file=StringIO(), width=200, no_color=True, highlight=False)


def console_output(console: Console) -> str:
    file = console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


@pytest.fixture
def read_output():
    """Return a function reading everything printed to a test console."""
    return console_output

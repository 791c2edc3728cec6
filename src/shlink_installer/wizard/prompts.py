"""Prompt helpers shared by the wizard phases."""

from __future__ import annotations

from collections.abc import Sequence

import questionary
from rich.console import Console

from shlink_installer.cli.formatting import format_title
from shlink_installer.errors import WizardCancelledError
from shlink_installer.wizard.types import PromptDevice

EMPTY_VALUE_ERROR = "Value can't be empty"


class QuestionaryPromptDevice:
    """PromptDevice rendering questions with questionary.

    questionary returns None from ``ask()`` when the operator hits Ctrl-C,
    which callers treat as a cancellation.
    """

    def select(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
    ) -> str | None:
        return questionary.select(
            message,
            choices=list(choices),
            default=default,
        ).ask()

    def text(self, message: str, default: str = "") -> str | None:
        return questionary.text(message, default=default).ask()


def print_title(console: Console, text: str) -> None:
    """Print a framed section header."""
    for line in format_title(text):
        console.print(line)


def choose(
    prompts: PromptDevice,
    message: str,
    choices: Sequence[str],
    default_index: int = 0,
) -> str:
    """Ask the operator to pick exactly one of ``choices``.

    Args:
        prompts: Device rendering the question.
        message: Question text, without trailing colon.
        choices: Labels in presentation order.
        default_index: Position of the preselected label.

    Returns:
        The selected label.

    Raises:
        WizardCancelledError: If the operator cancels the prompt.
        ValueError: If the device answers with an unknown label.
    """
    default = choices[default_index]
    result = prompts.select(f"{message} (defaults to {default}):", choices, default)

    if result is None:
        raise WizardCancelledError()
    if result not in choices:
        raise ValueError(f"Invalid choice '{result}'. Valid: {list(choices)}")

    return result


def ask(
    prompts: PromptDevice,
    console: Console,
    text: str,
    default: str | None = None,
    allow_empty: bool = False,
) -> str:
    """Ask for free text until an acceptable answer is given.

    An empty answer resolves to ``default`` when there is one. Otherwise it
    is returned as-is if ``allow_empty`` is set, or rejected and the question
    is asked again.

    Args:
        prompts: Device rendering the question.
        console: Console receiving the validation error line.
        text: Question label, without trailing colon.
        default: Value used when the operator enters nothing.
        allow_empty: Accept an empty answer when there is no default.

    Returns:
        The accepted answer.

    Raises:
        WizardCancelledError: If the operator cancels the prompt.
    """
    if default:
        text = f"{text} (defaults to {default})"

    while True:
        value = prompts.text(f"{text}:", default or "")
        if value is None:
            raise WizardCancelledError()

        if value.strip():
            return value
        if default:
            return default
        if allow_empty:
            # whitespace-only answers count as empty
            return ""

        console.print(f"[red]{EMPTY_VALUE_ERROR}[/red]")

"""Provisioning steps run after the configuration has been written.

Steps run one after another and the sequence stops at the first failure.
Steps already applied are left as they are.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from shlink_installer.cli.formatting import format_command_output, format_error
from shlink_installer.runner import CommandResult, ProcessRunner

logger = logging.getLogger(__name__)

VERBOSE_HINT = "Run this command with -v to see specific error info."


@dataclass(frozen=True)
class ProvisioningStep:
    """One external command required to bring the database into shape.

    Attributes:
        message: Progress line printed before the command runs.
        command: Command line to execute.
        error_message: Line printed when the command fails.
    """

    message: str
    command: str
    error_message: str


DEFAULT_PROVISIONING_STEPS: tuple[ProvisioningStep, ...] = (
    ProvisioningStep(
        message="Initializing database...",
        command="php vendor/bin/doctrine.php orm:schema-tool:create",
        error_message="Error generating database.",
    ),
    ProvisioningStep(
        message="Updating database...",
        command="php vendor/bin/doctrine-migrations migrations:migrate",
        error_message="Error updating database.",
    ),
    ProvisioningStep(
        message="Generating proxies...",
        command="php vendor/bin/doctrine.php orm:generate-proxies",
        error_message="Error generating proxies.",
    ),
)


def report_failure(
    console: Console,
    step: ProvisioningStep,
    result: CommandResult,
    verbose: bool,
) -> None:
    """Tell the operator a step failed.

    Without ``verbose`` only the step's message and a hint are shown; with it,
    the captured command output is displayed as well.
    """
    if not verbose:
        console.print(f"    [red]{step.error_message}[/red]  {VERBOSE_HINT}")
        return

    console.print(
        format_error(
            step.error_message,
            context=f"Command exited with status {result.returncode}",
        )
    )
    console.print(format_command_output(result.command, result.output))


def run_step(
    step: ProvisioningStep,
    runner: ProcessRunner,
    console: Console,
    verbose: bool = False,
) -> bool:
    """Run a single step and report its outcome.

    Returns:
        True if the command succeeded.
    """
    console.print(step.message)
    result = runner.run(step.command)

    if result.successful:
        console.print("    [green]Success![/green]")
        return True

    logger.debug("Step failed: %s (exit %d)", step.command, result.returncode)
    report_failure(console, step, result, verbose)
    return False


def run_provisioning(
    steps: Sequence[ProvisioningStep],
    runner: ProcessRunner,
    console: Console,
    verbose: bool = False,
) -> bool:
    """Run steps in order, stopping at the first one that fails.

    Returns:
        True if every step succeeded.
    """
    for index, step in enumerate(steps, start=1):
        if not run_step(step, runner, console, verbose=verbose):
            skipped = len(steps) - index
            if skipped:
                logger.info("Skipping %d remaining provisioning step(s)", skipped)
            return False
    return True

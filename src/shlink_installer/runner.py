"""Synchronous execution of provisioning commands."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Shell conventions for commands that could not be started
COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command.

    Attributes:
        command: Command line as given to the runner.
        returncode: Process exit status.
        output: Combined stdout and stderr.
    """

    command: str
    returncode: int
    output: str = ""

    @property
    def successful(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Runs a command to completion and reports how it went."""

    def run(self, command: str) -> CommandResult:
        ...


class SubprocessRunner:
    """ProcessRunner spawning child processes with ``subprocess``.

    Commands are split with ``shlex`` and run without a shell. The runner
    waits for the child to exit; no timeout is applied.
    """

    def __init__(self, cwd: Path | str | None = None) -> None:
        self.cwd = cwd

    def run(self, command: str) -> CommandResult:
        logger.info("CMD %s", command)

        try:
            argv = shlex.split(command)
        except ValueError as e:
            logger.debug("Could not parse %s: %s", command, e)
            return CommandResult(
                command=command,
                returncode=COMMAND_NOT_EXECUTABLE,
                output=f"Could not parse command: {e}",
            )

        try:
            p = subprocess.run(
                argv,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            logger.debug("Could not start %s: %s", command, e)
            if isinstance(e, FileNotFoundError):
                returncode = COMMAND_NOT_FOUND
            else:
                returncode = COMMAND_NOT_EXECUTABLE
            return CommandResult(command=command, returncode=returncode, output=str(e))

        if p.stdout:
            logger.debug("OUTPUT %s", p.stdout.strip())
        if p.returncode != 0:
            logger.info("Command failed (%d): %s", p.returncode, command)

        return CommandResult(command=command, returncode=p.returncode, output=p.stdout or "")

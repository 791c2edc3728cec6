"""Type definitions for wizard system."""

from collections.abc import Sequence
from typing import Any, Protocol


class PromptDevice(Protocol):
    """Renders questions to the operator and returns their answers.

    Both methods return None when the operator cancels the prompt.
    """

    def select(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
    ) -> str | None:
        """Ask the operator to pick one of ``choices``."""
        ...

    def text(self, message: str, default: str = "") -> str | None:
        """Ask the operator for free text, pre-filled with ``default``."""
        ...


# Type alias for wizard configuration
WizardConfig = dict[str, Any]

# Generated configuration document handed to the writer
ConfigDocument = dict[str, Any]

"""Base wizard class for all interactive wizards."""

from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape

from shlink_installer.wizard.types import ConfigDocument, WizardConfig


class BaseWizard(ABC):
    """Base class for all wizard implementations.

    Provides common functionality:
    - Shared console for operator output
    - Configuration validation hook
    - Summary generation
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the wizard.

        Args:
            console: Console used for operator output.
        """
        self.console = console or Console()
        self.config: WizardConfig = {}

    @abstractmethod
    def run(self) -> bool:
        """Run the wizard from first prompt to last step.

        Returns:
            True if every step completed successfully.

        Raises:
            WizardCancelledError: If the operator cancels a prompt.
        """
        pass

    @abstractmethod
    def validate_config(self, config: ConfigDocument) -> tuple[bool, str]:
        """Validate the document produced from the collected answers.

        Args:
            config: Configuration document to validate.

        Returns:
            Tuple of (is_valid, error_message).
            error_message is empty string if valid.
        """
        pass

    def get_summary(self) -> str:
        """Get summary of the answers collected so far.

        Returns:
            Human-readable summary of configuration.
        """
        if not self.config:
            return "[dim]No configuration collected yet[/dim]"

        lines = ["[bold]Wizard Configuration:[/bold]"]
        for key, value in self.config.items():
            if isinstance(value, dict):
                lines.append(f"  {key}:")
                for sub_key, sub_value in value.items():
                    lines.append(f"    {sub_key}: {escape(str(sub_value))}")
            else:
                lines.append(f"  {key}: {escape(str(value))}")
        return "\n".join(lines)

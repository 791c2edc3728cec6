"""Rich formatting utilities for CLI output.

This module provides reusable Rich components for consistent visual
formatting across the installer, including section titles, captured
command output and formatted error/warning/success messages.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

TITLE_MARKER = "*"
# Marker plus one space on each side of the title
TITLE_MARGIN = 4


def format_title(text: str) -> list[Text]:
    """Create the framed header printed before each wizard section.

    Args:
        text: Section name; surrounding whitespace is stripped and the
            name is upper-cased.

    Returns:
        Lines to print, starting with a blank separator line.

    Example:
        ``format_title("database")`` renders::

            ************
            * DATABASE *
            ************
    """
    text = text.strip()
    border = TITLE_MARKER * (len(text) + TITLE_MARGIN)

    return [
        Text(""),
        Text(border, style="green"),
        Text(f"{TITLE_MARKER} {text.upper()} {TITLE_MARKER}", style="green"),
        Text(border, style="green"),
    ]


def format_command_output(command: str, output: str) -> Syntax:
    """Render captured command output for diagnostics.

    Args:
        command: Command line that produced the output
        output: Combined stdout/stderr of the command

    Returns:
        Syntax block showing the command followed by its output
    """
    body = f"$ {command}\n{output.rstrip()}" if output.strip() else f"$ {command}"
    return Syntax(
        body,
        "console",
        theme="monokai",
        line_numbers=False,
        background_color="default",
        word_wrap=True,
    )


def format_error(message: str, context: str | None = None) -> Panel:
    """Create formatted error panel.

    Args:
        message: Error message
        context: Optional context hint for resolution

    Returns:
        Panel with error formatting
    """
    content = f"[bold red]{message}[/bold red]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        width=78,
        expand=False,
    )


def format_warning(message: str, context: str | None = None) -> Panel:
    """Create formatted warning panel.

    Args:
        message: Warning message
        context: Optional additional information

    Returns:
        Panel with warning formatting
    """
    content = f"[bold yellow]{message}[/bold yellow]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold yellow]Warning[/bold yellow]",
        border_style="yellow",
        width=78,
        expand=False,
    )


def format_success(message: str, details: str | None = None) -> Panel:
    """Create formatted success panel.

    Args:
        message: Success message
        details: Optional details about the result

    Returns:
        Panel with success formatting
    """
    content = f"[bold green]✓ {message}[/bold green]"
    if details:
        content += f"\n\n[dim]{details}[/dim]"

    return Panel(
        content,
        title="[bold green]Success[/bold green]",
        border_style="green",
        width=78,
        expand=False,
    )

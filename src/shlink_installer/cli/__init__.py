"""CLI utilities for shlink-installer.

This module provides Rich-based formatting utilities for the CLI,
including section titles and formatted error/warning/success panels.
"""

from shlink_installer.cli.formatting import (
    format_command_output,
    format_error,
    format_success,
    format_title,
    format_warning,
)

__all__ = [
    "format_command_output",
    "format_error",
    "format_success",
    "format_title",
    "format_warning",
]

"""Logging configuration for the installer CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "shlink-installer"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Diagnostics go to stderr so they never mix with the wizard's prompts.
    Safe to call more than once; the level is updated and no duplicate
    handler is added.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The ``shlink_installer`` logger.
    """
    logger = logging.getLogger("shlink_installer")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    return logger

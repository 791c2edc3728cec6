"""Interactive wizard system for shlink-installer.

This module provides the prompt-based install wizard, its prompting phases
and the prompt device abstraction they rely on.
"""

from shlink_installer.wizard.base import BaseWizard
from shlink_installer.wizard.install_wizard import InstallWizard, run_install_wizard
from shlink_installer.wizard.phases import InstallContext
from shlink_installer.wizard.prompts import QuestionaryPromptDevice, ask, choose
from shlink_installer.wizard.types import PromptDevice

__all__ = [
    "BaseWizard",
    "InstallContext",
    "InstallWizard",
    "PromptDevice",
    "QuestionaryPromptDevice",
    "ask",
    "choose",
    "run_install_wizard",
]

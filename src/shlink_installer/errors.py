"""Exceptions raised by the installer."""


class InstallerError(Exception):
    """Base class for installer failures."""


class WizardCancelledError(InstallerError, ValueError):
    """The operator aborted a prompt (Ctrl-C or end of input)."""

    def __init__(self, message: str = "Wizard cancelled") -> None:
        super().__init__(message)


class SettingsError(InstallerError):
    """An installer settings file could not be read or is invalid."""

"""Installer settings.

Defines the optional ``shlink-installer.yml`` file using Pydantic models.
Without a settings file the installer uses the built-in defaults.

Example:
    cached_config_path: data/cache/app_config.php
    generated_config_path: config/params/generated_config.yml
    provisioning_steps:
      - message: Initializing database...
        command: php vendor/bin/doctrine.php orm:schema-tool:create
        error_message: Error generating database.
"""

from __future__ import annotations

import shlex
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from typing_extensions import Self

from shlink_installer.constants import CACHED_CONFIG_PATH, GENERATED_CONFIG_PATH
from shlink_installer.errors import SettingsError
from shlink_installer.provisioning import DEFAULT_PROVISIONING_STEPS, ProvisioningStep
from shlink_installer.writer import WRITERS_BY_SUFFIX

SETTINGS_FILENAMES = ["shlink-installer.yml", "shlink-installer.yaml", ".shlink-installer.yml"]


class ProvisioningStepConfig(BaseModel):
    """A provisioning command and the messages around it."""

    message: str
    command: str
    error_message: str

    model_config = {"frozen": True}

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("command cannot be empty")
        try:
            shlex.split(v)
        except ValueError as e:
            raise ValueError(f"command cannot be parsed: {e}") from e
        return v

    def to_step(self) -> ProvisioningStep:
        return ProvisioningStep(
            message=self.message,
            command=self.command,
            error_message=self.error_message,
        )


def _default_steps() -> list[ProvisioningStepConfig]:
    return [
        ProvisioningStepConfig(
            message=step.message,
            command=step.command,
            error_message=step.error_message,
        )
        for step in DEFAULT_PROVISIONING_STEPS
    ]


class InstallerSettings(BaseModel):
    """Where the installer reads and writes, and what it runs afterwards."""

    cached_config_path: str = CACHED_CONFIG_PATH
    generated_config_path: str = GENERATED_CONFIG_PATH
    provisioning_steps: list[ProvisioningStepConfig] = Field(default_factory=_default_steps)

    model_config = {"frozen": True}

    @field_validator("generated_config_path")
    @classmethod
    def validate_generated_config_path(cls, v: str) -> str:
        suffix = Path(v).suffix.lower()
        if suffix not in WRITERS_BY_SUFFIX:
            valid = sorted(WRITERS_BY_SUFFIX)
            raise ValueError(f"unsupported config format '{suffix or v}'. Valid: {valid}")
        return v

    @field_validator("provisioning_steps")
    @classmethod
    def validate_steps(cls, v: list[ProvisioningStepConfig]) -> list[ProvisioningStepConfig]:
        if not v:
            raise ValueError("at least one provisioning step is required")
        return v

    @property
    def steps(self) -> list[ProvisioningStep]:
        return [step.to_step() for step in self.provisioning_steps]

    def resolve(self, path: str, base_dir: Path | str | None = None) -> Path:
        """Resolve one of the configured paths against a project directory."""
        resolved = Path(path)
        if base_dir is None or resolved.is_absolute():
            return resolved
        return Path(base_dir) / resolved

    @classmethod
    def from_yaml(cls, content: str) -> Self:
        """Parse settings from a YAML string.

        Raises:
            SettingsError: If the YAML is malformed or does not match the schema.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in settings: {e}") from e

        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise SettingsError(f"Invalid installer settings: {e}") from e

    @classmethod
    def from_file(cls, path: Path | str) -> Self:
        """Load settings from a YAML file."""
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Could not read settings file {path}: {e}") from e
        return cls.from_yaml(content)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(), default_flow_style=False, sort_keys=False)


def find_settings(project_dir: Path | str | None = None) -> Path | None:
    """Find a settings file in the project directory.

    Args:
        project_dir: Directory to look in (defaults to the current directory).

    Returns:
        Path to the settings file, or None if there is none.
    """
    directory = Path.cwd() if project_dir is None else Path(project_dir)

    for filename in SETTINGS_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def load_settings(
    path: Path | str | None = None,
    project_dir: Path | str | None = None,
) -> InstallerSettings:
    """Load installer settings.

    An explicit ``path`` must exist. Without one, the project directory is
    searched and the defaults are used when nothing is found.

    Raises:
        SettingsError: If the settings file is missing or invalid.
    """
    if path is None:
        path = find_settings(project_dir)
        if path is None:
            return InstallerSettings()

    path = Path(path)
    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")

    return InstallerSettings.from_file(path)

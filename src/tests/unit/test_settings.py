"""Unit tests for installer settings."""

from pathlib import Path

import pytest
import yaml

from shlink_installer.errors import SettingsError
from shlink_installer.provisioning import DEFAULT_PROVISIONING_STEPS
from shlink_installer.settings import (
    InstallerSettings,
    find_settings,
    load_settings,
)


class TestInstallerSettings:
    """Test suite for the settings model."""

    def test_defaults(self) -> None:
        settings = InstallerSettings()

        assert settings.cached_config_path == "data/cache/app_config.php"
        assert settings.generated_config_path == "config/params/generated_config.yml"
        assert settings.steps == list(DEFAULT_PROVISIONING_STEPS)

    def test_from_yaml(self) -> None:
        content = """
generated_config_path: config/params/generated_config.json
provisioning_steps:
  - message: Migrating...
    command: php bin/migrate
    error_message: Migration failed.
"""
        settings = InstallerSettings.from_yaml(content)

        assert settings.generated_config_path == "config/params/generated_config.json"
        assert settings.cached_config_path == "data/cache/app_config.php"
        assert [step.command for step in settings.steps] == ["php bin/migrate"]

    def test_empty_yaml_gives_defaults(self) -> None:
        assert InstallerSettings.from_yaml("") == InstallerSettings()

    def test_invalid_yaml(self) -> None:
        with pytest.raises(SettingsError, match="Invalid YAML"):
            InstallerSettings.from_yaml("provisioning_steps: [unclosed")

    def test_empty_steps_rejected(self) -> None:
        with pytest.raises(SettingsError, match="at least one provisioning step"):
            InstallerSettings.from_yaml("provisioning_steps: []")

    def test_blank_command_rejected(self) -> None:
        content = "provisioning_steps:\n  - {message: m, command: '  ', error_message: e}\n"

        with pytest.raises(SettingsError, match="command cannot be empty"):
            InstallerSettings.from_yaml(content)

    def test_unbalanced_quote_in_command_rejected(self) -> None:
        """Test a command shlex cannot split is refused at load time."""
        content = (
            "provisioning_steps:\n"
            "  - {message: m, command: \"php 'vendor/bin/doctrine.php\", error_message: e}\n"
        )

        with pytest.raises(SettingsError, match="command cannot be parsed"):
            InstallerSettings.from_yaml(content)

    @pytest.mark.parametrize("name", ["generated_config.php", "generated_config", "out.toml"])
    def test_unsupported_target_format_rejected(self, name: str) -> None:
        with pytest.raises(SettingsError, match="unsupported config format"):
            InstallerSettings.from_yaml(f"generated_config_path: {name}\n")

    @pytest.mark.parametrize("name", ["out.yml", "out.YAML", "out.json"])
    def test_supported_target_formats(self, name: str) -> None:
        settings = InstallerSettings.from_yaml(f"generated_config_path: {name}\n")

        assert settings.generated_config_path == name

    def test_frozen(self) -> None:
        settings = InstallerSettings()

        with pytest.raises(Exception):
            settings.generated_config_path = "other.yml"  # type: ignore[misc]

    def test_to_yaml_round_trips(self) -> None:
        rendered = InstallerSettings().to_yaml()

        assert InstallerSettings.from_yaml(rendered) == InstallerSettings()
        assert list(yaml.safe_load(rendered)) == [
            "cached_config_path",
            "generated_config_path",
            "provisioning_steps",
        ]

    def test_resolve_relative(self, tmp_path: Path) -> None:
        settings = InstallerSettings()

        assert settings.resolve("a/b.yml", tmp_path) == tmp_path / "a/b.yml"
        assert settings.resolve("a/b.yml") == Path("a/b.yml")

    def test_resolve_absolute(self, tmp_path: Path) -> None:
        absolute = tmp_path / "abs.yml"

        assert InstallerSettings().resolve(str(absolute), "/elsewhere") == absolute


class TestLoadSettings:
    """Test suite for settings discovery and loading."""

    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        assert find_settings(tmp_path) is None
        assert load_settings(project_dir=tmp_path) == InstallerSettings()

    def test_discovers_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".shlink-installer.yml"
        path.write_text("cached_config_path: var/cache.php\n")

        assert find_settings(tmp_path) == path
        assert load_settings(project_dir=tmp_path).cached_config_path == "var/cache.php"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yml"
        path.write_text("generated_config_path: out.json\n")

        assert load_settings(path).generated_config_path == "out.json"

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsError, match="not found"):
            load_settings(tmp_path / "missing.yml")

    def test_discovered_file_with_unsupported_target(self, tmp_path: Path) -> None:
        (tmp_path / "shlink-installer.yml").write_text("generated_config_path: config.php\n")

        with pytest.raises(SettingsError, match="unsupported config format"):
            load_settings(project_dir=tmp_path)

"""Interactive wizard installing a Shlink instance."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from shlink_installer.answers import AnswerSet
from shlink_installer.builder import (
    RandomSource,
    SystemRandomSource,
    build_app_config,
    validate_app_config,
)
from shlink_installer.provisioning import run_provisioning
from shlink_installer.runner import ProcessRunner, SubprocessRunner
from shlink_installer.settings import InstallerSettings, load_settings
from shlink_installer.wizard.base import BaseWizard
from shlink_installer.wizard.phases import (
    InstallContext,
    ask_application,
    ask_database,
    ask_language,
    ask_url_shortener,
)
from shlink_installer.wizard.prompts import QuestionaryPromptDevice
from shlink_installer.wizard.types import ConfigDocument, PromptDevice
from shlink_installer.writer import ConfigWriter, writer_for_path

logger = logging.getLogger(__name__)


class InstallWizard(BaseWizard):
    """Wizard collecting configuration and provisioning the database.

    A run goes through these stages, in order:
    - Drop the application's cached config, if any (failure only warns)
    - Ask the database, URL shortener, language and application questions
    - Build the configuration document and write it to the target file
    - Run each provisioning step, stopping at the first failure

    Collaborators are injectable so runs can be scripted: ``prompts`` asks the
    questions, ``writer`` persists the document, ``runner`` executes the
    provisioning commands and ``random_source`` backs generated defaults.
    """

    def __init__(
        self,
        prompts: PromptDevice | None = None,
        writer: ConfigWriter | None = None,
        runner: ProcessRunner | None = None,
        settings: InstallerSettings | None = None,
        random_source: RandomSource | None = None,
        console: Console | None = None,
        project_dir: Path | str | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize install wizard.

        Args:
            prompts: Device asking the questions (questionary by default).
            writer: Config writer (chosen from the target suffix by default).
            runner: Process runner (subprocess in ``project_dir`` by default).
            settings: Installer settings (built-in defaults if omitted).
            random_source: Randomness for generated defaults.
            console: Console for operator output.
            project_dir: Directory relative paths resolve against.
            verbose: Surface failure details from provisioning commands.
        """
        super().__init__(console=console)
        self.settings = settings or InstallerSettings()
        self.project_dir = Path(project_dir) if project_dir is not None else None
        self.writer = writer
        self.runner = runner or SubprocessRunner(cwd=self.project_dir)
        self.random_source = random_source or SystemRandomSource()
        self.context = InstallContext(
            console=self.console,
            prompts=prompts or QuestionaryPromptDevice(),
            verbose=verbose,
        )
        self.answers: AnswerSet | None = None
        self.document: ConfigDocument | None = None

    @property
    def cached_config_path(self) -> Path:
        return self.settings.resolve(self.settings.cached_config_path, self.project_dir)

    @property
    def generated_config_path(self) -> Path:
        return self.settings.resolve(self.settings.generated_config_path, self.project_dir)

    def run(self) -> bool:
        """Run the whole installation.

        Returns:
            True if every provisioning step succeeded, False if the run
            halted on a failed step.

        Raises:
            WizardCancelledError: If the operator cancels a prompt.
            OSError: If the configuration file cannot be written.
        """
        self.console.print("[green]Welcome to Shlink!![/green]")
        self.console.print("This process will guide you through the installation.")

        self.clear_cached_config()

        self.answers = self.collect_answers()
        self.config = self.answers.to_summary()
        self.console.print("")
        self.console.print(self.get_summary())

        self.document = build_app_config(self.answers, self.random_source)
        is_valid, error_msg = self.validate_config(self.document)
        if not is_valid:
            raise ValueError(f"Invalid configuration: {error_msg}")

        self.write_config(self.document)

        return run_provisioning(
            self.settings.steps,
            self.runner,
            self.console,
            verbose=self.context.verbose,
        )

    def validate_config(self, config: ConfigDocument) -> tuple[bool, str]:
        return validate_app_config(config)

    def clear_cached_config(self) -> bool:
        """Delete the application's cached config so new values apply.

        Returns:
            False only if a cached config existed and could not be deleted.
        """
        path = self.cached_config_path
        if not path.exists():
            return True

        self.console.print("Deleting old cached config...", end="")
        try:
            path.unlink()
        except OSError as e:
            logger.warning("Could not delete cached config %s: %s", path, e)
            self.console.print(
                " [red]Failed![/red] You will have to manually delete the "
                f"{self.settings.cached_config_path} file to get new config applied."
            )
            return False

        self.console.print(" [green]Success[/green]")
        return True

    def collect_answers(self) -> AnswerSet:
        """Run the four prompting phases in order."""
        database = ask_database(self.context)
        url_shortener = ask_url_shortener(self.context)
        language = ask_language(self.context)
        application = ask_application(self.context)

        return AnswerSet(
            database=database,
            url_shortener=url_shortener,
            language=language,
            application=application,
        )

    def write_config(self, document: ConfigDocument) -> Path:
        """Persist the document to the generated config path."""
        path = self.generated_config_path
        writer = self.writer or writer_for_path(path)
        writer.to_file(path, document)
        logger.info("Generated configuration written to %s", path)

        self.console.print("[green]Custom configuration properly generated![/green]")
        self.console.print("")
        return path


def run_install_wizard(
    project_dir: Path | str | None = None,
    settings_path: Path | str | None = None,
    verbose: bool = False,
    console: Console | None = None,
) -> bool:
    """Run the install wizard with the default collaborators.

    This is the main entry point for the wizard, called from the CLI.

    Args:
        project_dir: Shlink project directory (defaults to the current one).
        settings_path: Explicit installer settings file.
        verbose: Surface failure details from provisioning commands.
        console: Console for operator output.

    Returns:
        True if the installation completed.

    Raises:
        SettingsError: If the settings file is missing or invalid.
        WizardCancelledError: If the operator cancels a prompt.
    """
    settings = load_settings(settings_path, project_dir=project_dir)
    wizard = InstallWizard(
        settings=settings,
        console=console,
        project_dir=project_dir,
        verbose=verbose,
    )
    return wizard.run()

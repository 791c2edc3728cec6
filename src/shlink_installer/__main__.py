"""Command-line interface for shlink-installer."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from shlink_installer.cli.formatting import (
    format_error,
    format_success,
    format_warning,
)
from shlink_installer.errors import SettingsError, WizardCancelledError
from shlink_installer.logging_utils import configure_logging
from shlink_installer.settings import SETTINGS_FILENAMES, InstallerSettings

console = Console()


@click.group()
@click.version_option(package_name="shlink-installer")
def cli() -> None:
    """Install and configure a Shlink URL shortener instance.

    The installer asks a few questions about your database, short URL
    domain, languages and API secret, writes the generated configuration
    and then creates and migrates the database.

    Quick Start:

      1. Run the wizard from the Shlink project directory:
         $ shlink-installer install

      2. Show failure details from the database commands:
         $ shlink-installer install -v

      3. Customise paths or commands:
         $ shlink-installer init
         $ shlink-installer install --settings shlink-installer.yml

    For more information on a specific command:
      $ shlink-installer COMMAND --help
    """
    pass


@cli.command()
@click.option(
    "--project-dir",
    "-d",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Shlink project directory paths and commands are relative to",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Installer settings file (searched in the project directory if omitted)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show command output when a provisioning step fails",
)
def install(project_dir: Path, settings_path: Path | None, verbose: bool) -> None:
    """Run the interactive installation wizard.

    The wizard will guide you through:
    - Database type and connection details
    - Schema and hostname for generated short URLs
    - Application and CLI languages
    - Secret used to sign API tokens

    Afterwards it creates the database schema, runs migrations and
    generates proxies, stopping at the first command that fails.

    Examples:
      # Install in the current directory
      shlink-installer install

      # Install another checkout with verbose failure output
      shlink-installer install -d /srv/shlink -v
    """
    configure_logging(verbose)

    from shlink_installer.wizard.install_wizard import run_install_wizard

    try:
        completed = run_install_wizard(
            project_dir=project_dir,
            settings_path=settings_path,
            verbose=verbose,
            console=console,
        )
    except WizardCancelledError:
        console.print("\n[yellow]Installation cancelled by user[/yellow]")
        raise click.ClickException("Installation cancelled")
    except ValueError as e:
        console.print(format_error("Could not generate the configuration", context=str(e)))
        raise click.ClickException(str(e))
    except SettingsError as e:
        console.print(format_error("Could not load installer settings", context=str(e)))
        raise click.ClickException(str(e))
    except OSError as e:
        console.print(
            format_error(
                "Could not write the generated configuration",
                context=f"Error: {e}",
            )
        )
        raise click.ClickException(str(e))

    if not completed:
        console.print(
            format_warning(
                "Installation halted before completing",
                context="Fix the error above and run the installer again",
            )
        )
        raise SystemExit(1)

    console.print(format_success("Shlink installed"))


@cli.command()
@click.option(
    "--project-dir",
    "-d",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the settings file to",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing settings file",
)
def init(project_dir: Path, force: bool) -> None:
    """Write a default installer settings file.

    The file lists where the cached and generated configs live and which
    provisioning commands run after the configuration is written.

    Examples:
      shlink-installer init
      shlink-installer init -d /srv/shlink --force
    """
    path = project_dir / SETTINGS_FILENAMES[0]

    if path.exists() and not force:
        console.print(
            format_error(
                f"{path} already exists",
                context="Use --force to overwrite it",
            )
        )
        raise click.ClickException("Settings file already exists")

    path.write_text(InstallerSettings().to_yaml(), encoding="utf-8")
    console.print(format_success(f"Created {path}"))


if __name__ == "__main__":
    cli()

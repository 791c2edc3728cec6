"""Prompting phases of the install wizard.

Each phase prints its section title, asks its questions and returns the
answers for its topic. Phases receive everything they need through an
``InstallContext`` and never see each other's answers.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from shlink_installer.answers import (
    ApplicationAnswers,
    DatabaseAnswers,
    LanguageAnswers,
    UrlShortenerAnswers,
)
from shlink_installer.constants import SUPPORTED_LANGUAGES, URL_SCHEMAS
from shlink_installer.drivers import DATABASE_DRIVERS, get_driver
from shlink_installer.wizard.prompts import ask, choose, print_title
from shlink_installer.wizard.types import PromptDevice


@dataclass
class InstallContext:
    """Collaborators shared by the phases of a single wizard run.

    Attributes:
        console: Console receiving operator-facing output.
        prompts: Device asking the questions.
        verbose: Whether failure details should be surfaced.
    """

    console: Console
    prompts: PromptDevice
    verbose: bool = False


def ask_database(ctx: InstallContext) -> DatabaseAnswers:
    """Ask for the database type and, for server databases, how to reach it."""
    print_title(ctx.console, "DATABASE")

    label = choose(ctx.prompts, "Select database type", list(DATABASE_DRIVERS))
    driver = get_driver(label)

    if not driver.requires_server:
        return DatabaseAnswers(driver=driver)

    return DatabaseAnswers(
        driver=driver,
        name=ask(ctx.prompts, ctx.console, "Database name", "shlink"),
        user=ask(ctx.prompts, ctx.console, "Database username"),
        password=ask(ctx.prompts, ctx.console, "Database password"),
        host=ask(ctx.prompts, ctx.console, "Database host", "localhost"),
        port=ask(ctx.prompts, ctx.console, "Database port", driver.default_port),
    )


def ask_url_shortener(ctx: InstallContext) -> UrlShortenerAnswers:
    print_title(ctx.console, "URL SHORTENER")

    return UrlShortenerAnswers(
        schema=choose(ctx.prompts, "Select schema for generated short URLs", URL_SCHEMAS),
        hostname=ask(ctx.prompts, ctx.console, "Hostname for generated URLs"),
        chars=ask(
            ctx.prompts,
            ctx.console,
            "Character set for generated short codes (leave empty to autogenerate one)",
            allow_empty=True,
        ),
    )


def ask_language(ctx: InstallContext) -> LanguageAnswers:
    print_title(ctx.console, "LANGUAGE")

    return LanguageAnswers(
        default=choose(
            ctx.prompts,
            "Select default language for the application in general",
            SUPPORTED_LANGUAGES,
        ),
        cli=choose(
            ctx.prompts,
            "Select default language for CLI executions",
            SUPPORTED_LANGUAGES,
        ),
    )


def ask_application(ctx: InstallContext) -> ApplicationAnswers:
    print_title(ctx.console, "APPLICATION")

    return ApplicationAnswers(
        secret=ask(
            ctx.prompts,
            ctx.console,
            "Define a secret string that will be used to sign API tokens "
            "(leave empty to autogenerate one)",
            allow_empty=True,
        ),
    )

"""Typed answer set collected by the install wizard.

Each prompting phase produces one of the dataclasses below. The wizard
assembles them into an ``AnswerSet`` once every phase has completed, and the
config builder consumes it exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shlink_installer.drivers import DatabaseDriver

MASK = "********"


@dataclass(frozen=True)
class DatabaseAnswers:
    """Answers from the database phase.

    Server fields stay None when the driver stores its data in a local file.

    Attributes:
        driver: Selected database driver.
        name: Database name.
        user: Database username.
        password: Database password.
        host: Database host.
        port: Database port (empty means the driver default).
    """

    driver: DatabaseDriver
    name: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: str | None = None

    def to_dict(self) -> dict[str, str]:
        values = {"DRIVER": self.driver.identifier}
        if self.driver.requires_server:
            values.update(
                {
                    "NAME": self.name or "",
                    "USER": self.user or "",
                    "PASSWORD": self.password or "",
                    "HOST": self.host or "",
                    "PORT": self.port or "",
                }
            )
        return values


@dataclass(frozen=True)
class UrlShortenerAnswers:
    """Answers from the URL shortener phase.

    ``chars`` is empty when the operator wants a generated alphabet.
    """

    schema: str
    hostname: str
    chars: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"SCHEMA": self.schema, "HOSTNAME": self.hostname, "CHARS": self.chars}


@dataclass(frozen=True)
class LanguageAnswers:
    """Default locales for the application and for CLI executions."""

    default: str
    cli: str

    def to_dict(self) -> dict[str, str]:
        return {"DEFAULT": self.default, "CLI": self.cli}


@dataclass(frozen=True)
class ApplicationAnswers:
    """``secret`` is empty when the operator wants a generated one."""

    secret: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"SECRET": self.secret}


@dataclass(frozen=True)
class AnswerSet:
    """All answers collected during one wizard run."""

    database: DatabaseAnswers
    url_shortener: UrlShortenerAnswers
    language: LanguageAnswers
    application: ApplicationAnswers

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Topic name to field mapping, as shown in summaries."""
        return {
            "DATABASE": self.database.to_dict(),
            "URL_SHORTENER": self.url_shortener.to_dict(),
            "LANGUAGE": self.language.to_dict(),
            "APP": self.application.to_dict(),
        }

    def to_summary(self) -> dict[str, Any]:
        """Like ``to_dict`` but with credentials masked."""
        summary = self.to_dict()
        if summary["DATABASE"].get("PASSWORD"):
            summary["DATABASE"]["PASSWORD"] = MASK
        if summary["APP"]["SECRET"]:
            summary["APP"]["SECRET"] = MASK
        return summary

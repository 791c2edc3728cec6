"""Database driver variants.

Each supported driver is a small value object that knows which connection
fields it needs and how to render the ``entity_manager.connection`` section
of the generated configuration. Adding a driver means adding one variant to
``DATABASE_DRIVERS``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from shlink_installer.constants import (
    MYSQL_ATTR_INIT_COMMAND,
    MYSQL_INIT_COMMAND,
    SQLITE_DATABASE_PATH,
)

if TYPE_CHECKING:
    from shlink_installer.answers import DatabaseAnswers

MYSQL = "pdo_mysql"
POSTGRESQL = "pdo_pgsql"
SQLITE = "pdo_sqlite"


@dataclass(frozen=True)
class DatabaseDriver(ABC):
    """A database backend the application can be configured against.

    Attributes:
        label: Name shown to the operator (e.g. "MySQL").
        identifier: Driver identifier written to the configuration.
    """

    label: str
    identifier: str

    @property
    @abstractmethod
    def requires_server(self) -> bool:
        """Whether host, port and credentials must be collected."""

    @property
    @abstractmethod
    def default_port(self) -> str | None:
        """Port suggested to the operator, None when not applicable."""

    @abstractmethod
    def build_connection(self, answers: DatabaseAnswers) -> dict[str, Any]:
        """Render the connection section for this driver.

        Args:
            answers: Database answers collected by the wizard.

        Returns:
            Mapping placed under ``entity_manager.connection``.
        """


@dataclass(frozen=True)
class FileDatabaseDriver(DatabaseDriver):
    """Driver storing the whole database in a local file."""

    path: str = SQLITE_DATABASE_PATH

    @property
    def requires_server(self) -> bool:
        return False

    @property
    def default_port(self) -> str | None:
        return None

    def build_connection(self, answers: DatabaseAnswers) -> dict[str, Any]:
        return {
            "driver": self.identifier,
            "path": self.path,
        }


@dataclass(frozen=True)
class ServerDatabaseDriver(DatabaseDriver):
    """Driver talking to a database server over the network."""

    port: str = "5432"
    driver_options: Mapping[int, str] = field(default_factory=dict)

    @property
    def requires_server(self) -> bool:
        return True

    @property
    def default_port(self) -> str | None:
        return self.port

    def build_connection(self, answers: DatabaseAnswers) -> dict[str, Any]:
        connection: dict[str, Any] = {
            "driver": self.identifier,
            "user": answers.user,
            "password": answers.password,
            "dbname": answers.name,
            "host": answers.host,
            "port": answers.port or self.port,
        }
        if self.driver_options:
            connection["driverOptions"] = dict(self.driver_options)
        return connection


# Presentation order matters: the first entry is the default choice.
DATABASE_DRIVERS: dict[str, DatabaseDriver] = {
    "MySQL": ServerDatabaseDriver(
        label="MySQL",
        identifier=MYSQL,
        port="3306",
        driver_options={MYSQL_ATTR_INIT_COMMAND: MYSQL_INIT_COMMAND},
    ),
    "PostgreSQL": ServerDatabaseDriver(
        label="PostgreSQL",
        identifier=POSTGRESQL,
        port="5432",
    ),
    "SQLite": FileDatabaseDriver(
        label="SQLite",
        identifier=SQLITE,
    ),
}


def get_driver(label: str) -> DatabaseDriver:
    """Look up a driver by the label shown to the operator.

    Raises:
        KeyError: If no driver has that label.
    """
    try:
        return DATABASE_DRIVERS[label]
    except KeyError:
        valid = list(DATABASE_DRIVERS)
        raise KeyError(f"Unknown database type '{label}'. Valid: {valid}") from None

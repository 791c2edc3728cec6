"""Config builder: turns an answer set into the generated configuration.

The builder performs no I/O. The only non-determinism comes from the two
fallbacks for values the operator left empty (short-code alphabet and
application secret), and both draw from an injectable ``RandomSource``.
"""

from __future__ import annotations

import random
import secrets
from typing import Any, Protocol

from shlink_installer.answers import AnswerSet
from shlink_installer.constants import (
    DEFAULT_SHORTCODE_CHARS,
    SECRET_ALPHABET,
    SECRET_LENGTH,
)

# Sections the application expects to find in the generated document
REQUIRED_SECTIONS = ("app_options", "entity_manager", "translator", "cli", "url_shortener")


class RandomSource(Protocol):
    """Source of randomness for generated defaults."""

    def shuffle(self, text: str) -> str:
        """Return a random permutation of ``text``."""
        ...

    def token(self, length: int, alphabet: str) -> str:
        """Return ``length`` characters drawn from ``alphabet``."""
        ...


class SystemRandomSource:
    """RandomSource backed by the operating system's CSPRNG."""

    def __init__(self) -> None:
        self._random = random.SystemRandom()

    def shuffle(self, text: str) -> str:
        chars = list(text)
        self._random.shuffle(chars)
        return "".join(chars)

    def token(self, length: int, alphabet: str) -> str:
        return "".join(secrets.choice(alphabet) for _ in range(length))


def resolve_shortcode_chars(chars: str, random_source: RandomSource) -> str:
    """Use the operator's alphabet, or a shuffled copy of the default one."""
    if chars:
        return chars
    return random_source.shuffle(DEFAULT_SHORTCODE_CHARS)


def resolve_secret(secret: str, random_source: RandomSource) -> str:
    """Use the operator's secret, or generate a fresh one."""
    if secret:
        return secret
    return random_source.token(SECRET_LENGTH, SECRET_ALPHABET)


def build_app_config(
    answers: AnswerSet,
    random_source: RandomSource | None = None,
) -> dict[str, Any]:
    """Build the configuration document for an answer set.

    Args:
        answers: Answers collected by the wizard.
        random_source: Randomness used for empty optional answers. Defaults to
            a ``SystemRandomSource``.

    Returns:
        Nested configuration document ready to be written.

    Example:
        >>> doc = build_app_config(answers)
        >>> doc["entity_manager"]["connection"]["driver"]
        'pdo_sqlite'
    """
    if random_source is None:
        random_source = SystemRandomSource()

    url_shortener = answers.url_shortener

    return {
        "app_options": {
            "secret_key": resolve_secret(answers.application.secret, random_source),
        },
        "entity_manager": {
            "connection": answers.database.driver.build_connection(answers.database),
        },
        "translator": {
            "locale": answers.language.default,
        },
        "cli": {
            "locale": answers.language.cli,
        },
        "url_shortener": {
            "domain": {
                "schema": url_shortener.schema,
                "hostname": url_shortener.hostname,
            },
            "shortcode_chars": resolve_shortcode_chars(url_shortener.chars, random_source),
        },
    }


def validate_app_config(document: dict[str, Any]) -> tuple[bool, str]:
    """Check that a document carries every section the application reads.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is empty string if valid.
    """
    missing = [section for section in REQUIRED_SECTIONS if section not in document]
    if missing:
        return (False, f"Missing configuration sections: {', '.join(missing)}")

    connection = document["entity_manager"].get("connection", {})
    if not connection.get("driver"):
        return (False, "Database driver is required")

    return (True, "")

"""Writers persisting the generated configuration document.

Every writer replaces the target in one step: the document is rendered to
a temporary file next to the target, which is then moved over it.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

import yaml

logger = logging.getLogger(__name__)


class ConfigWriter(Protocol):
    """Serializes a configuration document to durable storage."""

    def to_file(self, path: Path | str, document: dict[str, Any]) -> None:
        """Write ``document`` to ``path``, replacing any previous content."""
        ...


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(content), path)


class YamlConfigWriter:
    """Write configuration as block-style YAML, keeping key order."""

    def render(self, document: dict[str, Any]) -> str:
        return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)

    def to_file(self, path: Path | str, document: dict[str, Any]) -> None:
        _atomic_write(Path(path), self.render(document))


class JsonConfigWriter:
    """Write configuration as indented JSON."""

    def render(self, document: dict[str, Any]) -> str:
        return json.dumps(document, indent=2) + "\n"

    def to_file(self, path: Path | str, document: dict[str, Any]) -> None:
        _atomic_write(Path(path), self.render(document))


WRITERS_BY_SUFFIX: dict[str, type[YamlConfigWriter] | type[JsonConfigWriter]] = {
    ".yml": YamlConfigWriter,
    ".yaml": YamlConfigWriter,
    ".json": JsonConfigWriter,
}


def writer_for_path(path: Path | str) -> ConfigWriter:
    """Pick a writer from the target file extension.

    Raises:
        ValueError: If the extension is not supported.
    """
    suffix = Path(path).suffix.lower()
    try:
        return WRITERS_BY_SUFFIX[suffix]()
    except KeyError:
        valid = sorted(WRITERS_BY_SUFFIX)
        raise ValueError(
            f"Unsupported config format '{suffix or path}'. Valid: {valid}"
        ) from None

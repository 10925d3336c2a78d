"""Persisted bearer-token slot used by the session controller."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from guildcal.client.config import DEFAULT_TOKEN_KEY

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    def load(self) -> str | None:
        """Return the stored token, or None when the slot is empty."""

    def save(self, token: str) -> None:
        """Persist the token, replacing any previous value."""

    def clear(self) -> None:
        """Empty the slot."""


@dataclass
class InMemoryCredentialStore:
    token: str | None = None

    def load(self) -> str | None:
        return self.token

    def save(self, token: str) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None


@dataclass
class FileCredentialStore:
    """Token slot kept as one key of a small JSON document on disk.

    Other keys in the document are preserved, so several tools can share a file.
    """

    path: Path
    key: str = DEFAULT_TOKEN_KEY

    def load(self) -> str | None:
        token = self._read().get(self.key)
        if isinstance(token, str) and token != "":
            return token
        return None

    def save(self, token: str) -> None:
        document = self._read()
        document[self.key] = token
        self._write(document)

    def clear(self) -> None:
        document = self._read()
        if self.key not in document:
            return
        del document[self.key]
        self._write(document)

    def _read(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read credential file %s: %s", self.path, exc)
            return {}
        try:
            document = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed credential file %s", self.path)
            return {}
        return document if isinstance(document, dict) else {}

    def _write(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document), encoding="utf-8")


def create_credential_store(token_path: str | None, key: str = DEFAULT_TOKEN_KEY) -> CredentialStore:
    if token_path:
        return FileCredentialStore(path=Path(token_path), key=key)
    return InMemoryCredentialStore()

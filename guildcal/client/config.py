"""Configuration helpers for the calendar client runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_API_BASE = "http://127.0.0.1:5000/api"
DEFAULT_TOKEN_KEY = "wow_token"


class ConfigurationError(ValueError):
    """Raised when the environment describes an unusable client setup."""


@dataclass(frozen=True)
class ClientSettings:
    api_base: str
    token_path: str | None
    token_key: str
    timeout_seconds: float | None


def load_settings() -> ClientSettings:
    return ClientSettings(
        api_base=_parse_api_base(os.getenv("GUILDCAL_API_BASE", DEFAULT_API_BASE)),
        token_path=os.getenv("GUILDCAL_TOKEN_PATH") or None,
        token_key=_parse_token_key(os.getenv("GUILDCAL_TOKEN_KEY", DEFAULT_TOKEN_KEY)),
        timeout_seconds=_parse_timeout(os.getenv("GUILDCAL_TIMEOUT")),
    )


def _parse_api_base(raw: str) -> str:
    parsed = urlparse(raw.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"GUILDCAL_API_BASE must be an absolute http(s) URL, got {raw!r}")
    return raw.strip().rstrip("/")


def _parse_token_key(raw: str) -> str:
    key = raw.strip()
    if key == "":
        raise ConfigurationError("GUILDCAL_TOKEN_KEY must not be empty")
    return key


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"GUILDCAL_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError("GUILDCAL_TIMEOUT must be positive")
    return timeout

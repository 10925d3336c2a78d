"""Configuration helpers for the development server."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerSettings:
    password: str
    server_salt: str
    host: str
    port: int


def load_settings() -> ServerSettings:
    port_raw = os.getenv("GUILDCAL_PORT", "5000")
    return ServerSettings(
        password=os.getenv("GUILDCAL_SERVER_PASSWORD", "guildpass"),
        server_salt=os.getenv("GUILDCAL_SERVER_SALT", "dev-salt"),
        host=os.getenv("GUILDCAL_HOST", "127.0.0.1"),
        port=int(port_raw),
    )

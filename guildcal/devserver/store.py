"""In-memory persistence for the development server."""

from __future__ import annotations

import hashlib
import hmac
import itertools
from dataclasses import dataclass, field
from typing import Any, Protocol

from guildcal.devserver.security import generate_token, verify_password

DEFAULT_DUNGEONS: tuple[dict[str, Any], ...] = (
    {"name": "Ragefire Chasm", "kind": "dungeon", "min_level": 13, "max_level": 18},
    {"name": "The Deadmines", "kind": "dungeon", "min_level": 17, "max_level": 26},
    {"name": "Scarlet Monastery", "kind": "dungeon", "min_level": 26, "max_level": 45},
    {"name": "Blackrock Depths", "kind": "dungeon", "min_level": 52, "max_level": 60},
    {"name": "Molten Core", "kind": "raid", "min_level": 60, "max_level": 60},
    {"name": "Onyxia's Lair", "kind": "raid", "min_level": 60, "max_level": 60},
)


class CalendarStore(Protocol):
    def issue_token(self, password: str) -> str | None:
        """Return a fresh bearer token when the guild password matches."""

    def is_authorized(self, raw_token: str) -> bool:
        """Return True when the token was issued by this store."""

    def list_events(self) -> list[dict[str, Any]]:
        """Return events ordered by schedule, signups embedded."""

    def list_dungeons(self) -> list[dict[str, Any]]:
        """Return the dungeon catalogue."""

    def create_event(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Persist an event and return it with its assigned id."""

    def delete_event(self, event_id: int) -> bool:
        """Remove an event with its signups; False when it does not exist."""

    def add_signup(self, event_id: int, player_name: str, loot_target: str) -> dict[str, Any] | None:
        """Attach a signup to an event; None when the event does not exist."""


@dataclass
class InMemoryCalendarStore:
    password: str
    server_salt: str
    dungeons: list[dict[str, Any]] = field(default_factory=lambda: [dict(item) for item in DEFAULT_DUNGEONS])

    def __post_init__(self) -> None:
        self._token_hashes: set[str] = set()
        self._events: dict[int, dict[str, Any]] = {}
        self._signups: dict[int, list[dict[str, Any]]] = {}
        self._ids = itertools.count(1)

    def issue_token(self, password: str) -> str | None:
        if not verify_password(password, self.password):
            return None
        token = generate_token()
        self._token_hashes.add(self._token_digest(token))
        return token

    def is_authorized(self, raw_token: str) -> bool:
        return self._token_digest(raw_token) in self._token_hashes

    def list_events(self) -> list[dict[str, Any]]:
        ordered = sorted(self._events.values(), key=lambda event: (event["event_date"], event["id"]))
        return [
            {**event, "signups": [dict(signup) for signup in self._signups.get(event["id"], [])]}
            for event in ordered
        ]

    def list_dungeons(self) -> list[dict[str, Any]]:
        return [dict(item) for item in self.dungeons]

    def create_event(self, fields: dict[str, Any]) -> dict[str, Any]:
        event_id = next(self._ids)
        event = {"id": event_id, **fields}
        self._events[event_id] = event
        self._signups[event_id] = []
        return dict(event)

    def delete_event(self, event_id: int) -> bool:
        if self._events.pop(event_id, None) is None:
            return False
        self._signups.pop(event_id, None)
        return True

    def add_signup(self, event_id: int, player_name: str, loot_target: str) -> dict[str, Any] | None:
        if event_id not in self._events:
            return None
        signup = {"event_id": event_id, "player_name": player_name, "loot_target": loot_target}
        self._signups[event_id].append(signup)
        return dict(signup)

    def _token_digest(self, raw_token: str) -> str:
        # Issued tokens are kept only as salted HMACs, never in the clear.
        return hmac.new(self.server_salt.encode("utf-8"), raw_token.encode("utf-8"), hashlib.sha256).hexdigest()

"""In-memory copies of the server's events and dungeons."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from guildcal.client.gateway import ApiGateway
from guildcal.client.models import Dungeon, Event

logger = logging.getLogger(__name__)

EVENTS = "events"
DUNGEONS = "dungeons"

CacheListener = Callable[[str], None]


class CollectionCache:
    """Holds both collections and replaces each one wholesale on reload.

    Reloads are ticketed per collection. A result is applied only when no
    later-issued reload or clear of the same collection has been applied yet,
    so a slow response can never overwrite a newer one.
    """

    def __init__(self, gateway: ApiGateway) -> None:
        self._gateway = gateway
        self.events: tuple[Event, ...] = ()
        self.dungeons: tuple[Dungeon, ...] = ()
        self._issued = {EVENTS: 0, DUNGEONS: 0}
        self._applied = {EVENTS: 0, DUNGEONS: 0}
        self._listeners: list[CacheListener] = []

    async def reload_events(self) -> bool:
        return await self._reload(EVENTS, "/events", Event)

    async def reload_dungeons(self) -> bool:
        return await self._reload(DUNGEONS, "/dungeons", Dungeon)

    async def reload_all(self) -> tuple[bool, bool]:
        events_loaded, dungeons_loaded = await asyncio.gather(self.reload_events(), self.reload_dungeons())
        return events_loaded, dungeons_loaded

    def clear_events(self) -> None:
        ticket = self._next_ticket(EVENTS)
        self._applied[EVENTS] = ticket
        self.events = ()
        self._notify(EVENTS)

    def find_event(self, event_id: int | str) -> Event | None:
        for event in self.events:
            if str(event.id) == str(event_id):
                return event
        return None

    def subscribe(self, listener: CacheListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _reload(self, name: str, path: str, model: type[BaseModel]) -> bool:
        ticket = self._next_ticket(name)
        data = await self._gateway.request(path)
        if data is None:
            return False
        if not isinstance(data, list):
            logger.warning("Discarding malformed %s payload: expected a list, got %s", name, type(data).__name__)
            return False

        items = tuple(self._parse_items(name, model, data))

        if ticket < self._applied[name]:
            logger.debug("Dropping stale %s reload #%s (already at #%s)", name, ticket, self._applied[name])
            return False

        self._applied[name] = ticket
        setattr(self, name, items)
        self._notify(name)
        return True

    def _parse_items(self, name: str, model: type[BaseModel], data: list[Any]) -> list[Any]:
        items = []
        for index, raw in enumerate(data):
            try:
                items.append(model.model_validate(raw))
            except ValidationError as exc:
                logger.warning("Skipping malformed %s entry #%s: %s", name, index, exc)
        return items

    def _next_ticket(self, name: str) -> int:
        self._issued[name] += 1
        return self._issued[name]

    def _notify(self, name: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(name)
            except Exception:
                logger.exception("Cache listener failed for %s", name)

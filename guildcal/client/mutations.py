"""Create, delete and signup calls followed by a full events reload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from guildcal.client.cache import CollectionCache
from guildcal.client.gateway import ApiGateway
from guildcal.client.models import EventDraft

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"


def is_success(response: Any) -> bool:
    return isinstance(response, dict) and response.get("status") == SUCCESS_STATUS


class MutationOrchestrator:
    def __init__(self, gateway: ApiGateway, cache: CollectionCache) -> None:
        self._gateway = gateway
        self._cache = cache

    async def add_event(self, event: EventDraft | Mapping[str, Any]) -> bool:
        payload = event.to_payload() if isinstance(event, EventDraft) else dict(event)
        return await self._mutate("add_event", "/events", "POST", payload)

    async def delete_event(self, event_id: int | str) -> bool:
        return await self._mutate("delete_event", f"/events/{event_id}", "DELETE")

    async def add_signup(self, event_id: int | str, player_name: str, loot_target: str | None = None) -> bool:
        payload = {
            "event_id": event_id,
            "player_name": player_name,
            "loot_target": loot_target or "",
        }
        return await self._mutate("add_signup", "/signups", "POST", payload)

    async def _mutate(self, name: str, path: str, method: str, body: Any = None) -> bool:
        response = await self._gateway.request(path, method, body)
        if not is_success(response):
            logger.info("%s was not accepted by the server", name)
            return False
        await self._cache.reload_events()
        return True

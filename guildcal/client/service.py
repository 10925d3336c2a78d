"""Single service object wiring session, cache and mutations together."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from guildcal.client.cache import CollectionCache
from guildcal.client.config import ClientSettings
from guildcal.client.credentials import CredentialStore, create_credential_store
from guildcal.client.gateway import ApiGateway
from guildcal.client.models import Dungeon, Event, EventDraft, Session
from guildcal.client.mutations import MutationOrchestrator
from guildcal.client.session import SessionController


class CalendarService:
    def __init__(
        self,
        settings: ClientSettings,
        credentials: CredentialStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.credentials = (
            credentials
            if credentials is not None
            else create_credential_store(settings.token_path, key=settings.token_key)
        )
        session = Session()
        self.gateway = ApiGateway(settings=settings, session=session, http_client=http_client)
        self.cache = CollectionCache(self.gateway)
        self.session = SessionController(
            credentials=self.credentials,
            session=session,
            gateway=self.gateway,
            cache=self.cache,
        )
        self.mutations = MutationOrchestrator(self.gateway, self.cache)

    async def __aenter__(self) -> CalendarService:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def authenticated(self) -> bool:
        return self.session.authenticated

    @property
    def login_error(self) -> str | None:
        return self.session.login_error

    @property
    def events(self) -> tuple[Event, ...]:
        return self.cache.events

    @property
    def dungeons(self) -> tuple[Dungeon, ...]:
        return self.cache.dungeons

    async def start(self) -> bool:
        return await self.session.restore()

    async def login(self, password: str) -> bool:
        return await self.session.login(password)

    def logout(self) -> None:
        self.session.logout()

    async def reload_events(self) -> bool:
        return await self.cache.reload_events()

    async def reload_dungeons(self) -> bool:
        return await self.cache.reload_dungeons()

    async def reload_all(self) -> tuple[bool, bool]:
        return await self.cache.reload_all()

    async def add_event(self, event: EventDraft | Mapping[str, Any]) -> bool:
        return await self.mutations.add_event(event)

    async def delete_event(self, event_id: int | str) -> bool:
        return await self.mutations.delete_event(event_id)

    async def add_signup(self, event_id: int | str, player_name: str, loot_target: str | None = None) -> bool:
        return await self.mutations.add_signup(event_id, player_name, loot_target)

    async def aclose(self) -> None:
        await self.gateway.aclose()

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from guildcal.client.config import ClientSettings
from guildcal.client.credentials import InMemoryCredentialStore
from guildcal.client.service import CalendarService

API_BASE = "http://guild.test/api"


class FakeApi:
    """Scripted stand-in for the calendar API behind ``httpx.MockTransport``.

    Each route holds a queue of replies; the last reply repeats. A reply is a
    JSON-able value (HTTP 200), an ``httpx.Response``, an exception to raise,
    or an async callable producing one of those.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, method: str, path: str, *replies: Any) -> None:
        self.routes.setdefault((method, path), []).extend(replies)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == f"/api{path}"
        ]

    def count(self, method: str, path: str) -> int:
        return len(self.calls(method, path))

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        queue = self.routes.get((request.method, path))
        if not queue:
            return httpx.Response(404, json={"detail": "Not Found"})
        reply = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(reply):
            reply = await reply()
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(api_base=API_BASE, token_path=None, token_key="wow_token", timeout_seconds=None)


@pytest.fixture
def credentials() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
async def http_client(fake_api: FakeApi) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)) as client:
        yield client


@pytest.fixture
async def service(
    settings: ClientSettings,
    credentials: InMemoryCredentialStore,
    http_client: httpx.AsyncClient,
) -> AsyncIterator[CalendarService]:
    async with CalendarService(settings, credentials=credentials, http_client=http_client) as calendar:
        yield calendar

"""HTTP gateway to the guild calendar API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

from guildcal.client.config import ClientSettings
from guildcal.client.models import Session

logger = logging.getLogger(__name__)

SessionExpiredHook = Callable[[], None]


class ApiGateway:
    """Sends JSON requests and folds every ordinary failure into ``None``.

    A 401 answer calls the session-expired hook before returning. Transport
    errors and bodies that are not JSON are logged and also yield ``None``.
    """

    def __init__(
        self,
        settings: ClientSettings,
        session: Session,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._session = session
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient(timeout=settings.timeout_seconds)
        self.on_session_expired: SessionExpiredHook | None = None

    @property
    def base_url(self) -> str:
        return self._settings.api_base

    def build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._session.authenticated and self._session.token:
            headers["Authorization"] = f"Bearer {self._session.token}"
        return headers

    async def request(self, path: str, method: str = "GET", body: Any = None) -> Any | None:
        url = f"{self.base_url}{path}"
        kwargs: dict[str, Any] = {"headers": self.build_headers()}
        if body is not None:
            kwargs["json"] = body

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("API error: %s %s failed: %s", method, path, exc)
            return None

        if response.status_code == 401:
            logger.info("API %s %s rejected the session", method, path)
            self._expire_session()
            return None

        try:
            return response.json()
        except ValueError:
            logger.warning("API error: %s %s returned a non-JSON body (HTTP %s)", method, path, response.status_code)
            return None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _expire_session(self) -> None:
        if self.on_session_expired is not None:
            self.on_session_expired()

"""Authentication state machine for the calendar client."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from guildcal.client.cache import CollectionCache
from guildcal.client.credentials import CredentialStore
from guildcal.client.gateway import ApiGateway
from guildcal.client.models import Session

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid password"


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


SessionListener = Callable[[SessionState], None]


class SessionController:
    """Moves between logged-out and logged-in and loads data on entry.

    A token restored from the credential store is trusted until the server
    rejects it: ``restore`` does not validate it, the first 401 tears it down.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        session: Session,
        gateway: ApiGateway,
        cache: CollectionCache,
    ) -> None:
        self._credentials = credentials
        self._session = session
        self._gateway = gateway
        self._cache = cache
        self._listeners: list[SessionListener] = []
        self.login_error: str | None = None
        gateway.on_session_expired = self.teardown

    @property
    def state(self) -> SessionState:
        return SessionState.LOGGED_IN if self._session.authenticated else SessionState.LOGGED_OUT

    @property
    def authenticated(self) -> bool:
        return self._session.authenticated

    @property
    def token(self) -> str | None:
        return self._session.token

    async def restore(self) -> bool:
        token = self._credentials.load()
        if not token:
            self._set_logged_out()
            return False
        self._set_logged_in(token)
        await self._cache.reload_all()
        return self._session.authenticated

    async def login(self, password: str) -> bool:
        self.login_error = None
        response = await self._gateway.request("/login", "POST", {"password": password})
        token = response.get("token") if isinstance(response, dict) else None
        if not isinstance(token, str) or token == "":
            logger.info("Login rejected")
            self.login_error = INVALID_CREDENTIALS_MESSAGE
            return False

        self._credentials.save(token)
        self._set_logged_in(token)
        logger.info("Logged in")
        await self._cache.reload_all()
        return True

    def logout(self) -> None:
        self._credentials.clear()
        self._set_logged_out()
        self._cache.clear_events()

    def teardown(self) -> None:
        logger.info("Session expired, logging out")
        self.logout()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_logged_in(self, token: str) -> None:
        self._session.token = token
        self._session.authenticated = True
        self._notify()

    def _set_logged_out(self) -> None:
        self._session.token = None
        self._session.authenticated = False
        self._notify()

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Session listener failed for %s", state.value)

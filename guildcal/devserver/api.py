"""FastAPI endpoints implementing the guild calendar API in memory."""

from __future__ import annotations

from typing import Any, Literal

from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel, Field

from .config import load_settings
from .store import CalendarStore, InMemoryCalendarStore


class LoginRequest(BaseModel):
    password: str


class LoginResponse(BaseModel):
    token: str


class CreateEventRequest(BaseModel):
    dungeon: str = Field(min_length=1, max_length=200)
    loot: str = Field(default="", max_length=200)
    event_date: str = Field(min_length=1, max_length=40)
    player_name: str = Field(min_length=1, max_length=100)
    event_type: Literal["dungeon", "raid", "other"] = "dungeon"
    notes: str = Field(default="", max_length=1000)


class SignupRequest(BaseModel):
    event_id: int
    player_name: str = Field(min_length=1, max_length=100)
    loot_target: str = Field(default="", max_length=200)


class StatusResponse(BaseModel):
    status: str = "success"


def _default_store(password: str | None = None) -> CalendarStore:
    settings = load_settings()
    return InMemoryCalendarStore(
        password=password if password is not None else settings.password,
        server_salt=settings.server_salt,
    )


def create_app(store: CalendarStore | None = None, password: str | None = None) -> FastAPI:
    app = FastAPI(title="Guild Calendar API", version="0.1.0")
    calendar_store = store if store is not None else _default_store(password)

    def get_store() -> CalendarStore:
        return calendar_store

    def require_member(
        authorization: str | None = Header(default=None),
        local_store: CalendarStore = Depends(get_store),
    ) -> None:
        scheme, _, token = (authorization or "").partition(" ")
        if scheme.lower() != "bearer" or token == "" or not local_store.is_authorized(token):
            raise HTTPException(status_code=401, detail="Missing or invalid token")

    @app.post("/api/login", response_model=LoginResponse)
    def login(payload: LoginRequest, local_store: CalendarStore = Depends(get_store)) -> LoginResponse:
        token = local_store.issue_token(payload.password)
        if token is None:
            raise HTTPException(status_code=401, detail="Invalid password")
        return LoginResponse(token=token)

    @app.get("/api/events", dependencies=[Depends(require_member)])
    def list_events(local_store: CalendarStore = Depends(get_store)) -> list[dict[str, Any]]:
        return local_store.list_events()

    @app.get("/api/dungeons", dependencies=[Depends(require_member)])
    def list_dungeons(local_store: CalendarStore = Depends(get_store)) -> list[dict[str, Any]]:
        return local_store.list_dungeons()

    @app.post("/api/events", response_model=StatusResponse, dependencies=[Depends(require_member)])
    def create_event(payload: CreateEventRequest, local_store: CalendarStore = Depends(get_store)) -> StatusResponse:
        local_store.create_event(payload.model_dump())
        return StatusResponse()

    @app.delete("/api/events/{event_id}", response_model=StatusResponse, dependencies=[Depends(require_member)])
    def delete_event(event_id: int, local_store: CalendarStore = Depends(get_store)) -> StatusResponse:
        if not local_store.delete_event(event_id):
            raise HTTPException(status_code=404, detail="Event not found")
        return StatusResponse()

    @app.post("/api/signups", response_model=StatusResponse, dependencies=[Depends(require_member)])
    def add_signup(payload: SignupRequest, local_store: CalendarStore = Depends(get_store)) -> StatusResponse:
        signup = local_store.add_signup(
            event_id=payload.event_id,
            player_name=payload.player_name,
            loot_target=payload.loot_target,
        )
        if signup is None:
            raise HTTPException(status_code=404, detail="Event not found")
        return StatusResponse()

    return app


def main() -> None:
    import uvicorn

    settings = load_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

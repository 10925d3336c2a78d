"""Domain models for the session and the cached calendar collections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


@dataclass
class Session:
    token: str | None = None
    authenticated: bool = False


class EventType(str, Enum):
    DUNGEON = "dungeon"
    RAID = "raid"
    OTHER = "other"


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def _as_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Signup(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    event_id: int | str | None = None
    player_name: str
    loot_target: str = ""

    @field_validator("loot_target", mode="before")
    @classmethod
    def default_loot_target(cls, value: Any) -> Any:
        return _blank_if_none(value)


class Event(BaseModel):
    """A scheduled run as returned by ``GET /events``.

    ``event_date`` carries the combined ``YYYY-MM-DDTHH:MM`` schedule and
    ``player_name`` the organizer. Unknown server fields are kept as extras.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: int | str
    dungeon: str = ""
    loot: str = ""
    event_date: str = ""
    player_name: str = ""
    event_type: EventType = Field(
        default=EventType.DUNGEON,
        validation_alias=AliasChoices("event_type", "type"),
    )
    notes: str = ""
    signups: tuple[Signup, ...] = ()

    @field_validator("dungeon", "loot", "event_date", "player_name", "notes", mode="before")
    @classmethod
    def blank_text_fields(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("event_type", mode="before")
    @classmethod
    def lenient_event_type(cls, value: Any) -> Any:
        if value is None or value == "":
            return EventType.DUNGEON
        try:
            return EventType(value)
        except ValueError:
            return EventType.OTHER

    @field_validator("signups", mode="before")
    @classmethod
    def default_signups(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def organizer(self) -> str:
        return self.player_name

    @property
    def scheduled_at(self) -> datetime | None:
        try:
            return datetime.fromtimestamp(float(self.event_date), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            pass
        try:
            return datetime.fromisoformat(self.event_date)
        except ValueError:
            return None


class Dungeon(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


def default_schedule(now: datetime | None = None) -> tuple[str, str]:
    """Return the add-event form defaults: today's date and the time one hour from now."""
    current = now if now is not None else datetime.now()
    later = current + timedelta(hours=1)
    return current.date().isoformat(), f"{later.hour:02d}:{later.minute:02d}"


def combine_schedule(event_date: date | str, event_time: time | str) -> str:
    date_part = event_date.isoformat() if isinstance(event_date, date) else event_date
    time_part = event_time.strftime("%H:%M") if isinstance(event_time, time) else event_time
    return f"{date_part}T{time_part}"


class EventDraft(BaseModel):
    """Payload for ``POST /events``; identity is assigned by the server."""

    dungeon: str
    loot: str = ""
    event_date: str
    player_name: str
    event_type: EventType = EventType.DUNGEON
    notes: str = ""

    @classmethod
    def from_form(
        cls,
        dungeon: str,
        player_name: str,
        event_date: date | str | None = None,
        event_time: time | str | None = None,
        loot: str = "",
        event_type: EventType | str = EventType.DUNGEON,
        notes: str = "",
        now: datetime | None = None,
    ) -> EventDraft:
        default_date, default_time = default_schedule(now)
        return cls(
            dungeon=dungeon,
            loot=loot,
            event_date=combine_schedule(
                event_date if event_date is not None else default_date,
                event_time if event_time is not None else default_time,
            ),
            player_name=player_name,
            event_type=EventType(event_type),
            notes=notes,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

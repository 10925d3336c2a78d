from datetime import date, datetime, time, timezone

import pytest
from pydantic import ValidationError

from guildcal.client.models import (
    Dungeon,
    Event,
    EventDraft,
    EventType,
    Signup,
    combine_schedule,
    default_schedule,
)


def test_event_list_parses_server_payload_in_order() -> None:
    events = [
        Event.model_validate(item)
        for item in [
            {
                "id": 7,
                "dungeon": "Molten Core",
                "loot": "Onslaught Girdle",
                "event_date": "2026-10-20T19:30",
                "player_name": "Jaina",
                "type": "raid",
                "notes": None,
                "signups": [{"event_id": 7, "player_name": "Thrall", "loot_target": None}],
                "created_at": "2026-10-18T12:00:00",
            },
            {"id": 3, "dungeon": "The Deadmines", "event_date": "2026-10-21T18:00", "player_name": "Vanessa"},
        ]
    ]

    assert [event.id for event in events] == [7, 3]
    first = events[0]
    assert first.event_type is EventType.RAID
    assert first.organizer == "Jaina"
    assert first.notes == ""
    assert first.scheduled_at == datetime(2026, 10, 20, 19, 30)
    assert first.signups[0].loot_target == ""
    assert first.model_extra == {"created_at": "2026-10-18T12:00:00"}
    assert events[1].event_type is EventType.DUNGEON
    assert events[1].signups == ()


def test_event_tolerates_missing_or_unknown_type() -> None:
    assert Event.model_validate({"id": 1, "event_type": None}).event_type is EventType.DUNGEON
    assert Event.model_validate({"id": 2, "type": ""}).event_type is EventType.DUNGEON
    assert Event.model_validate({"id": 3, "event_type": "pvp"}).event_type is EventType.OTHER


def test_event_accepts_numeric_timestamp_as_schedule() -> None:
    event = Event.model_validate({"id": 1, "event_date": 1760986200, "loot": 17})

    assert event.event_date == "1760986200"
    assert event.loot == "17"
    assert event.scheduled_at == datetime(2025, 10, 20, 18, 50, tzinfo=timezone.utc)


def test_event_requires_identity() -> None:
    with pytest.raises(ValidationError):
        Event.model_validate({"dungeon": "Stratholme"})


def test_event_scheduled_at_is_none_for_unparseable_date() -> None:
    event = Event.model_validate({"id": 1, "event_date": "next tuesday"})

    assert event.scheduled_at is None


def test_dungeon_keeps_selection_metadata() -> None:
    dungeon = Dungeon.model_validate({"name": "Molten Core", "kind": "raid", "min_level": 60})

    assert dungeon.name == "Molten Core"
    assert dungeon.metadata == {"kind": "raid", "min_level": 60}


def test_signup_defaults_loot_target_to_empty_string() -> None:
    assert Signup(player_name="Thrall").loot_target == ""


def test_default_schedule_is_today_and_one_hour_ahead() -> None:
    assert default_schedule(datetime(2026, 10, 18, 17, 5)) == ("2026-10-18", "18:05")
    assert default_schedule(datetime(2026, 10, 18, 23, 30)) == ("2026-10-18", "00:30")


def test_combine_schedule_accepts_strings_and_values() -> None:
    assert combine_schedule("2026-10-20", "19:30") == "2026-10-20T19:30"
    assert combine_schedule(date(2026, 10, 20), time(19, 30)) == "2026-10-20T19:30"


def test_event_draft_from_form_builds_post_payload() -> None:
    draft = EventDraft.from_form(
        dungeon="Onyxia's Lair",
        player_name="Jaina",
        event_time="20:00",
        loot="Onyxia Hide Backpack",
        event_type="raid",
        notes="Bring fire resist",
        now=datetime(2026, 10, 18, 12, 0),
    )

    assert draft.to_payload() == {
        "dungeon": "Onyxia's Lair",
        "loot": "Onyxia Hide Backpack",
        "event_date": "2026-10-18T20:00",
        "player_name": "Jaina",
        "event_type": "raid",
        "notes": "Bring fire resist",
    }

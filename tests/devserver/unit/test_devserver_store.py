from guildcal.devserver.store import DEFAULT_DUNGEONS, InMemoryCalendarStore


def make_store() -> InMemoryCalendarStore:
    return InMemoryCalendarStore(password="guildpass", server_salt="salt")


def test_issue_token_only_for_guild_password() -> None:
    store = make_store()

    token = store.issue_token("guildpass")

    assert token is not None
    assert store.is_authorized(token) is True
    assert store.issue_token("wrong") is None
    assert store.is_authorized("made-up") is False


def test_issued_tokens_are_stored_salted_not_in_clear() -> None:
    store = make_store()
    other_salt = InMemoryCalendarStore(password="guildpass", server_salt="other-salt")

    token = store.issue_token("guildpass")

    assert token not in store._token_hashes
    assert all(len(digest) == 64 for digest in store._token_hashes)
    assert other_salt.is_authorized(token) is False


def test_events_are_ordered_by_schedule_with_signups_embedded() -> None:
    store = make_store()
    late = store.create_event({"dungeon": "Molten Core", "event_date": "2026-10-21T19:30", "player_name": "Jaina"})
    early = store.create_event({"dungeon": "The Deadmines", "event_date": "2026-10-20T18:00", "player_name": "Thrall"})

    store.add_signup(late["id"], "Thrall", "")
    events = store.list_events()

    assert [event["id"] for event in events] == [early["id"], late["id"]]
    assert events[0]["signups"] == []
    assert events[1]["signups"] == [{"event_id": late["id"], "player_name": "Thrall", "loot_target": ""}]


def test_delete_event_removes_signups_and_reports_unknown_ids() -> None:
    store = make_store()
    created = store.create_event({"dungeon": "Stratholme", "event_date": "2026-10-20T18:00", "player_name": "Thrall"})
    store.add_signup(created["id"], "Jaina", "Runeblade of Baron Rivendare")

    assert store.delete_event(created["id"]) is True
    assert store.delete_event(created["id"]) is False
    assert store.list_events() == []
    assert store.add_signup(created["id"], "Jaina", "") is None


def test_event_ids_are_not_reused_after_delete() -> None:
    store = make_store()
    first = store.create_event({"dungeon": "A", "event_date": "2026-10-20T18:00", "player_name": "Thrall"})
    store.delete_event(first["id"])

    second = store.create_event({"dungeon": "B", "event_date": "2026-10-20T18:00", "player_name": "Thrall"})

    assert second["id"] == first["id"] + 1


def test_list_dungeons_returns_copies_of_catalogue() -> None:
    store = make_store()

    dungeons = store.list_dungeons()
    dungeons[0]["name"] = "changed"

    assert store.list_dungeons()[0]["name"] == DEFAULT_DUNGEONS[0]["name"]

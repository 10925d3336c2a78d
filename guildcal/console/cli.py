"""Command-line front end for the guild calendar client."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from guildcal.client.config import ConfigurationError, load_settings
from guildcal.client.models import Event, EventDraft, EventType
from guildcal.client.service import CalendarService


def event_id_arg(raw: str) -> int | str:
    return int(raw) if raw.isdigit() else raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guildcal", description="Guild event calendar")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="exchange the guild password for a session token")
    login.add_argument("password")

    commands.add_parser("logout", help="forget the stored session token")
    commands.add_parser("events", help="list scheduled events")
    commands.add_parser("dungeons", help="list dungeons available for scheduling")

    add_event = commands.add_parser("add-event", help="schedule a new event")
    add_event.add_argument("--dungeon", required=True)
    add_event.add_argument("--player", required=True, dest="player_name")
    add_event.add_argument("--date", default=None, help="YYYY-MM-DD, defaults to today")
    add_event.add_argument("--time", default=None, help="HH:MM, defaults to one hour from now")
    add_event.add_argument("--type", default=EventType.DUNGEON.value, choices=[item.value for item in EventType])
    add_event.add_argument("--loot", default="")
    add_event.add_argument("--notes", default="")

    delete_event = commands.add_parser("delete-event", help="remove an event")
    delete_event.add_argument("event_id", type=event_id_arg)

    signup = commands.add_parser("signup", help="sign a player up for an event")
    signup.add_argument("event_id", type=event_id_arg)
    signup.add_argument("player_name")
    signup.add_argument("--loot", default=None, dest="loot_target")
    return parser


def format_event(event: Event) -> str:
    line = f"#{event.id} {event.event_date} [{event.event_type.value}] {event.dungeon} by {event.organizer}"
    if event.loot:
        line += f" (loot: {event.loot})"
    if event.signups:
        names = ", ".join(signup.player_name for signup in event.signups)
        line += f" signed up: {names}"
    return line


async def run_command(args: argparse.Namespace, service: CalendarService) -> int:
    if args.command == "login":
        if await service.login(args.password):
            print("Logged in.")
            return 0
        print(service.login_error, file=sys.stderr)
        return 1

    if args.command == "logout":
        service.logout()
        print("Logged out.")
        return 0

    await service.start()
    if not service.authenticated:
        print("Not logged in. Run 'guildcal login PASSWORD' first.", file=sys.stderr)
        return 1

    if args.command == "events":
        if not service.events:
            print("No events scheduled yet!")
        for event in service.events:
            print(format_event(event))
        return 0

    if args.command == "dungeons":
        for dungeon in service.dungeons:
            print(dungeon.name)
        return 0

    if args.command == "add-event":
        draft = EventDraft.from_form(
            dungeon=args.dungeon,
            player_name=args.player_name,
            event_date=args.date,
            event_time=args.time,
            loot=args.loot,
            event_type=args.type,
            notes=args.notes,
        )
        ok = await service.add_event(draft)
    elif args.command == "delete-event":
        ok = await service.delete_event(args.event_id)
    else:
        ok = await service.add_signup(args.event_id, args.player_name, args.loot_target)

    if not ok:
        print(f"{args.command} failed.", file=sys.stderr)
        return 1
    print(f"{args.command} done.")
    return 0


async def _run(args: argparse.Namespace) -> int:
    settings = load_settings()
    async with CalendarService(settings) as service:
        return await run_command(args, service)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return asyncio.run(_run(args))
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

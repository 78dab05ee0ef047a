"""Command-line front end: one subcommand per flow."""

import argparse
import logging
import sys
from datetime import date
from typing import Any

from dotenv import load_dotenv

from triplog.config import get_config
from triplog.db import TripStore
from triplog.errors import TripLogError
from triplog.models import Trip, TripHistory
from triplog.services import trips as flows
from triplog.services.formatting import format_date, format_miles, or_dash
from triplog.services.sharing import FileReportSharer, get_report_sharer

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def _add_trip_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", dest="trip_date", help="Trip date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--from", dest="start_destination", help="Start destination")
    parser.add_argument("--to", dest="end_destination", help="End destination")
    parser.add_argument("--start-postal", help="Postal code at the start")
    parser.add_argument("--end-postal", help="Postal code at the end")
    parser.add_argument("--distance", help="Distance in miles")
    parser.add_argument("--start-time", dest="start_travel_time", help="Departure time (HH:MM, 24-hour)")
    parser.add_argument("--end-time", dest="end_travel_time", help="Arrival time (HH:MM, 24-hour)")
    parser.add_argument("--description", help="Notes")


def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="date_from", type=_iso_date, help="First date to include (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", type=_iso_date, help="Last date to include (YYYY-MM-DD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="triplog", description="Log trips and export trip reports.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="Create or upgrade the trip database")

    profile = commands.add_parser("profile", help="Show or set your profile")
    profile_commands = profile.add_subparsers(dest="profile_command", required=True)
    profile_commands.add_parser("show", help="Show the saved profile")
    profile_set = profile_commands.add_parser("set", help="Save the profile (replaces it)")
    profile_set.add_argument("--name", required=True)
    profile_set.add_argument("--email", required=True)
    profile_set.add_argument("--designation")
    profile_set.add_argument("--phone")
    profile_set.add_argument("--company")

    trip = commands.add_parser("trip", help="Add, edit, show or delete a trip")
    trip_commands = trip.add_subparsers(dest="trip_command", required=True)
    _add_trip_arguments(trip_commands.add_parser("add", help="Log a new trip"))
    trip_edit = trip_commands.add_parser("edit", help="Change a trip; omitted fields keep their value")
    trip_edit.add_argument("trip_id", type=int)
    _add_trip_arguments(trip_edit)
    trip_commands.add_parser("show", help="Show one trip").add_argument("trip_id", type=int)
    trip_commands.add_parser("delete", help="Delete one trip").add_argument("trip_id", type=int)

    _add_range_arguments(commands.add_parser("trips", help="List trips grouped by day"))

    suggest = commands.add_parser("suggest", help="Suggest previously used destinations")
    suggest.add_argument("which", choices=sorted(flows.DESTINATION_FIELDS))
    suggest.add_argument("text")

    export = commands.add_parser("export", help="Export an HTML trip report")
    _add_range_arguments(export)
    export.add_argument("--out", help="Directory to write the report into")

    reset = commands.add_parser("reset", help="Delete every trip and the profile")
    reset.add_argument("--yes", action="store_true", help="Confirm deleting all data")

    return parser


def _trip_fields(args: argparse.Namespace) -> dict[str, Any]:
    fields = (
        "trip_date",
        "start_destination",
        "end_destination",
        "start_postal",
        "end_postal",
        "distance",
        "start_travel_time",
        "end_travel_time",
        "description",
    )
    return {name: getattr(args, name) for name in fields if getattr(args, name) is not None}


def _trip_line(trip: Trip) -> str:
    times = f"{or_dash(trip.start_travel_time)}-{or_dash(trip.end_travel_time)}"
    postal = f"{or_dash(trip.start_postal)} → {or_dash(trip.end_postal)}"
    return (
        f"  #{trip.id}  {trip.start_destination} → {trip.end_destination}  ({postal})  "
        f"{format_miles(trip.distance)} mi  {times}  {or_dash(trip.time)}  {or_dash(trip.description)}"
    )


def _print_history(history: TripHistory) -> None:
    if not history.days:
        print("No trips found.")
        return
    for day in history.days:
        print(f"{format_date(day.trip_date)} — {format_miles(day.totals.total_miles)} miles, {day.totals.duration}")
        for trip in day.trips:
            print(_trip_line(trip))
    print(f"Showing {history.shown_count} of {history.total_count} trips")
    print(f"GRAND TOTAL: {format_miles(history.totals.total_miles)} miles — {history.totals.duration}")


def _run(args: argparse.Namespace, store: TripStore) -> int:
    if args.command == "init":
        print("Database ready.")
        return 0

    if args.command == "profile":
        if args.profile_command == "show":
            profile = flows.get_profile(store)
            if profile is None:
                print("No profile saved yet.")
                return 1
            for label, value in profile.model_dump().items():
                print(f"{label.capitalize()}: {or_dash(value)}")
            return 0
        data = {key: getattr(args, key) for key in ("name", "email", "designation", "phone", "company")}
        flows.save_profile(store, data)
        print("Profile saved.")
        return 0

    if args.command == "trip":
        if args.trip_command == "add":
            trip = flows.add_trip(store, _trip_fields(args))
            print(f"Trip #{trip.id} logged ({trip.time}).")
        elif args.trip_command == "edit":
            existing = flows.load_trip(store, args.trip_id)
            trip = flows.edit_trip(store, args.trip_id, {**flows.draft_fields(existing), **_trip_fields(args)})
            print(f"Trip #{trip.id} updated ({trip.time}).")
        elif args.trip_command == "show":
            trip = flows.load_trip(store, args.trip_id)
            print(format_date(trip.trip_date))
            print(_trip_line(trip))
        else:
            if flows.delete_trip(store, args.trip_id):
                print(f"Trip #{args.trip_id} deleted.")
            else:
                print(f"Trip #{args.trip_id} not found.")
        return 0

    if args.command == "trips":
        _print_history(flows.trip_history(store, args.date_from, args.date_to))
        return 0

    if args.command == "suggest":
        for name in flows.suggest_destinations(store.get_all_trips(), args.text, args.which):
            print(name)
        return 0

    if args.command == "export":
        sharer = FileReportSharer(args.out) if args.out else get_report_sharer()
        location = flows.export_report(store, sharer, args.date_from, args.date_to)
        print(f"Report written to {location}")
        return 0

    if args.command == "reset":
        if not args.yes:
            print("Refusing to delete all data without --yes.", file=sys.stderr)
            return 1
        flows.reset_all(store)
        print("All data cleared.")
        return 0

    raise TripLogError(f"Unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with TripStore(config.database_url, echo=config.sql_echo) as store:
            return _run(args, store)
    except TripLogError as e:
        logger.error("%s failed: %s", args.command, e.message)
        print(e.user_message, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

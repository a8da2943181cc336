"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from pilotready.analysis.metar import parse_metar
from pilotready.analysis.rules import get_catalog
from pilotready.config import default_flight, default_profile
from pilotready.digest.text import format_decision, format_metar, format_weather
from pilotready.fetch.aviationweather import AviationWeatherClient
from pilotready.models import Certificate, FlightInput, PilotProfile
from pilotready.pipeline import run_check
from pilotready.storage.profile import ProfileStore

logger = logging.getLogger(__name__)


def _validated(model, data: dict):
    """Validate user-supplied fields, exiting with a readable error."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        print(f"Error: {problems}")
        sys.exit(1)


def _current_profile(store: ProfileStore) -> PilotProfile:
    return store.load() or default_profile()


def _cmd_profile(args: argparse.Namespace, store: ProfileStore) -> None:
    if args.action == "clear":
        store.clear()
        print("Profile reset to defaults.")
        return

    profile = _current_profile(store)

    if args.action == "set":
        updates = {
            "full_name": args.name,
            "nickname": args.nickname,
            "certificate": Certificate(args.certificate) if args.certificate else None,
            "total_hours": args.total_hours,
            "hours_90_days": args.hours_90,
            "typical_aircraft": args.aircraft,
        }
        minimums = {
            "max_crosswind_kt": args.max_crosswind,
            "min_ceiling_ft": args.min_ceiling,
            "min_visibility_sm": args.min_visibility,
            "max_gust_spread_kt": args.max_gust_spread,
        }
        currency = {
            "night_passenger_current": args.night_current,
            "last_flight_days_ago": args.last_flight_days,
        }
        data = profile.model_dump()
        data.update({k: v for k, v in updates.items() if v is not None})
        data["minimums"].update({k: v for k, v in minimums.items() if v is not None})
        data["currency"].update({k: v for k, v in currency.items() if v is not None})
        profile = _validated(PilotProfile, data)

        if not profile.is_configured:
            print("Error: A full name of at least 2 characters is required (--name).")
            sys.exit(1)
        path = store.save(profile)
        print(f"Profile saved: {path}")

    print(profile.model_dump_json(indent=2))


def _cmd_check(args: argparse.Namespace, store: ProfileStore) -> None:
    profile = store.load()
    if profile is None or not profile.is_configured:
        print("Error: Set up your pilot profile first (pilotready profile set --name ...).")
        sys.exit(1)

    flight = default_flight()
    overrides = {
        "departure": args.dep,
        "destination": args.dest,
        "when": args.when,
        "crosswind_kt": args.crosswind,
        "ceiling_ft": args.ceiling,
        "visibility_sm": args.visibility,
        "gust_spread_kt": args.gust_spread,
    }
    data = flight.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    data["is_night"] = args.night
    flight = _validated(FlightInput, data)

    result = run_check(profile, flight, auto_weather=args.auto_wx)

    if result.fill is not None:
        if result.fill.message:
            print(result.fill.message)
        elif result.fill.weather is not None:
            print(format_weather(result.fill.weather))
        print()

    print(format_decision(result.decision, show_tech=args.tech))


def _cmd_metar(args: argparse.Namespace) -> None:
    if args.fetch:
        raw = AviationWeatherClient().fetch_metar(args.fetch)
        if raw is None:
            print(f"No METAR available for {args.fetch}.")
            sys.exit(1)
    else:
        raw = " ".join(args.raw)
    print(format_metar(parse_metar(raw)))


def main() -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="pilotready",
        description="Personal-minimums go/no-go advisor for GA flights",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # profile subcommand
    profile_parser = subparsers.add_parser("profile", help="Show, edit or reset your pilot profile")
    profile_parser.add_argument("action", choices=["show", "set", "clear"])
    profile_parser.add_argument("--name", help="Full name")
    profile_parser.add_argument("--nickname", help="Nickname (optional)")
    profile_parser.add_argument(
        "--certificate", choices=[c.value for c in Certificate], help="Certificate level"
    )
    profile_parser.add_argument("--total-hours", type=float, help="Total flight hours")
    profile_parser.add_argument("--hours-90", type=float, help="Hours in the last 90 days")
    profile_parser.add_argument("--aircraft", help="Typical aircraft")
    profile_parser.add_argument("--max-crosswind", type=float, help="Max crosswind (kt)")
    profile_parser.add_argument("--min-ceiling", type=float, help="Min ceiling (ft)")
    profile_parser.add_argument("--min-visibility", type=float, help="Min visibility (sm)")
    profile_parser.add_argument("--max-gust-spread", type=float, help="Max gust spread (kt)")
    profile_parser.add_argument(
        "--night-current", action=argparse.BooleanOptionalAction, default=None,
        help="Night-passenger current",
    )
    profile_parser.add_argument("--last-flight-days", type=int, help="Days since last flight")

    # check subcommand
    check_parser = subparsers.add_parser("check", help="Check a flight against your minimums")
    check_parser.add_argument("--dep", help="Departure ICAO")
    check_parser.add_argument("--dest", help="Destination ICAO")
    check_parser.add_argument("--when", help="Planned departure time (free text)")
    check_parser.add_argument("--night", action="store_true", help="Night flight")
    check_parser.add_argument("--crosswind", type=float, help="Crosswind (kt)")
    check_parser.add_argument("--ceiling", type=float, help="Ceiling (ft)")
    check_parser.add_argument("--visibility", type=float, help="Visibility (sm)")
    check_parser.add_argument("--gust-spread", type=float, help="Gust spread (kt)")
    check_parser.add_argument(
        "--auto-wx", action="store_true",
        help="Auto-fill conditions from the latest departure METAR",
    )
    check_parser.add_argument("--tech", action="store_true", help="Show technical details")

    # metar subcommand
    metar_parser = subparsers.add_parser("metar", help="Parse a raw METAR")
    metar_parser.add_argument("raw", nargs="*", default=[], metavar="TOKEN", help="Raw METAR text")
    metar_parser.add_argument("--fetch", metavar="ICAO", help="Fetch the latest METAR first")

    # rules subcommand
    subparsers.add_parser("rules", help="List decision rules")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    store = ProfileStore()

    if args.command == "profile":
        _cmd_profile(args, store)
    elif args.command == "check":
        _cmd_check(args, store)
    elif args.command == "metar":
        if not args.raw and not args.fetch:
            print("Error: Provide METAR text or --fetch ICAO.")
            sys.exit(1)
        _cmd_metar(args)
    elif args.command == "rules":
        for entry in get_catalog():
            print(f"  {entry.id:<18} up to +{entry.max_points}  {entry.description}")


if __name__ == "__main__":
    main()

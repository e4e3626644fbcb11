"""Command-line entry point for the Wiener Linien trip planner."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

import aiohttp
from pydantic import TypeAdapter

from wl_trip_planner.adapters.config import AppConfig
from wl_trip_planner.adapters.station_data import JsonStationDirectory
from wl_trip_planner.adapters.wl_routing_api import ItineraryParser, WlTripRepository
from wl_trip_planner.application import RouteAssembler, TripPlanningService, segments_to_json
from wl_trip_planner.domain.errors import StationNotFoundError
from wl_trip_planner.domain.models import MapMarker, PointSelection, TripPlan
from wl_trip_planner.domain.request_time import format_request_datetime
from wl_trip_planner.domain.station_names import strip_city_prefix

logger = logging.getLogger(__name__)

_TRIP_PLAN = TypeAdapter(TripPlan)


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def default_request_datetime(timezone: str) -> tuple[str, str]:
    """Current (YYYYMMDD, HHMM) in the given timezone."""
    return format_request_datetime(datetime.now(ZoneInfo(timezone)))


def plan_to_dict(plan: TripPlan) -> dict[str, Any]:
    """Convert a trip plan into JSON-compatible data."""
    return _TRIP_PLAN.dump_python(plan, mode="json")


def format_markers(markers: list[MapMarker]) -> str:
    """Render map markers one per line."""
    return "\n".join(
        f"{marker.title} ({marker.description}): {marker.latitude}, {marker.longitude}"
        for marker in markers
    )


async def run_plan(args: argparse.Namespace, config: AppConfig) -> int:
    """Plan trips between two stations and print them."""
    directory = JsonStationDirectory.from_file(config.station_data_file)
    default_date, default_time = default_request_datetime(config.timezone)
    date = args.date or default_date
    time = args.time or default_time
    logger.debug(f"Planning trips for {date} {time} with {config.point_selection} points")

    timeout = aiohttp.ClientTimeout(total=config.request_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        service = TripPlanningService(
            directory,
            WlTripRepository.from_config(session, config),
            strip_city_prefix=config.strip_city_prefix,
            swap_marker_coordinates=config.swap_marker_coordinates,
        )
        plan = await service.plan(args.origin, args.destination, date, time)

    if not plan.is_success:
        reason = plan.error.reason if plan.error else "unknown error"
        print(f"No trips found: {reason}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(plan_to_dict(plan), indent=2, ensure_ascii=False))
        return 0

    if not plan.itineraries:
        print(f"No trips from {args.origin} to {args.destination}.")
        return 0

    print(plan.summary)
    if args.markers and plan.markers:
        print("Stationen:")
        print(format_markers(plan.markers))
    return 0


def run_station(args: argparse.Namespace, config: AppConfig) -> int:
    """Show DIVA number and coordinates of a station."""
    directory = JsonStationDirectory.from_file(config.station_data_file)
    name = strip_city_prefix(args.name) if args.strip_city_prefix else args.name

    station = directory.find_station(name)
    if station is None:
        print(f"Station {name} wurde nicht gefunden", file=sys.stderr)
        return 1

    if args.json:
        print(
            json.dumps(
                {
                    "PlatformText": station.platform_text,
                    "DIVA": station.diva,
                    "Longitude": station.longitude,
                    "Latitude": station.latitude,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print(f"\n{station.platform_text}")
        print(f"  DIVA: {station.diva}")
        print(f"  Coordinates: {station.latitude}, {station.longitude}")
    return 0


def run_parse(args: argparse.Namespace, config: AppConfig) -> int:
    """Parse a saved trip response and print the itineraries."""
    xml_text = Path(args.file).read_text(encoding="utf-8")
    selection = PointSelection(args.point_selection) if args.point_selection else None
    parser = ItineraryParser(point_selection=selection or config.point_selection)

    result = parser.extract(xml_text)
    if not result.is_success:
        reason = result.error.reason if result.error else "unknown error"
        print(f"Cannot read trip response: {reason}", file=sys.stderr)
        return 1

    if args.json:
        print(segments_to_json(result.segments))
        return 0

    print(RouteAssembler.format(RouteAssembler.group(result.segments)))
    if args.stations:
        print("Stationen:")
        for name in RouteAssembler.collect_station_names(result.segments):
            print(f"  {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Wiener Linien trip planner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan trips leaving now
  wl-trip-planner plan Stephansplatz Westbahnhof

  # Plan trips for a given date and time, with map markers
  wl-trip-planner plan Karlsplatz Praterstern --date 20240315 --time 0830 --markers

  # Look up a station
  wl-trip-planner station "Wien Karlsplatz" --strip-city-prefix

  # Parse a saved XML_TRIP_REQUEST2 response
  wl-trip-planner parse response.xml --point-selection skip_boarding
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Plan command
    plan_parser = subparsers.add_parser("plan", help="Plan trips between two stations")
    plan_parser.add_argument("origin", help="Origin station name (e.g., Stephansplatz)")
    plan_parser.add_argument("destination", help="Destination station name")
    plan_parser.add_argument("--date", help="Departure date as YYYYMMDD (default: today)")
    plan_parser.add_argument("--time", help="Departure time as HHMM (default: now)")
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")
    plan_parser.add_argument("--markers", action="store_true", help="Also list map markers")

    # Station command
    station_parser = subparsers.add_parser("station", help="Show station information")
    station_parser.add_argument("name", help="Station name")
    station_parser.add_argument(
        "--strip-city-prefix", action="store_true", help="Remove a leading 'Wien ' first"
    )
    station_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a saved trip response")
    parse_parser.add_argument("file", help="Path to an XML trip response")
    parse_parser.add_argument(
        "--point-selection",
        choices=[selection.value for selection in PointSelection],
        help="Stop points to keep per partial route (default: from configuration)",
    )
    parse_parser.add_argument("--json", action="store_true", help="Output segments as JSON")
    parse_parser.add_argument(
        "--stations", action="store_true", help="Also list distinct station names"
    )

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        if args.command == "plan":
            return await run_plan(args, config)
        if args.command == "station":
            return run_station(args, config)
        if args.command == "parse":
            return run_parse(args, config)
    except StationNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (aiohttp.ClientError, TimeoutError) as e:
        print(f"Request failed: {e!r}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()

"""Command line front-end.

    railnet journeys <data set> <origin> <destination> <max results>
    railnet report <data set> [route name]
    railnet direct <data set> <from> <to>
    railnet validate <data set>

Data set names are resolved against the configured data directory when
they are not an existing path.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import InvalidQueryError, RailNetworkError
from .ports.network import NetworkRepositoryPort
from .services import JourneyPlannerService, reports
from .services.display import format_journeys
from .services.validation import describe_conflicts, find_station_conflicts

USAGE_MESSAGE = (
    "Error! Usage: railnet journeys <data set> <origin> <destination> <max results>"
)


def print_usage_message() -> None:
    print(USAGE_MESSAGE)


def parse_max_results(value: str) -> int:
    """Parse the max results argument, rejecting anything non-numeric."""
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidQueryError("maxResults is not a number", argument="max_results")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="railnet",
        description="Railway network reports and journey planning",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    journeys = commands.add_parser("journeys", help="Find the best journeys")
    journeys.add_argument("data", help="Network JSON file")
    journeys.add_argument("origin", help="Departure station name")
    journeys.add_argument("destination", help="Arrival station name")
    journeys.add_argument("max_results", help="Maximum number of journeys")

    report = commands.add_parser("report", help="Describe the network's routes")
    report.add_argument("data", help="Network JSON file")
    report.add_argument("route", nargs="?", help="Route to describe in detail")

    direct = commands.add_parser("direct", help="Find a single-route path")
    direct.add_argument("data", help="Network JSON file")
    direct.add_argument("origin", help="Departure station name")
    direct.add_argument("destination", help="Arrival station name")

    validate = commands.add_parser("validate", help="Check station names and ids")
    validate.add_argument("data", help="Network JSON file")

    return parser


def configure_logging(config: AppConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else config.observability.level
    logging.basicConfig(level=level, format=config.observability.format)


def _run_journeys(container: Container, args: argparse.Namespace) -> None:
    max_results = parse_max_results(args.max_results)
    planner: JourneyPlannerService = container.resolve(JourneyPlannerService)
    journeys = planner.plan(args.origin, args.destination, max_results)
    print(format_journeys(journeys))


def _run_report(container: Container, args: argparse.Namespace) -> None:
    network = container.resolve(NetworkRepositoryPort).load()

    print(f"Network: {reports.network_name(network)}")
    print(f"Routes:\n{reports.route_names_to_string(network)}\n")
    print(reports.route_summary(network))
    print(f"There are {reports.total_stations(network)} stations in this network.")

    longest = reports.find_longest_route(network)
    if longest is not None:
        print(f"Longest route is: {longest.name}")

    if args.route:
        route = reports.get_route(network, args.route)
        if route is None:
            print(f"Route not found: {args.route}")
        else:
            print(f"\n{reports.route_to_string(route)}")


def _run_direct(container: Container, args: argparse.Namespace) -> None:
    network = container.resolve(NetworkRepositoryPort).load()
    print(reports.find_direct_route(network, args.origin, args.destination))


def _run_validate(container: Container, args: argparse.Namespace) -> int:
    network = container.resolve(NetworkRepositoryPort).load()
    conflicts = find_station_conflicts(network)
    print(describe_conflicts(conflicts))
    return 0 if conflicts.is_clean else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    configure_logging(config, args.verbose)

    container = Container.create_default(config, network_file=args.data)

    try:
        if args.command == "journeys":
            _run_journeys(container, args)
        elif args.command == "report":
            _run_report(container, args)
        elif args.command == "direct":
            _run_direct(container, args)
        elif args.command == "validate":
            return _run_validate(container, args)
    except RailNetworkError as e:
        print(f"Error: {e}")
        if args.command == "journeys":
            print_usage_message()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

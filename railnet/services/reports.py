"""Descriptive reports about the routes of a railway network.

Every function here is pure: networks are immutable, so the sorting
helpers return a new ``RailwayNetwork`` rather than reordering in place.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Tuple

from ..domain.models import RailwayNetwork, Route, Stop, format_distance

SUMMARY_NAME_WIDTH = 25
SUMMARY_STATION_WIDTH = 25
SUMMARY_DISTANCE_WIDTH = 15


def network_name(network: RailwayNetwork) -> str:
    return network.network_name


def get_routes(network: RailwayNetwork) -> Tuple[Route, ...]:
    return network.routes


def route_names(network: RailwayNetwork) -> List[str]:
    return [route.name for route in network.routes]


def route_names_to_string(network: RailwayNetwork) -> str:
    return ",\n".join(route_names(network))


def get_route(network: RailwayNetwork, name: str) -> Optional[Route]:
    """Return the route called ``name``; the last one wins on duplicates."""
    for route in reversed(network.routes):
        if route.name == name:
            return route
    return None


def get_stop(route: Route, station_name: str) -> Optional[Stop]:
    """Return the stop at ``station_name``; the last one wins on duplicates."""
    for stop in reversed(route.stops):
        if stop.station_name == station_name:
            return stop
    return None


def route_distance(route: Route) -> float:
    """Forward length of a route, first stop to last.

    May differ from the backward length when distances are asymmetric.
    """
    return sum(stop.distance_to_next or 0 for stop in route.stops)


def route_to_string(route: Route) -> str:
    """List the stations of a route with the distance travelled to each."""
    lines = [f"ROUTE: {route.name}({route.color})", "STATIONS:"]
    travelled: float = 0
    for stop in route.stops:
        lines.append(
            f"{stop.number} {stop.station_name} {format_distance(travelled)} miles"
        )
        travelled += stop.distance_to_next or 0
    lines.append(f"Total Route Distance: {format_distance(travelled)} miles")
    return "\n".join(lines)


def route_summary(network: RailwayNetwork) -> str:
    """Fixed-width table of every route: name, termini and length."""
    lines = ["Routes Summary", "=============="]
    for route in network.routes:
        first = route.first_stop.station_name if route.first_stop else ""
        last = route.last_stop.station_name if route.last_stop else ""
        distance = format_distance(route_distance(route))
        lines.append(
            f"{route.name:<{SUMMARY_NAME_WIDTH}}-"
            f"{first:<{SUMMARY_STATION_WIDTH}}"
            f"{last:<{SUMMARY_STATION_WIDTH}}-"
            f"{distance:>{SUMMARY_DISTANCE_WIDTH}} miles"
        )
    return "\n".join(lines) + "\n"


def total_stations(network: RailwayNetwork) -> int:
    """Number of distinct station identifiers in the network."""
    return len({stop.station_id for route in network.routes for stop in route.stops})


def find_longest_route(network: RailwayNetwork) -> Optional[Route]:
    """Return the route with the greatest forward length.

    Ties go to the earliest route. Returns None for a network without
    routes, or whose routes all have zero length.
    """
    longest: Optional[Route] = None
    highest: float = 0
    for route in network.routes:
        distance = route_distance(route)
        if distance > highest:
            highest = distance
            longest = route
    return longest


def sort_routes_by_name(network: RailwayNetwork, ascending: bool = True) -> RailwayNetwork:
    routes = sorted(network.routes, key=lambda route: route.name, reverse=not ascending)
    return replace(network, routes=tuple(routes))


def sort_routes_by_length(
    network: RailwayNetwork, ascending: bool = True
) -> RailwayNetwork:
    routes = sorted(network.routes, key=route_distance, reverse=not ascending)
    return replace(network, routes=tuple(routes))


def _position(route: Route, station_name: str) -> Optional[int]:
    for index in range(len(route.stops) - 1, -1, -1):
        if route.stops[index].station_name == station_name:
            return index
    return None


def find_direct_route(network: RailwayNetwork, origin: str, destination: str) -> str:
    """Describe a path between two stations that stays on a single route.

    Travelling forward sums the ``distance_to_next`` values, travelling
    backward sums ``distance_to_prev``. When several routes serve both
    stations the last one in the network is reported.
    """
    result = f"No direct route found between {origin} and {destination}"
    for route in network.routes:
        start = _position(route, origin)
        end = _position(route, destination)
        if start is None or end is None:
            continue

        if end >= start:
            hops = route.stops[start:end]
            distance = sum(stop.distance_to_next or 0 for stop in hops)
        else:
            hops = route.stops[end + 1 : start + 1]
            distance = sum(stop.distance_to_prev or 0 for stop in hops)

        result = (
            f"{route.name}: {origin} to {destination} "
            f"{len(hops)} stops and {format_distance(distance)} miles"
        )
    return result

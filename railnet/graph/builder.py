"""Station graph construction from railway routes.

Every unique station name becomes a node. Every adjacent pair of stops
on a route becomes two directed edges tagged with the route name, one in
each direction, each carrying the distance stored for that direction.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Sequence, Union

from ..domain.errors import InvalidNetworkError
from ..domain.models import Edge, RailwayNetwork, Route, Station, Stop
from ..ports.network import Graph

logger = logging.getLogger(__name__)

RouteSource = Union[RailwayNetwork, Sequence[Route]]


def _as_routes(source: RouteSource) -> tuple[Route, ...]:
    """Check the input shape before any graph state is built."""
    if isinstance(source, RailwayNetwork):
        source = source.routes

    if isinstance(source, (str, bytes)) or not isinstance(source, Sequence):
        raise InvalidNetworkError(
            "Expected a railway network or a sequence of routes",
            received_type=type(source).__name__,
        )

    for route in source:
        if not isinstance(route, Route):
            raise InvalidNetworkError(
                "Network contains an item that is not a route",
                received_type=type(route).__name__,
            )
        if not isinstance(route.stops, Sequence) or isinstance(route.stops, str):
            raise InvalidNetworkError(
                f"Route {route.name!r} has no stop sequence",
                received_type=type(route.stops).__name__,
            )
        for stop in route.stops:
            if not isinstance(stop, Stop):
                raise InvalidNetworkError(
                    f"Route {route.name!r} contains an item that is not a stop",
                    received_type=type(stop).__name__,
                )

    return tuple(source)


def build_graph(source: RouteSource) -> Graph:
    """Build the station graph for a network.

    Parameters
    ----------
    source:
        A ``RailwayNetwork`` or a sequence of ``Route`` objects.

    Returns
    -------
    Mapping[str, Station]
        Read-only mapping from station name to station. Edges of each
        station are in discovery order (route order, then stop order).

    Raises
    ------
    InvalidNetworkError
        If ``source`` is not a collection of routes.
    """
    routes = _as_routes(source)

    station_ids: Dict[str, int] = {}
    links: Dict[str, List[Edge]] = {}

    for route in routes:
        previous: Optional[Stop] = None
        for stop in route.stops:
            # first occurrence wins the identifier
            if stop.station_name not in links:
                station_ids[stop.station_name] = stop.station_id
                links[stop.station_name] = []

            if previous is not None:
                links[stop.station_name].append(
                    Edge(route.name, previous.station_name, stop.distance_to_prev)
                )
                links[previous.station_name].append(
                    Edge(route.name, stop.station_name, previous.distance_to_next)
                )
            previous = stop

    graph = {
        name: Station(name=name, station_id=station_ids[name], edges=tuple(edges))
        for name, edges in links.items()
    }

    logger.debug(
        "Station graph built",
        extra={
            "routes": len(routes),
            "stations": len(graph),
            "edges": sum(len(station.edges) for station in graph.values()),
        },
    )
    return MappingProxyType(graph)

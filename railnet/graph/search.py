"""Exhaustive journey search over the station graph.

The search enumerates every simple path (no station visited twice)
between two stations, then ranks them by number of route changes and,
for equal changes, by total distance.

Traversal is depth-first but driven by an explicit work stack rather
than Python recursion, so deep networks cannot hit the interpreter's
recursion limit. Each stack entry owns its own ``Journey`` value; the
graph itself is only ever read.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..domain.errors import (
    InvalidQueryError,
    SearchLimitExceededError,
    StationNotFoundError,
)
from ..domain.models import Journey, Station
from ..ports.network import Graph

logger = logging.getLogger(__name__)


def _lookup(graph: Graph, name: str) -> Station:
    station = graph.get(name)
    if station is None:
        raise StationNotFoundError(
            f"Station not found in network: {name}",
            station_name=str(name),
        )
    return station


def _ranking(journey: Journey) -> Tuple[int, float]:
    return journey.changes, journey.distance


def _explore(
    graph: Graph,
    origin: str,
    destination: str,
    max_expansions: Optional[int],
) -> List[Journey]:
    """Collect every completed journey, in depth-first discovery order."""
    found: List[Journey] = []
    stack: List[Tuple[str, Journey]] = [(origin, Journey())]
    expansions = 0

    while stack:
        name, journey = stack.pop()

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchLimitExceededError(
                f"Journey search from {origin} to {destination} "
                f"exceeded {max_expansions} expansions",
                limit=max_expansions,
                origin=origin,
                destination=destination,
            )

        journey = journey.visit(name)

        # arrival ends this branch
        if name == destination:
            found.append(journey.arrive(name))
            continue

        branches: List[Tuple[str, Journey]] = []
        for edge in graph[name].edges:
            if journey.has_visited(edge.target):
                continue

            if journey.current_route is None:
                branch = journey.embark(name, edge.route_name)
            elif edge.route_name != journey.current_route:
                branch = journey.change(name, edge.route_name)
            else:
                branch = journey

            branches.append((edge.target, branch.travel(edge.distance)))

        # reversed so the first edge is explored first
        stack.extend(reversed(branches))

    logger.debug(
        "Journey search exhausted",
        extra={
            "origin": origin,
            "destination": destination,
            "expansions": expansions,
            "found": len(found),
        },
    )
    return found


def best_routes(
    graph: Graph,
    origin: str,
    destination: str,
    max_results: Optional[int] = None,
    *,
    max_expansions: Optional[int] = None,
) -> List[Journey]:
    """Find the best journeys between two stations.

    Parameters
    ----------
    graph:
        Station graph as produced by ``build_graph``.
    origin:
        Name of the departure station.
    destination:
        Name of the arrival station.
    max_results:
        Maximum number of journeys to return. ``None`` returns them all.
    max_expansions:
        Optional ceiling on the number of stations expanded during the
        search. ``None`` means no ceiling.

    Returns
    -------
    list[Journey]
        Completed journeys sorted by ascending route changes, then by
        ascending distance. Empty when no path exists.

    Raises
    ------
    StationNotFoundError
        If ``origin`` or ``destination`` is not in the graph.
    InvalidQueryError
        If ``max_results`` is negative.
    SearchLimitExceededError
        If ``max_expansions`` is reached before the search completes.
    """
    if max_results is not None and max_results < 0:
        raise InvalidQueryError(
            f"max_results must not be negative, got {max_results}",
            argument="max_results",
        )

    _lookup(graph, origin)
    _lookup(graph, destination)

    found = _explore(graph, origin, destination, max_expansions)
    found.sort(key=_ranking)

    if max_results is None:
        return found
    return found[:max_results]


def count_simple_paths(graph: Graph, origin: str, destination: str) -> int:
    """Return the number of simple paths between two stations."""
    return len(best_routes(graph, origin, destination))

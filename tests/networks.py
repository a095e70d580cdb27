"""Network builders shared by the test modules."""

from __future__ import annotations

import zlib
from pathlib import Path
from typing import Optional, Sequence

from railnet.domain.models import RailwayNetwork, Route, Stop

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def make_route(
    name: str,
    stations: Sequence[str],
    forward: Sequence[Optional[float]],
    backward: Optional[Sequence[Optional[float]]] = None,
    color: str = "",
) -> Route:
    """Build a route from station names and hop distances.

    ``forward[i]`` is the distance from ``stations[i]`` to ``stations[i + 1]``;
    ``backward[i]`` the distance back from ``stations[i + 1]`` to
    ``stations[i]`` (defaults to ``forward``).
    """
    backward = forward if backward is None else backward
    stops = []
    for i, station in enumerate(stations):
        stops.append(
            Stop(
                number=i + 1,
                station_name=station,
                station_id=zlib.crc32(station.encode("utf-8")),
                distance_to_next=forward[i] if i < len(stations) - 1 else None,
                distance_to_prev=backward[i - 1] if i > 0 else None,
            )
        )
    return Route(name=name, stops=tuple(stops), color=color)


def make_network(*routes: Route, name: str = "Test Network") -> RailwayNetwork:
    return RailwayNetwork(network_name=name, routes=tuple(routes))

"""Immutable domain models for railnet.

All models are frozen dataclasses with slots. The network side
(Stop, Route, RailwayNetwork) mirrors the data file; the graph side
(Edge, Station) is produced by the graph builder; Journey is the unit
of work of the journey search.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional


def format_distance(distance: float) -> str:
    """Render a distance without a trailing ``.0`` for whole numbers."""
    if float(distance).is_integer():
        return str(int(distance))
    return f"{distance:g}"


@dataclass(frozen=True, slots=True)
class Stop:
    """A route-local visit to a station.

    Attributes:
        number: Position of the stop on its route, starting at 1
        station_name: Human-readable station name
        station_id: Numeric station identifier
        distance_to_next: Distance to the next stop, None on the last stop
        distance_to_prev: Distance to the previous stop, None on the first stop
    """

    number: int
    station_name: str
    station_id: int
    distance_to_next: Optional[float] = None
    distance_to_prev: Optional[float] = None


@dataclass(frozen=True, slots=True)
class Route:
    """A named, ordered sequence of stops operated as one line."""

    name: str
    stops: tuple[Stop, ...] = field(default_factory=tuple)
    color: str = ""

    @property
    def first_stop(self) -> Optional[Stop]:
        return self.stops[0] if self.stops else None

    @property
    def last_stop(self) -> Optional[Stop]:
        return self.stops[-1] if self.stops else None


@dataclass(frozen=True, slots=True)
class RailwayNetwork:
    """A railway network: a name and its routes."""

    network_name: str
    routes: tuple[Route, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed, route-tagged link to an adjacent station.

    Attributes:
        route_name: Route this link belongs to
        target: Name of the station the link leads to
        distance: Distance travelled along the link (may be None in bad data)
    """

    route_name: str
    target: str
    distance: Optional[float]


@dataclass(frozen=True, slots=True)
class Station:
    """A graph node: a unique station shared across routes.

    Attributes:
        name: Station name, the key of the station in the graph
        station_id: Identifier taken from the first stop seen for this name
        edges: Outgoing links, in the order they were discovered
    """

    name: str
    station_id: int
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def neighbours(self) -> tuple[str, ...]:
        return tuple(edge.target for edge in self.edges)


@dataclass(frozen=True, slots=True)
class Journey:
    """A path through the graph with its distance, changes and narrative.

    Journeys are values: every transition below returns a new instance,
    so a branch of the search can never alter a sibling's state.

    Attributes:
        stations: Names of the stations visited, in order, without repeats
        distance: Accumulated distance
        changes: Number of route changes made
        narrative: Human-readable lines describing the journey
        success: True once the destination has been reached
        current_route: Route most recently travelled on, None before boarding
    """

    stations: tuple[str, ...] = field(default_factory=tuple)
    distance: float = 0
    changes: int = 0
    narrative: tuple[str, ...] = field(default_factory=tuple)
    success: bool = False
    current_route: Optional[str] = None

    @property
    def text(self) -> str:
        """Narrative joined into a multi-line string."""
        return "\n".join(self.narrative)

    @property
    def origin(self) -> Optional[str]:
        return self.stations[0] if self.stations else None

    @property
    def destination(self) -> Optional[str]:
        return self.stations[-1] if self.stations else None

    def has_visited(self, station: str) -> bool:
        return station in self.stations

    def visit(self, station: str) -> Journey:
        return replace(self, stations=self.stations + (station,))

    def travel(self, amount: Optional[float]) -> Journey:
        """Add ``amount`` to the distance.

        Anything that is not a finite number greater than zero is ignored,
        so bad link data can never turn the total negative or NaN.
        """
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return self
        if not math.isfinite(amount) or amount <= 0:
            return self
        return replace(self, distance=self.distance + amount)

    def embark(self, station: str, route_name: str) -> Journey:
        return replace(
            self,
            narrative=(f"Embark at {station} on {route_name}",),
            current_route=route_name,
        )

    def change(self, station: str, route_name: str) -> Journey:
        return replace(
            self,
            changes=self.changes + 1,
            narrative=self.narrative + (f"At {station} change to {route_name}",),
            current_route=route_name,
        )

    def arrive(self, station: str) -> Journey:
        return replace(
            self,
            success=True,
            narrative=self.narrative + (f"Arrive at {station}",),
        )

    def report(self) -> str:
        """Summary block listing narrative, totals and stations passed."""
        return (
            "Route Summary\n"
            "==============\n"
            f"{self.text}\n"
            "\n"
            f"Total distance :{format_distance(self.distance)}\n"
            f"Changes :{self.changes}\n"
            f"Passing through: {', '.join(self.stations)},"
        )

"""Journey planner service - Main orchestrator.

Loads the network through the repository, builds the station graph once,
validates journey queries and delegates the search to the planner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domain.errors import (
    InvalidNetworkError,
    InvalidQueryError,
    NetworkLoadError,
    SearchLimitExceededError,
    StationNotFoundError,
)
from ..domain.models import Journey, RailwayNetwork
from ..graph.builder import build_graph
from ..ports.network import Graph, JourneyPlannerPort, NetworkRepositoryPort


def _check_query(origin: object, destination: object, max_results: object) -> None:
    if isinstance(max_results, bool) or not isinstance(max_results, int):
        raise InvalidQueryError("maxResults is not a number", argument="max_results")
    if max_results < 1:
        raise InvalidQueryError(
            f"maxResults must be a positive integer, got {max_results}",
            argument="max_results",
        )
    if not isinstance(origin, str):
        raise InvalidQueryError("origin is not a string", argument="origin")
    if not isinstance(destination, str):
        raise InvalidQueryError("destination is not a string", argument="destination")


@dataclass
class JourneyPlannerService:
    """Main service for planning journeys on a railway network.

    This service orchestrates:
    1. Network loading
    2. Station graph construction (once per service)
    3. Query validation
    4. Journey search

    Attributes:
        repository: Loads the railway network
        planner: Computes ranked journeys
    """

    repository: NetworkRepositoryPort
    planner: JourneyPlannerPort

    _logger: logging.Logger = field(init=False, repr=False)
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def network(self) -> RailwayNetwork:
        """Return the network served by this planner."""
        return self.repository.load()

    def graph(self) -> Graph:
        """Return the station graph, building it on first use.

        Raises:
            NetworkLoadError: If the network cannot be loaded.
            InvalidNetworkError: If the loaded data is not a route collection.
        """
        if self._graph is None:
            network = self.repository.load()
            self._graph = build_graph(network)
            self._logger.info(
                "Station graph ready",
                extra={"network": network.network_name, "stations": len(self._graph)},
            )
        return self._graph

    def plan(self, origin: str, destination: str, max_results: int) -> List[Journey]:
        """Plan the best journeys between two stations.

        Args:
            origin: Name of the departure station.
            destination: Name of the arrival station.
            max_results: Maximum number of journeys, a positive integer.

        Returns:
            Up to ``max_results`` journeys, fewest changes first, then
            shortest distance. Empty if the stations are not connected.

        Raises:
            InvalidQueryError: If the arguments are malformed.
            StationNotFoundError: If a station is not in the network.
            SearchLimitExceededError: If the search ceiling is reached.
        """
        _check_query(origin, destination, max_results)

        graph = self.graph()
        journeys = list(self.planner.plan(graph, origin, destination, max_results))
        self._logger.info(
            "Journeys planned",
            extra={
                "origin": origin,
                "destination": destination,
                "count": len(journeys),
            },
        )
        return journeys

    def plan_safe(
        self, origin: str, destination: str, max_results: int
    ) -> Tuple[Optional[List[Journey]], Optional[str]]:
        """Plan journeys, returning an error message instead of raising.

        Returns:
            Tuple of (journeys or None, error message or None).
        """
        try:
            return self.plan(origin, destination, max_results), None
        except InvalidQueryError as e:
            return None, f"Invalid query: {e.message}"
        except StationNotFoundError as e:
            return None, f"Unknown station: {e.station_name}"
        except SearchLimitExceededError as e:
            return None, f"Search aborted after {e.limit} expansions"
        except (NetworkLoadError, InvalidNetworkError) as e:
            return None, f"Network unavailable: {e}"

"""Network ports - Abstractions for network loading and journey planning.

These protocols define the contracts for loading a railway network
from storage and for planning journeys over its station graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Journey, RailwayNetwork, Station

# Maps station name -> Station (with its outgoing edges)
Graph = Mapping[str, "Station"]


class NetworkRepositoryPort(Protocol):
    """Port for loading railway network data.

    Implementation: adapters/network/json_repository.py
    """

    def load(self) -> RailwayNetwork:
        """Load the railway network.

        Returns:
            The network with its routes and stops.
        """
        ...


class JourneyPlannerPort(Protocol):
    """Port for journey computation.

    Implementation: adapters/network/exhaustive_planner.py
    """

    def plan(
        self,
        graph: Graph,
        origin: str,
        destination: str,
        max_results: Optional[int] = None,
    ) -> Sequence[Journey]:
        """Find the best journeys between two stations.

        Args:
            graph: The station graph.
            origin: Name of the departure station.
            destination: Name of the arrival station.
            max_results: Maximum number of journeys to return.

        Returns:
            Journeys ordered by changes then distance.
        """
        ...

"""Exhaustive Journey Planner adapter.

Wraps the journey search in graph/search.py and adds:
- A configurable expansion ceiling
- Logging of queries and outcomes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import SearchLimitExceededError, StationNotFoundError
from ...domain.models import Journey
from ...graph.search import best_routes
from ...ports.network import Graph


@dataclass
class ExhaustiveJourneyPlanner:
    """Journey planner enumerating every simple path.

    This adapter implements JourneyPlannerPort.

    Attributes:
        max_expansions: Search ceiling, None for unbounded
    """

    max_expansions: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(
        self,
        graph: Graph,
        origin: str,
        destination: str,
        max_results: Optional[int] = None,
    ) -> List[Journey]:
        """Find the best journeys between two stations.

        Raises:
            StationNotFoundError: If origin or destination is not in the graph.
            SearchLimitExceededError: If the expansion ceiling is reached.
        """
        self._logger.debug(
            "Planning journeys",
            extra={
                "origin": origin,
                "destination": destination,
                "max_results": max_results,
            },
        )

        try:
            journeys = best_routes(
                graph,
                origin,
                destination,
                max_results,
                max_expansions=self.max_expansions,
            )
        except StationNotFoundError as e:
            self._logger.warning(
                "Unknown station", extra={"station": e.station_name}
            )
            raise
        except SearchLimitExceededError as e:
            self._logger.error(
                "Journey search aborted", extra={"limit": e.limit}
            )
            raise

        if not journeys:
            self._logger.info(
                "No journey found",
                extra={"origin": origin, "destination": destination},
            )
        else:
            self._logger.info(
                "Journeys found",
                extra={
                    "origin": origin,
                    "destination": destination,
                    "count": len(journeys),
                    "best_changes": journeys[0].changes,
                    "best_distance": journeys[0].distance,
                },
            )
        return journeys

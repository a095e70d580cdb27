"""Network adapters - Implementations of network-related ports.

Available implementations:
- JSONNetworkRepository: Loads a railway network from a JSON file
- ExhaustiveJourneyPlanner: Ranks every simple path between two stations
"""

from .exhaustive_planner import ExhaustiveJourneyPlanner
from .json_repository import JSONNetworkRepository

__all__ = ["JSONNetworkRepository", "ExhaustiveJourneyPlanner"]

"""Graph-related utilities for representing the railway network.

This subpackage contains modules to build an in-memory station graph
from a network's routes and to search journeys on top of that graph.
"""

from .builder import build_graph
from .search import best_routes, count_simple_paths

__all__ = ["build_graph", "best_routes", "count_simple_paths"]

"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    InvalidNetworkError,
    InvalidQueryError,
    NetworkLoadError,
    RailNetworkError,
    SearchLimitExceededError,
    StationNotFoundError,
)
from .models import Edge, Journey, RailwayNetwork, Route, Station, Stop

__all__ = [
    # Models
    "Stop",
    "Route",
    "RailwayNetwork",
    "Edge",
    "Station",
    "Journey",
    # Errors
    "RailNetworkError",
    "InvalidNetworkError",
    "StationNotFoundError",
    "SearchLimitExceededError",
    "NetworkLoadError",
    "InvalidQueryError",
]

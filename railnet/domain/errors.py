"""Typed domain errors for railnet.

All errors inherit from RailNetworkError and can optionally wrap a root
cause exception for debugging. The core never recovers from these: they
are raised to the caller, and the CLI turns them into messages and exit
codes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RailNetworkError(Exception):
    """Base error for the railway network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidNetworkError(RailNetworkError):
    """Graph-build input is not a well-formed route collection.

    Attributes:
        received_type: Name of the type that was passed in
    """

    received_type: str = ""


@dataclass
class StationNotFoundError(RailNetworkError):
    """Station name not found in the graph.

    Attributes:
        station_name: The station name that was not found
    """

    station_name: str = ""


@dataclass
class SearchLimitExceededError(RailNetworkError):
    """Journey search went past its safety ceiling.

    Attributes:
        limit: The ceiling that was exceeded
        origin: Origin station of the query
        destination: Destination station of the query
    """

    limit: int = 0
    origin: str = ""
    destination: str = ""


@dataclass
class NetworkLoadError(RailNetworkError):
    """Network data file could not be read or parsed.

    Attributes:
        file_path: Path to the network data file
    """

    file_path: Optional[str] = None


@dataclass
class InvalidQueryError(RailNetworkError):
    """Journey query arguments are malformed.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""

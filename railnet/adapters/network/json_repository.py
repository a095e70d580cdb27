"""JSON Network Repository adapter.

Loads a railway network from a JSON data file and adds:
- Configuration injection (data directory from config)
- Caching of the loaded network
- Typed load errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError
from ...domain.models import RailwayNetwork
from .schema import NetworkDocument


@dataclass
class JSONNetworkRepository:
    """Network repository that loads from a JSON file.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        path: Path to the network JSON file
    """

    path: Path
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[RailwayNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Optional[NetworkConfig] = None,
        name: Optional[Union[str, Path]] = None,
    ) -> JSONNetworkRepository:
        """Create a repository for ``name``, or the configured default file."""
        config = config or get_config().network
        if name is None:
            return cls(config.default_path)
        return cls(config.resolve(str(name)))

    def load(self) -> RailwayNetwork:
        """Load the railway network from the JSON file.

        Returns:
            The network with its routes and stops.

        Raises:
            NetworkLoadError: If the file cannot be read or is malformed.
        """
        if self._network is not None:
            return self._network

        self._logger.debug("Loading network", extra={"path": str(self.path)})

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise NetworkLoadError(
                f"Failed to read network file {self.path}",
                file_path=str(self.path),
                cause=e,
            )

        try:
            document = NetworkDocument.model_validate_json(text)
        except ValidationError as e:
            raise NetworkLoadError(
                f"Malformed network file {self.path}",
                file_path=str(self.path),
                cause=e,
            )

        network = document.to_domain()
        self._network = network
        self._logger.info(
            "Network loaded",
            extra={
                "network": network.network_name,
                "routes": len(network.routes),
            },
        )
        return network

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Network cache cleared")

"""Dependency injection container.

Binds each port to a factory and hands out one instance per port. The
command line builds its repository, planner and service through it, and
tests swap bindings with ``register``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port-to-instance registry.

    Usage:
        container = Container.create_default(network_file="notional_ra.json")
        planner = container.resolve(JourneyPlannerService)

        # swap the data source in tests
        container.register(NetworkRepositoryPort, InMemoryRepository)
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance already built."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance for ``port_type``, building it on first use.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._instances:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")
            self._instances[port_type] = self._factories[port_type]()
        return self._instances[port_type]

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        network_file: Optional[Union[str, Path]] = None,
    ) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.
            network_file: Network JSON file; the configured default if None.

        Returns:
            A configured Container instance.
        """
        from .adapters.network import ExhaustiveJourneyPlanner, JSONNetworkRepository
        from .ports.network import JourneyPlannerPort, NetworkRepositoryPort
        from .services import JourneyPlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkRepositoryPort,
            lambda: JSONNetworkRepository.from_config(config.network, network_file),
        )
        container.register(
            JourneyPlannerPort,
            lambda: ExhaustiveJourneyPlanner(
                max_expansions=config.search.max_expansions
            ),
        )

        def create_journey_planner() -> JourneyPlannerService:
            return JourneyPlannerService(
                repository=container.resolve(NetworkRepositoryPort),
                planner=container.resolve(JourneyPlannerPort),
            )

        container.register(JourneyPlannerService, create_journey_planner)

        return container

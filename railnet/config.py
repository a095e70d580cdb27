"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RAILNET_NETWORK_DATA_DIR=/path/to/data
- RAILNET_NETWORK_DEFAULT_FILE=notional_ra.json
- RAILNET_SEARCH_DEFAULT_MAX_RESULTS=5
- RAILNET_SEARCH_MAX_EXPANSIONS=250000
- RAILNET_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with RAILNET_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    default_file: str = "notional_ra.json"

    @property
    def default_path(self) -> Path:
        """Full path to the default network JSON file."""
        return self.data_dir / self.default_file

    def resolve(self, name: str) -> Path:
        """Resolve a network file name, relative names against ``data_dir``."""
        path = Path(name)
        if path.is_absolute() or path.exists():
            return path
        return self.data_dir / path


class SearchConfig(BaseSettings):
    """Journey search configuration.

    Environment variables prefixed with RAILNET_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_SEARCH_")

    default_max_results: int = Field(default=3, ge=1)
    max_expansions: Optional[int] = Field(default=1_000_000, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.default_path)
        print(config.search.max_expansions)

    Environment variables prefixed with RAILNET_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()

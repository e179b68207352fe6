"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TOWNROADS_GRAPH_CASCADE_VERTEX_REMOVAL=true
- TOWNROADS_GRAPH_STRICT_EDGES_OF=false
- TOWNROADS_GRAPH_DISTANCE_UNIT=km
- TOWNROADS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph behaviour configuration.

    Environment variables prefixed with TOWNROADS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNROADS_GRAPH_")

    # Removing a town leaves its roads in place unless this is set
    cascade_vertex_removal: bool = False
    strict_edges_of: bool = True
    distance_unit: str = "mi"

    @field_validator("distance_unit")
    @classmethod
    def _unit_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("distance_unit must not be blank")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TOWNROADS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNROADS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.distance_unit)

    Environment variables prefixed with TOWNROADS_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNROADS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()

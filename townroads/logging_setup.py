"""Logging bootstrap for applications embedding the graph.

The package itself only creates module loggers; the embedding
application decides when to call configure_logging().
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Args:
        config: Logging settings; defaults to get_config().observability.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
        )

    logging.basicConfig(level=level, format=config.format, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": config.level}
    )

"""Domain layer - Core models and errors.

This module contains the town/road models and typed errors used
throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InvalidEndpointError,
    NullInputError,
    PathNotFoundError,
    TownGraphError,
)
from .models import PathHop, Road, Route, ShortestPathTree, Town

__all__ = [
    # Models
    "Town",
    "Road",
    "ShortestPathTree",
    "PathHop",
    "Route",
    # Errors
    "TownGraphError",
    "NullInputError",
    "InvalidEndpointError",
    "PathNotFoundError",
    "ConfigurationError",
]

"""Top-level package for the townroads project.

Models a map of towns joined by weighted, labeled roads and answers
shortest-path questions on it. Building the map from a data source and
rendering the resulting routes are left to the embedding application.
"""

from .domain import (
    InvalidEndpointError,
    NullInputError,
    PathNotFoundError,
    Road,
    Route,
    ShortestPathTree,
    Town,
    TownGraphError,
)
from .graph import Graph

__all__ = [
    "Graph",
    "Town",
    "Road",
    "Route",
    "ShortestPathTree",
    "TownGraphError",
    "NullInputError",
    "InvalidEndpointError",
    "PathNotFoundError",
]

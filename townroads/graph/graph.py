"""The town/road graph container.

Graph keeps towns and roads in plain sets and answers membership and
adjacency queries by scanning them. Shortest paths are delegated to
graph/dijkstra.py; the resulting tree is returned to the caller and
never stored on the graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Set

from ..config import GraphConfig, get_config
from ..domain.errors import InvalidEndpointError, NullInputError, PathNotFoundError
from ..domain.models import PathHop, Road, Route, ShortestPathTree, Town
from .dijkstra import dijkstra_shortest_path


@dataclass
class Graph:
    """Undirected graph of towns connected by weighted, labeled roads.

    Implements GraphPort[Town, Road]. Not thread-safe: callers sharing
    one graph must serialize mutations and path queries themselves.

    Attributes:
        config: Graph configuration (removal cascade, unit suffix, ...)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _towns: Set[Town] = field(default_factory=set, init=False, repr=False)
    _roads: Set[Road] = field(default_factory=set, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # Towns

    def add_vertex(self, town: Optional[Town]) -> bool:
        """Add a town if no town with the same name is present.

        Raises:
            NullInputError: If town is None.
        """
        if town is None:
            raise NullInputError("Cannot add a null town", argument="town")

        if town in self._towns:
            return False

        self._towns.add(town)
        self._logger.debug("Town added", extra={"town": town.name})
        return True

    def remove_vertex(self, town: Optional[Town]) -> bool:
        """Remove a town if present.

        Roads touching the town are kept unless
        config.cascade_vertex_removal is set.

        Returns:
            True if the graph contained the town.
        """
        if town is None or town not in self._towns:
            return False

        self._towns.remove(town)
        if self.config.cascade_vertex_removal:
            dropped = {road for road in self._roads if road.contains(town)}
            self._roads -= dropped
            self._logger.debug(
                "Town removed with its roads",
                extra={"town": town.name, "roads_removed": len(dropped)},
            )
        else:
            self._logger.debug("Town removed", extra={"town": town.name})
        return True

    def contains_vertex(self, town: Optional[Town]) -> bool:
        return town is not None and town in self._towns

    def vertex_set(self) -> FrozenSet[Town]:
        """Return a snapshot of the towns in the graph."""
        return frozenset(self._towns)

    # Roads

    def add_edge(
        self,
        source: Optional[Town],
        destination: Optional[Town],
        weight: int,
        name: str,
    ) -> Road:
        """Create a road between two towns already in the graph.

        Each call stores a new road, even when an identical one exists.

        Returns:
            The newly created road.

        Raises:
            NullInputError: If either town is None.
            InvalidEndpointError: If either town is not in the graph.
        """
        self._require_present(source, "source")
        self._require_present(destination, "destination")

        road = Road(source, destination, weight, name)
        self._roads.add(road)
        self._logger.debug(
            "Road added",
            extra={
                "road": name,
                "source": source.name,
                "destination": destination.name,
                "weight": weight,
            },
        )
        return road

    def remove_edge(
        self,
        source: Optional[Town],
        destination: Optional[Town],
        weight: int,
        name: str,
    ) -> Optional[Road]:
        """Remove one road matching the endpoints, weight and label.

        Returns:
            The removed road, or None if either town is None or nothing
            matched.

        Raises:
            InvalidEndpointError: If either town is not in the graph.
        """
        if source is None or destination is None:
            return None

        self._require_present(source, "source")
        self._require_present(destination, "destination")

        for road in self._roads:
            if road.matches(source, destination, weight, name):
                break
        else:
            return None

        self._roads.remove(road)
        self._logger.debug("Road removed", extra={"road": name})
        return road

    def get_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[Road]:
        """Return a road between two towns, or None.

        With parallel roads the lightest one wins, then the lowest label.
        """
        candidates = [
            road for road in self._roads if road.connects(source, destination)
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda road: (road.weight, road.name))

    def contains_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> bool:
        return any(road.connects(source, destination) for road in self._roads)

    def edge_set(self) -> FrozenSet[Road]:
        """Return a snapshot of the roads in the graph."""
        return frozenset(self._roads)

    def edges_of(self, town: Optional[Town]) -> Set[Road]:
        """Return every road touching ``town``.

        Raises:
            InvalidEndpointError: If town is None, or is not in the graph
                while config.strict_edges_of is set.
        """
        if town is None:
            raise InvalidEndpointError("Cannot list roads of a null town")
        if self.config.strict_edges_of and town not in self._towns:
            raise InvalidEndpointError(
                f"Town not in graph: {town.name}", town_name=town.name
            )
        return {road for road in self._roads if road.contains(town)}

    # Shortest paths

    def dijkstra_shortest_path(self, source: Optional[Town]) -> ShortestPathTree:
        """Compute distances and predecessors from ``source``.

        Raises:
            NullInputError: If source is None.
            InvalidEndpointError: If source is not in the graph.
        """
        self._require_present(source, "source")
        return dijkstra_shortest_path(self._towns, self._roads, source)

    def shortest_route(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Route:
        """Find the shortest route from ``source`` to ``destination``.

        Returns:
            The route, empty when the destination touches no road or
            equals the source.

        Raises:
            NullInputError: If either town is None.
            InvalidEndpointError: If source is not in the graph.
            PathNotFoundError: If the destination cannot be reached.
        """
        if source is None:
            raise NullInputError("Source town is required", argument="source")
        if destination is None:
            raise NullInputError(
                "Destination town is required", argument="destination"
            )

        if not any(road.contains(destination) for road in self._roads):
            return Route()

        tree = self.dijkstra_shortest_path(source)
        hops = self._reconstruct(tree, destination)
        route = Route(hops=tuple(hops))

        self._logger.info(
            "Route found",
            extra={
                "source": source.name,
                "destination": destination.name,
                "hops": len(route.hops),
                "total_weight": route.total_weight,
            },
        )
        return route

    def shortest_path(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> List[str]:
        """Describe the shortest route, one '<a> via <road> to <b> <w> mi' per hop."""
        route = self.shortest_route(source, destination)
        return route.descriptions(self.config.distance_unit)

    def _reconstruct(self, tree: ShortestPathTree, destination: Town) -> List[PathHop]:
        """Walk predecessors back from ``destination`` to the tree source."""
        source = tree.source
        hops: List[PathHop] = []
        current = destination

        while current != source:
            previous = tree.predecessor_of(current)
            road = tree.road_to(current)
            # A chain longer than the town count means a corrupt tree
            if previous is None or road is None or len(hops) >= len(self._towns):
                self._logger.warning(
                    "No route found",
                    extra={"source": source.name, "destination": destination.name},
                )
                raise PathNotFoundError(
                    f"No path from {source.name} to {destination.name}",
                    source=source.name,
                    destination=destination.name,
                )

            hops.append(PathHop(previous, road, current))
            current = previous

        hops.reverse()
        return hops

    def _require_present(self, town: Optional[Town], argument: str) -> None:
        if town is None:
            raise NullInputError(f"{argument} town is required", argument=argument)
        if town not in self._towns:
            raise InvalidEndpointError(
                f"Town not in graph: {town.name}", town_name=town.name
            )

    def __contains__(self, town: object) -> bool:
        return town in self._towns

    def __iter__(self) -> Iterator[Town]:
        return iter(sorted(self._towns))

    def __len__(self) -> int:
        return len(self._towns)

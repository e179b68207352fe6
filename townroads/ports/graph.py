"""Graph port - Abstraction over the town/road graph.

Collaborators that build a graph from some data source, or render the
routes it computes, depend on this protocol rather than on the concrete
Graph class.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    AbstractSet,
    List,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

if TYPE_CHECKING:
    from ..domain.models import Route, ShortestPathTree

V = TypeVar("V")
E = TypeVar("E")


@runtime_checkable
class GraphPort(Protocol[V, E]):
    """Port for an undirected, weighted, labeled graph.

    Implementation: graph/graph.py (Graph)
    """

    def add_vertex(self, vertex: Optional[V]) -> bool:
        """Add a vertex if no equal vertex is present.

        Returns:
            True if the vertex was added.
        """
        ...

    def remove_vertex(self, vertex: Optional[V]) -> bool:
        ...

    def contains_vertex(self, vertex: Optional[V]) -> bool:
        ...

    def add_edge(
        self, source: Optional[V], destination: Optional[V], weight: int, name: str
    ) -> E:
        """Create and store a new edge between two known vertices.

        Returns:
            The newly created edge.
        """
        ...

    def remove_edge(
        self, source: Optional[V], destination: Optional[V], weight: int, name: str
    ) -> Optional[E]:
        ...

    def get_edge(self, source: Optional[V], destination: Optional[V]) -> Optional[E]:
        ...

    def contains_edge(self, source: Optional[V], destination: Optional[V]) -> bool:
        ...

    def edge_set(self) -> AbstractSet[E]:
        ...

    def vertex_set(self) -> AbstractSet[V]:
        ...

    def edges_of(self, vertex: Optional[V]) -> AbstractSet[E]:
        ...

    def dijkstra_shortest_path(self, source: Optional[V]) -> ShortestPathTree:
        """Compute distances and predecessors from ``source``."""
        ...

    def shortest_route(
        self, source: Optional[V], destination: Optional[V]
    ) -> Route:
        ...

    def shortest_path(
        self, source: Optional[V], destination: Optional[V]
    ) -> List[str]:
        """Describe the shortest path, one string per hop.

        Returns:
            Hop descriptions in source to destination order, or an empty
            list when the destination touches no edge.
        """
        ...

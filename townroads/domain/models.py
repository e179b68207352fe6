"""Domain models for the town/road graph.

Towns are compared by name. Roads are compared by instance, so two roads
with the same endpoints, weight and label can live in the same graph.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


@dataclass(frozen=True, slots=True, order=True)
class Town:
    """A named location. Equality and ordering use the exact name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """An undirected, weighted, labeled connection between two towns.

    ``source`` and ``destination`` only record how the road was added;
    every query treats the road as undirected.

    Attributes:
        source: First endpoint
        destination: Second endpoint
        weight: Non-negative length of the road
        name: Road label (e.g. 'Rd1')
    """

    source: Town
    destination: Town
    weight: int
    name: str

    def __post_init__(self) -> None:
        """Validate the weight."""
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise TypeError(
                f"Road weight must be an integer, got {type(self.weight).__name__}"
            )
        if self.weight < 0:
            raise ValueError(f"Road weight must be non-negative, got {self.weight}")

    def contains(self, town: Optional[Town]) -> bool:
        """Check whether ``town`` is one of the endpoints."""
        return town == self.source or town == self.destination

    def connects(self, a: Optional[Town], b: Optional[Town]) -> bool:
        """Check whether the endpoint pair is {a, b}, in either orientation."""
        return (self.source == a and self.destination == b) or (
            self.source == b and self.destination == a
        )

    def other(self, town: Town) -> Town:
        """Return the far endpoint relative to ``town``."""
        if town == self.source:
            return self.destination
        if town == self.destination:
            return self.source
        raise ValueError(f"{town} is not an endpoint of road {self.name}")

    def matches(
        self, a: Optional[Town], b: Optional[Town], weight: int, name: str
    ) -> bool:
        return self.connects(a, b) and self.weight == weight and self.name == name

    def __repr__(self) -> str:
        return (
            f"Road({self.source.name!r}, {self.destination.name!r}, "
            f"{self.weight}, {self.name!r})"
        )


@dataclass(frozen=True)
class ShortestPathTree:
    """Result of one single-source shortest-path computation.

    Attributes:
        source: Town the computation started from
        distances: Best-known cumulative weight per town (inf if unreachable)
        predecessors: Predecessor on the best-known path, absent for the
            source and for unreachable towns
        predecessor_roads: Road used to reach each town from its predecessor
    """

    source: Town
    distances: Mapping[Town, float] = field(default_factory=dict)
    predecessors: Mapping[Town, Town] = field(default_factory=dict)
    predecessor_roads: Mapping[Town, Road] = field(default_factory=dict)

    def distance_to(self, town: Town) -> float:
        return self.distances.get(town, math.inf)

    def is_reachable(self, town: Town) -> bool:
        return self.distance_to(town) != math.inf

    def predecessor_of(self, town: Town) -> Optional[Town]:
        return self.predecessors.get(town)

    def road_to(self, town: Town) -> Optional[Road]:
        return self.predecessor_roads.get(town)


@dataclass(frozen=True, slots=True)
class PathHop:
    """One hop of a route: ``origin`` to ``destination`` over ``road``."""

    origin: Town
    road: Road
    destination: Town

    def describe(self, unit: str = "mi") -> str:
        """Render the hop as '<from> via <road> to <to> <weight> <unit>'."""
        return (
            f"{self.origin.name} via {self.road.name} to "
            f"{self.destination.name} {self.road.weight} {unit}"
        )


@dataclass(frozen=True, slots=True)
class Route:
    """Ordered hops from a source town to a destination town.

    Attributes:
        hops: Hops in source to destination order
    """

    hops: tuple[PathHop, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no hops."""
        return len(self.hops) == 0

    @property
    def total_weight(self) -> int:
        """Sum of the road weights along the route."""
        return sum(hop.road.weight for hop in self.hops)

    @property
    def towns(self) -> tuple[Town, ...]:
        """Towns visited along the route, endpoints included."""
        if not self.hops:
            return ()
        return (self.hops[0].origin,) + tuple(hop.destination for hop in self.hops)

    def descriptions(self, unit: str = "mi") -> List[str]:
        return [hop.describe(unit) for hop in self.hops]

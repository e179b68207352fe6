"""Single-source shortest paths over the town/road graph.

The relaxation walks a frontier of unsettled towns and picks the next
town with a linear scan instead of a heap, which is O(V*E) overall and
fine at the scale of a road map.
"""

import logging
import math
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, List, Optional, Set

from ..domain.models import Road, ShortestPathTree, Town

logger = logging.getLogger(__name__)


def _incident_roads(roads: Iterable[Road], town: Town) -> List[Road]:
    return [road for road in roads if road.contains(town)]


def _closest_in_frontier(
    frontier: Set[Town], distances: Dict[Town, float]
) -> Optional[Town]:
    """Return the frontier town with the smallest finite distance.

    Ties are broken by town name. Returns None when every remaining town
    is unreachable.
    """
    best: Optional[Town] = None
    best_distance = math.inf

    for town in frontier:
        distance = distances[town]
        if distance < best_distance or (
            distance == best_distance and best is not None and town < best
        ):
            best = town
            best_distance = distance

    return best


def dijkstra_shortest_path(
    towns: AbstractSet[Town], roads: Iterable[Road], source: Town
) -> ShortestPathTree:
    """Compute best-known distances and predecessors from ``source``.

    Parameters
    ----------
    towns:
        Towns currently in the graph; they form the initial frontier.
    roads:
        Roads currently in the graph. Roads leading to a town outside
        ``towns`` are never relaxed.
    source:
        Town to start from. Must be a member of ``towns``.

    Returns
    -------
    ShortestPathTree
        Distances for every town (``math.inf`` if unreachable) and the
        predecessor of every reached town other than ``source``.
    """
    roads = list(roads)
    frontier: Set[Town] = set(towns)
    distances: Dict[Town, float] = {town: math.inf for town in towns}
    previous: Dict[Town, Town] = {}
    previous_roads: Dict[Town, Road] = {}
    distances[source] = 0

    current: Optional[Town] = source
    while frontier and current is not None:
        for road in _incident_roads(roads, current):
            other = road.other(current)
            if other == current or other not in frontier:
                continue
            new_distance = distances[current] + road.weight
            if new_distance < distances[other]:
                distances[other] = new_distance
                previous[other] = current
                previous_roads[other] = road
            elif (
                new_distance == distances[other]
                and previous.get(other) == current
                and road.name < previous_roads[other].name
            ):
                # Equal-weight parallel roads: lowest label wins
                previous_roads[other] = road

        frontier.discard(current)
        current = _closest_in_frontier(frontier, distances)

    logger.debug(
        "Shortest-path tree computed",
        extra={
            "source": source.name,
            "reached": len(previous) + 1,
            "unreached": len(frontier),
        },
    )

    return ShortestPathTree(
        source=source,
        distances=MappingProxyType(distances),
        predecessors=MappingProxyType(previous),
        predecessor_roads=MappingProxyType(previous_roads),
    )

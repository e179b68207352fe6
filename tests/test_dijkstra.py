import logging
import math

import pytest

from townroads.config import GraphConfig
from townroads.domain.errors import InvalidEndpointError, NullInputError, PathNotFoundError
from townroads.domain.models import Road, Town
from townroads.graph.dijkstra import dijkstra_shortest_path
from townroads.graph.graph import Graph


A, B, C, D, E, F = (Town(name) for name in "ABCDEF")


@pytest.fixture
def graph():
    # A -5- B -3- C, plus isolated D and a separate E -1- F component
    graph = Graph(config=GraphConfig())
    for town in (A, B, C, D, E, F):
        graph.add_vertex(town)
    graph.add_edge(A, B, 5, "Rd1")
    graph.add_edge(B, C, 3, "Rd2")
    graph.add_edge(E, F, 1, "Rd3")
    return graph


def test_shortest_path_two_hops(graph):
    assert graph.shortest_path(A, C) == ["A via Rd1 to B 5 mi", "B via Rd2 to C 3 mi"]


def test_shortest_path_reversed_direction(graph):
    assert graph.shortest_path(C, A) == ["C via Rd2 to B 3 mi", "B via Rd1 to A 5 mi"]


def test_shortest_path_to_self_is_empty(graph):
    assert graph.shortest_path(A, A) == []
    assert graph.shortest_path(D, D) == []


def test_shortest_path_to_isolated_town_is_empty(graph):
    assert graph.shortest_path(A, D) == []


def test_shortest_path_other_component_raises(graph):
    with pytest.raises(PathNotFoundError) as excinfo:
        graph.shortest_path(A, F)

    assert excinfo.value.source == "A"
    assert excinfo.value.destination == "F"


def test_shortest_path_unreachable_logs_warning(graph, caplog):
    with caplog.at_level(logging.WARNING, logger="townroads.graph.graph"):
        with pytest.raises(PathNotFoundError):
            graph.shortest_path(A, E)

    assert "No route found" in caplog.text


def test_shortest_path_null_arguments(graph):
    with pytest.raises(NullInputError):
        graph.shortest_path(None, A)
    with pytest.raises(NullInputError):
        graph.shortest_path(A, None)


def test_shortest_path_unknown_source(graph):
    with pytest.raises(InvalidEndpointError):
        graph.shortest_path(Town("Z"), C)


def test_prefers_cheaper_detour(graph):
    graph.add_edge(A, C, 10, "Direct")

    assert graph.shortest_path(A, C) == ["A via Rd1 to B 5 mi", "B via Rd2 to C 3 mi"]


def test_parallel_roads_pick_the_lighter_one(graph):
    graph.add_edge(A, B, 2, "Shortcut")

    assert graph.shortest_path(A, B) == ["A via Shortcut to B 2 mi"]


def test_large_weights_are_not_truncated():
    graph = Graph(config=GraphConfig())
    for town in (A, B, C):
        graph.add_vertex(town)
    graph.add_edge(A, B, 150, "Long1")
    graph.add_edge(B, C, 275, "Long2")

    tree = graph.dijkstra_shortest_path(A)

    assert tree.distance_to(C) == 425
    assert graph.shortest_path(A, C) == [
        "A via Long1 to B 150 mi",
        "B via Long2 to C 275 mi",
    ]


def test_hop_weights_sum_to_tree_distance():
    towns = [Town(f"T{i}") for i in range(6)]
    graph = Graph(config=GraphConfig())
    for town in towns:
        graph.add_vertex(town)
    for (a, b, w) in [(0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
                      (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9)]:
        graph.add_edge(towns[a], towns[b], w, f"R{a}{b}")

    tree = graph.dijkstra_shortest_path(towns[0])
    route = graph.shortest_route(towns[0], towns[4])

    assert route.total_weight == tree.distance_to(towns[4]) == 20
    assert route.towns == (towns[0], towns[2], towns[5], towns[4])


def test_tree_marks_unreachable_towns(graph):
    tree = graph.dijkstra_shortest_path(A)

    assert tree.source == A
    assert tree.distance_to(A) == 0
    assert tree.distance_to(B) == 5
    assert tree.distance_to(C) == 8
    assert math.isinf(tree.distance_to(F))
    assert not tree.is_reachable(D)
    assert tree.predecessor_of(C) == B
    assert tree.predecessor_of(A) is None
    assert F not in tree.predecessors


def test_each_call_returns_independent_tree(graph):
    from_a = graph.dijkstra_shortest_path(A)
    from_e = graph.dijkstra_shortest_path(E)

    assert from_a.distance_to(C) == 8
    assert from_e.distance_to(F) == 1
    assert not from_e.is_reachable(C)


def test_dangling_roads_of_removed_town_are_ignored(graph):
    graph.add_edge(A, D, 1, "Spur")
    graph.add_edge(D, C, 1, "Spur2")
    graph.remove_vertex(D)

    assert graph.shortest_path(A, C) == ["A via Rd1 to B 5 mi", "B via Rd2 to C 3 mi"]


def test_distance_unit_from_config():
    graph = Graph(config=GraphConfig(distance_unit="km"))
    graph.add_vertex(A)
    graph.add_vertex(B)
    graph.add_edge(A, B, 4, "Rd1")

    assert graph.shortest_path(A, B) == ["A via Rd1 to B 4 km"]


def test_engine_ties_break_by_name():
    # B and C tie at distance 1; B settles first and claims D
    towns = {A, B, C, D}
    roads = [Road(A, C, 1, "ac"), Road(A, B, 1, "ab"), Road(C, D, 1, "cd"), Road(B, D, 1, "bd")]

    tree = dijkstra_shortest_path(towns, roads, A)

    assert tree.distance_to(D) == 2
    assert tree.predecessor_of(D) == B


def test_engine_ignores_self_loops():
    tree = dijkstra_shortest_path({A, B}, [Road(A, A, 0, "loop"), Road(A, B, 2, "ab")], A)

    assert tree.distance_to(A) == 0
    assert tree.distance_to(B) == 2
    assert A not in tree.predecessors


def test_tree_records_road_used_for_each_hop(graph):
    shortcut = graph.add_edge(A, B, 2, "Shortcut")

    tree = graph.dijkstra_shortest_path(A)

    assert tree.road_to(B) is shortcut
    assert tree.road_to(C).name == "Rd2"
    assert tree.road_to(A) is None


def test_equal_parallel_roads_pick_lowest_label():
    graph = Graph(config=GraphConfig())
    graph.add_vertex(A)
    graph.add_vertex(B)
    graph.add_edge(A, B, 4, "Zeta")
    graph.add_edge(A, B, 4, "Alpha")

    assert graph.shortest_path(A, B) == ["A via Alpha to B 4 mi"]


def test_tree_maps_are_read_only(graph):
    tree = graph.dijkstra_shortest_path(A)

    with pytest.raises(TypeError):
        tree.distances[B] = 99
    with pytest.raises(TypeError):
        tree.predecessors[C] = A
    assert tree.distance_to(B) == 5


def test_summed_hop_strings_match_tree_distance():
    towns = [Town(f"T{i}") for i in range(5)]
    graph = Graph(config=GraphConfig())
    for town in towns:
        graph.add_vertex(town)
    for (a, b, w) in [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3)]:
        graph.add_edge(towns[a], towns[b], w, f"R{a}{b}")

    tree = graph.dijkstra_shortest_path(towns[0])
    for target in towns[1:]:
        hops = graph.shortest_path(towns[0], target)
        assert sum(int(hop.split()[-2]) for hop in hops) == tree.distance_to(target)

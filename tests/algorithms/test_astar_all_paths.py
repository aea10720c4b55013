# pylint: disable=invalid-name
from collections import Counter
from itertools import islice

import networkx as nx
import pytest

from pathsearch import (
    AllOptimalPaths,
    search_all_optimal,
    search_all_optimal_collect,
    search_single_optimal,
)
from tests.algorithms.graph_helpers import (
    bounded_knight_graph,
    grid_graph,
    manhattan_to,
    path_cost,
    random_graph,
    to_nx,
    weighted_knight_moves,
    weighted_successors,
    zero,
)


def _all_paths(graph, start, goal):
    result = search_all_optimal(
        start, weighted_successors(graph), zero, lambda n: n == goal
    )
    assert result is not None
    paths, cost = result
    return [tuple(p) for p in paths], cost


def test_two_equal_branches(square2):
    paths, cost = _all_paths(square2, "A", "C")
    assert cost == 2
    assert sorted(paths) == [("A", "B", "C"), ("A", "D", "C")]


def test_unequal_branches_keep_only_cheapest(square1):
    paths, cost = _all_paths(square1, "A", "C")
    assert cost == 2
    assert paths == [("A", "B", "C")]


def test_five_optimal_paths_match_networkx(graph1):
    paths, cost = _all_paths(graph1, "A", "D")
    assert cost == 4
    expected = {
        tuple(p) for p in nx.all_shortest_paths(to_nx(graph1), "A", "D", weight="weight")
    }
    assert len(expected) == 5
    assert len(paths) == len(set(paths))
    assert set(paths) == expected


def test_cheaper_route_replaces_parent_set():
    """D is first reached at cost 3 from two parents, then at cost 2 via E."""
    graph = {
        "A": {"B": 1, "C": 1, "E": 1},
        "B": {"D": 2},
        "C": {"D": 2},
        "E": {"D": 1},
        "D": {},
    }
    paths, cost = _all_paths(graph, "A", "D")
    assert cost == 2
    assert paths == [("A", "E", "D")]


def test_equal_cost_parents_do_not_requeue(graph1):
    expanded = Counter()

    def successors(node):
        expanded[node] += 1
        return list(graph1[node].items())

    paths, cost = search_all_optimal("A", successors, zero, lambda n: n == "D")
    assert cost == 4
    assert len(list(paths)) == 5
    # C is reached twice and D three times at their optimal cost
    assert sorted(expanded) == ["A", "B", "C", "D", "E", "F"]
    assert set(expanded.values()) == {1}


def test_stale_entries_are_not_expanded():
    # X is queued at cost 3, then improved to 2 through A. The stale entry
    # is popped before the goal is settled at cost 4.
    #
    #   S──[3]──►X──[2]──►G
    #   │        ▲
    #  [1]      [1]
    #   └───►A───┘
    graph = {"S": {"X": 3, "A": 1}, "A": {"X": 1}, "X": {"G": 2}, "G": {}}
    expanded = Counter()

    def successors(node):
        expanded[node] += 1
        return list(graph[node].items())

    paths, cost = search_all_optimal("S", successors, zero, lambda n: n == "G")
    assert cost == 4
    assert [tuple(p) for p in paths] == [("S", "A", "X", "G")]
    assert expanded["X"] == 1


def test_multiple_sinks():
    graph = {"A": {"B": 1, "C": 2, "X": 5}, "B": {"D": 1}, "C": {}, "D": {}, "X": {}}
    result = search_all_optimal(
        "A", weighted_successors(graph), zero, lambda n: n in ("C", "D", "X")
    )
    paths, cost = result
    assert cost == 2
    assert sorted(tuple(p) for p in paths) == [("A", "B", "D"), ("A", "C")]


def test_start_is_goal():
    paths, cost = _all_paths({"A": {"B": 1}, "B": {}}, "A", "A")
    assert cost == 0
    assert paths == [("A",)]


def test_no_path_returns_none(square1):
    assert (
        search_all_optimal("A", weighted_successors(square1), zero, lambda n: n == "Z")
        is None
    )
    assert (
        search_all_optimal_collect(
            "A", weighted_successors(square1), zero, lambda n: n == "Z"
        )
        is None
    )


def test_iterator_stays_exhausted(square2):
    paths, _ = search_all_optimal(
        "A", weighted_successors(square2), zero, lambda n: n == "C"
    )
    assert isinstance(paths, AllOptimalPaths)
    assert iter(paths) is paths
    assert len(list(paths)) == 2
    with pytest.raises(StopIteration):
        next(paths)
    with pytest.raises(StopIteration):
        next(paths)
    assert list(paths) == []


def test_zero_cost_cycle_is_finite(zero_cycle_graph):
    paths, cost = _all_paths(zero_cycle_graph, "A", "G")
    assert cost == 2
    assert sorted(paths) == [("A", "C", "D", "G"), ("A", "C", "G")]


def test_zero_cost_edge_back_to_start():
    graph = {"A": {"B": 0}, "B": {"A": 0, "G": 1}, "G": {}}
    paths, cost = _all_paths(graph, "A", "G")
    assert cost == 1
    assert paths == [("A", "B", "G")]


def test_enumeration_is_lazy():
    """2**20 optimal paths through a ladder; only a few are ever built."""
    width, depth = 2, 20

    def successors(node):
        layer, _ = node
        if layer == depth:
            return [(("end", 0), 1)]
        return [((layer + 1, i), 1) for i in range(width)]

    result = search_all_optimal(
        (0, 0), successors, zero, lambda n: n == ("end", 0)
    )
    paths, cost = result
    assert cost == depth + 1
    first = [tuple(p) for p in islice(paths, 100)]
    assert len(first) == len(set(first)) == 100
    assert all(len(p) == depth + 2 for p in first)


def test_long_chain_through_search():
    depth = 5000
    paths, cost = search_all_optimal(
        0, lambda n: [(n + 1, 1)], zero, lambda n: n == depth
    )
    assert cost == depth
    assert list(paths) == [list(range(depth + 1))]


class _CountingIndex(int):
    """Registry index that counts how often it is hashed."""

    hashes = 0

    def __hash__(self):
        _CountingIndex.hashes += 1
        return int.__hash__(self)


def test_long_chain_enumeration_is_linear():
    depth = 5000
    nodes = [f"n{i}" for i in range(depth + 1)]
    parents = [[]] + [[_CountingIndex(i - 1)] for i in range(1, depth + 1)]
    paths = AllOptimalPaths([_CountingIndex(depth)], nodes, parents)

    _CountingIndex.hashes = 0
    assert list(paths) == [nodes]
    # A bounded number of on-path set operations per level
    assert _CountingIndex.hashes <= 4 * depth


def test_knight_all_optimal_paths():
    goal = (4, 6)
    paths, cost = search_all_optimal(
        (1, 1),
        weighted_knight_moves,
        lambda p: manhattan_to(goal)(p) // 3,
        lambda p: p == goal,
    )
    assert cost == 4
    found = {tuple(p) for p in paths}
    board = to_nx(bounded_knight_graph(-10, 15))
    expected = {tuple(p) for p in nx.all_shortest_paths(board, (1, 1), goal)}
    assert found == expected


def test_collect_returns_list(graph1):
    paths, cost = search_all_optimal_collect(
        "A", weighted_successors(graph1), zero, lambda n: n == "D"
    )
    assert isinstance(paths, list)
    assert len(paths) == 5
    assert cost == 4
    assert all(path_cost(graph1, p) == 4 for p in paths)


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx_on_random_graphs(seed):
    graph = random_graph(seed, max_cost=3)
    g = to_nx(graph)
    for target in (3, 11, 23):
        result = search_all_optimal(
            0, weighted_successors(graph), zero, lambda n, t=target: n == t
        )
        single = search_single_optimal(
            0, weighted_successors(graph), zero, lambda n, t=target: n == t
        )
        if not nx.has_path(g, 0, target):
            assert result is None and single is None
            continue
        paths, cost = result
        paths = [tuple(p) for p in paths]
        assert cost == single[1]
        assert len(paths) == len(set(paths)) >= 1
        assert all(path_cost(graph, p) == cost for p in paths)
        assert set(paths) == {
            tuple(p) for p in nx.all_shortest_paths(g, 0, target, weight="weight")
        }


@pytest.mark.parametrize("seed", range(3))
def test_heuristic_grid_matches_networkx(seed):
    graph = grid_graph(seed, max_cost=2)
    goal = (5, 6)
    paths, cost = search_all_optimal(
        (0, 0), weighted_successors(graph), manhattan_to(goal), lambda p: p == goal
    )
    expected = {
        tuple(p)
        for p in nx.all_shortest_paths(to_nx(graph), (0, 0), goal, weight="weight")
    }
    assert {tuple(p) for p in paths} == expected
    assert cost == nx.dijkstra_path_length(to_nx(graph), (0, 0), goal)

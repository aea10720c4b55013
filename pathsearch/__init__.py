"""pathsearch: graph search primitives for implicit graphs.

An implicit graph is never stored: it is described by a function returning the
neighbors of a node (with move costs for weighted searches). Nodes can be any
hashable values, or any values at all when a ``key`` function is supplied.

Primary API:
    search_single_optimal() - One optimal path with an admissible heuristic (A*)
    search_all_optimal() - Every optimal path, as a lazy iterator
    breadth_first() - Fewest-hops path from a set of start nodes
    shortest_loop() - Shortest path leading back into the start set
    bidirectional() - Meet-in-the-middle BFS between two node sets
    reachable_from() - Lazy BFS enumeration of reachable nodes

Example:
    from pathsearch import breadth_first

    def knight(pos):
        x, y = pos
        return [(x + 1, y + 2), (x + 1, y - 2), (x - 1, y + 2), (x - 1, y - 2),
                (x + 2, y + 1), (x + 2, y - 1), (x - 2, y + 1), (x - 2, y - 1)]

    path = breadth_first([(1, 1)], knight, lambda p: p == (4, 6))
    assert len(path) == 5
"""

from __future__ import annotations

from pathsearch import logging
from pathsearch._version import __version__
from pathsearch.algorithms.astar import (
    AllOptimalPaths,
    search_all_optimal,
    search_all_optimal_collect,
    search_single_optimal,
)
from pathsearch.algorithms.base import NO_PARENT, Cost
from pathsearch.algorithms.bfs import (
    ReachableNodes,
    bidirectional,
    breadth_first,
    reachable_from,
    shortest_loop,
)
from pathsearch.algorithms.registry import NodeRegistry
from pathsearch.config import SEARCH_CONFIG, SearchConfig

__all__ = [
    # Version
    "__version__",
    # Heuristic searches
    "search_single_optimal",
    "search_all_optimal",
    "search_all_optimal_collect",
    "AllOptimalPaths",
    # Breadth-first searches
    "breadth_first",
    "shortest_loop",
    "bidirectional",
    "reachable_from",
    "ReachableNodes",
    # Building blocks
    "NodeRegistry",
    "NO_PARENT",
    "Cost",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]

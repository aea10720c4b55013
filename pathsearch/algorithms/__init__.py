"""Search algorithms over implicit graphs."""

from pathsearch.algorithms.astar import (
    AllOptimalPaths,
    search_all_optimal,
    search_all_optimal_collect,
    search_single_optimal,
)
from pathsearch.algorithms.bfs import (
    ReachableNodes,
    bidirectional,
    breadth_first,
    reachable_from,
    shortest_loop,
)
from pathsearch.algorithms.frontier import Frontier, FrontierEntry
from pathsearch.algorithms.paths import reverse_path
from pathsearch.algorithms.registry import NodeRegistry

__all__ = [
    "AllOptimalPaths",
    "Frontier",
    "FrontierEntry",
    "NodeRegistry",
    "ReachableNodes",
    "bidirectional",
    "breadth_first",
    "reachable_from",
    "reverse_path",
    "search_all_optimal",
    "search_all_optimal_collect",
    "search_single_optimal",
    "shortest_loop",
]

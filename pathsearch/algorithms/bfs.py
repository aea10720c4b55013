"""Breadth-first searches over implicit unit-cost graphs.

All variants use a ``NodeRegistry`` as both visited set and queue: nodes are
appended in discovery order and expanded by scanning indices in increasing
order, which is BFS order when every move costs one hop.

Start and end nodes are given as iterables (several simultaneous starts are
allowed). Wrap a single node in a list: ``breadth_first([(1, 1)], ...)``.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Tuple

from pathsearch.algorithms.base import (
    NO_PARENT,
    GoalPredicate,
    KeyFunc,
    N,
    Successors,
    resolve_key,
)
from pathsearch.algorithms.paths import reverse_path
from pathsearch.algorithms.registry import NodeRegistry
from pathsearch.config import SEARCH_CONFIG, SearchConfig
from pathsearch.logging import get_logger

logger = get_logger(__name__)


def _parent_of(parent: int) -> int:
    return parent


def _bfs_core(
    starts: List[N],
    successors_fn: Successors,
    goal_fn: GoalPredicate,
    check_first: bool,
    key: Optional[KeyFunc],
    config: Optional[SearchConfig],
) -> Optional[List[N]]:
    """Shared BFS loop.

    The goal is tested on each discovered successor. When ``check_first`` is
    True the start nodes are tested too, before any expansion.
    """
    cfg = config or SEARCH_CONFIG
    if check_first:
        for start in starts:
            if goal_fn(start):
                return [start]

    parents: NodeRegistry[N, int] = NodeRegistry(key)
    for start in starts:
        parents.insert(start, NO_PARENT)

    i = 0
    while i < len(parents):
        node = parents.node(i)
        for successor in successors_fn(node):
            if goal_fn(successor):
                path = reverse_path(parents, _parent_of, i)
                path.append(successor)
                logger.debug(
                    "BFS reached goal at depth %d after %d expansions",
                    len(path) - 1,
                    i + 1,
                )
                return path
            parents.insert(successor, i)
        i += 1
        if cfg.should_report(i):
            logger.debug(
                "BFS progress: %d expansions, %d nodes discovered", i, len(parents)
            )

    logger.debug("BFS exhausted %d reachable nodes without reaching a goal", i)
    return None


def breadth_first(
    start_set: Iterable[N],
    successors_fn: Successors,
    goal_fn: GoalPredicate,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[List[N]]:
    """Compute a shortest (fewest hops) path to a node satisfying ``goal_fn``.

    Args:
        start_set: Start nodes. The path starts at one of them.
        successors_fn: Returns the neighbors of a node.
        goal_fn: Returns True for goal nodes.
        key: Optional key function defining node identity.
        config: Optional configuration overriding ``SEARCH_CONFIG``.

    Returns:
        The path, start and goal included; ``[start]`` if a start node is
        already a goal; None if no goal is reachable.
    """
    return _bfs_core(list(start_set), successors_fn, goal_fn, True, key, config)


def shortest_loop(
    start_set: Iterable[N],
    successors_fn: Successors,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[List[N]]:
    """Compute one of the shortest loops leading back into ``start_set``.

    The returned path starts at a start node and ends at a start node (the
    same one when ``start_set`` holds a single node). Apart from that, no node
    appears twice. A self-loop yields a two-element path ``[s, s]``.

    Returns:
        The loop, or None if no start node can be reached again.
    """
    starts = list(start_set)
    node_key = resolve_key(key)
    start_keys = {node_key(start) for start in starts}

    def back_home(node: N) -> bool:
        return node_key(node) in start_keys

    return _bfs_core(starts, successors_fn, back_home, False, key, config)


def _expand_layer(
    registry: NodeRegistry[N, int],
    other: NodeRegistry[N, int],
    cursor: int,
    neighbors_fn: Successors,
) -> Tuple[int, Optional[N]]:
    """Expand every registered but unexpanded entry of ``registry``.

    Stops at the first neighbor already known to ``other``.

    Returns:
        ``(cursor, meeting_node)``; ``meeting_node`` is None when the layer
        completed without touching ``other``.
    """
    for _ in range(len(registry) - cursor):
        node = registry.node(cursor)
        for neighbor in neighbors_fn(node):
            registry.insert(neighbor, cursor)
            if neighbor in other:
                return cursor, neighbor
        cursor += 1
    return cursor, None


def bidirectional(
    start_set: Iterable[N],
    end_set: Iterable[N],
    successors_fn: Successors,
    predecessors_fn: Successors,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[List[N]]:
    """Compute a short path between the start and end sets searching from both ends.

    A forward search from ``start_set`` (following ``successors_fn``) and a
    backward search from ``end_set`` (following ``predecessors_fn``) alternate
    full layers until one discovers a node the other already knows.

    The first overlap found is accepted as the meeting point; no better one
    is looked for. Layers alternate in full, so the two registries never
    get more than one layer apart and the joined path has the same number
    of hops as the one ``breadth_first`` would return.

    Args:
        start_set: Start nodes.
        end_set: End nodes.
        successors_fn: Returns the successors of a node.
        predecessors_fn: Returns the predecessors of a node. For an undirected
            graph pass the same function as ``successors_fn``.
        key: Optional key function defining node identity.
        config: Optional configuration overriding ``SEARCH_CONFIG``.

    Returns:
        The path from a start node to an end node, both included, or None.
    """
    cfg = config or SEARCH_CONFIG
    forward: NodeRegistry[N, int] = NodeRegistry(key)
    for start in start_set:
        forward.insert(start, NO_PARENT)
    backward: NodeRegistry[N, int] = NodeRegistry(key)
    for end in end_set:
        backward.insert(end, NO_PARENT)

    middle: Optional[N] = next((node for node in forward if node in backward), None)
    i_forward = 0
    i_backward = 0
    layers = 0
    while middle is None:
        expanded = i_forward + i_backward
        i_forward, middle = _expand_layer(forward, backward, i_forward, successors_fn)
        if middle is not None:
            break
        i_backward, middle = _expand_layer(
            backward, forward, i_backward, predecessors_fn
        )
        if middle is not None:
            break
        if i_forward == len(forward) and i_backward == len(backward):
            logger.debug(
                "Bidirectional BFS found no path (%d forward, %d backward nodes)",
                len(forward),
                len(backward),
            )
            return None
        layers += 1
        if cfg.crossed_interval(expanded, i_forward + i_backward):
            logger.debug(
                "Bidirectional BFS progress: %d layers, %d forward, %d backward nodes",
                layers,
                len(forward),
                len(backward),
            )

    index = forward.index_of(middle)
    path = reverse_path(forward, _parent_of, index)
    parent = backward.value(backward.index_of(middle))
    while parent != NO_PARENT:
        node, parent = backward.get_index(parent)
        path.append(node)
    logger.debug(
        "Bidirectional BFS met after %d layers, path has %d nodes", layers, len(path)
    )
    return path


class ReachableNodes(Generic[N]):
    """Iterator over the nodes reachable from a start node, in BFS order.

    Each step expands the next registered node, registers its unseen
    successors and yields it. On an infinite graph the iteration never ends,
    but every prefix is well defined. Once exhausted it stays exhausted.
    """

    __slots__ = ("_seen", "_successors", "_cursor")

    def __init__(
        self, start: N, successors_fn: Successors, key: Optional[KeyFunc] = None
    ) -> None:
        self._seen: NodeRegistry[N, None] = NodeRegistry(key)
        self._seen.insert(start, None)
        self._successors = successors_fn
        self._cursor = 0

    def __iter__(self) -> ReachableNodes[N]:
        return self

    def __next__(self) -> N:
        if self._cursor >= len(self._seen):
            raise StopIteration
        node = self._seen.node(self._cursor)
        for successor in self._successors(node):
            self._seen.insert(successor, None)
        self._cursor += 1
        return node

    def remaining_nodes_low_bound(self) -> int:
        """Return a lower bound on the number of nodes still to be yielded.

        More nodes may be discovered as the iteration proceeds.
        """
        return len(self._seen) - self._cursor


def reachable_from(
    start: N, successors_fn: Successors, key: Optional[KeyFunc] = None
) -> ReachableNodes[N]:
    """Visit every node reachable from ``start`` in BFS order, lazily.

    ``start`` comes first; nodes are then yielded in the order successors are
    returned by ``successors_fn``.

    Example:
        >>> list(reachable_from(3, lambda _: range(1, 6)))
        [3, 1, 2, 4, 5]
    """
    return ReachableNodes(start, successors_fn, key)

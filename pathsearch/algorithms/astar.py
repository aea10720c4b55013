"""Heuristic (A*) optimal-path searches over implicit graphs.

Implements single optimal path search and all-optimal-paths search. Both run
over a graph given only by a successor function, keep discovered nodes in a
``NodeRegistry`` and drive exploration with a ``Frontier`` of
``(estimated_cost, cost, index)`` entries.

Notes:
    The heuristic must never overestimate the remaining cost to a goal.
    An inadmissible heuristic may produce non-optimal results; this is not
    detected. Edge costs must be non-negative.

    The goal is a predicate rather than a fixed node, so goal membership may
    depend on anything the caller likes.

Example:
    Knight moves on an unbounded board, from (1, 1) to (4, 6)::

        GOAL = (4, 6)

        def moves(pos):
            x, y = pos
            return [((x + dx, y + dy), 1) for dx, dy in KNIGHT_DELTAS]

        path, cost = search_single_optimal(
            (1, 1),
            moves,
            lambda p: (abs(p[0] - GOAL[0]) + abs(p[1] - GOAL[1])) // 3,
            lambda p: p == GOAL,
        )
        assert cost == 4 and len(path) == 5
"""

from __future__ import annotations

from operator import itemgetter
from typing import Generic, List, Optional, Set, Tuple

from pathsearch.algorithms.base import (
    NO_PARENT,
    START_INDEX,
    Cost,
    GoalPredicate,
    Heuristic,
    KeyFunc,
    N,
    WeightedSuccessors,
)
from pathsearch.algorithms.frontier import Frontier
from pathsearch.algorithms.paths import reverse_path
from pathsearch.algorithms.registry import NodeRegistry
from pathsearch.config import SEARCH_CONFIG, SearchConfig
from pathsearch.logging import get_logger

logger = get_logger(__name__)

_parent_of = itemgetter(0)


def search_single_optimal(
    start: N,
    successors_fn: WeightedSuccessors,
    heuristic_fn: Heuristic,
    goal_fn: GoalPredicate,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Tuple[List[N], Cost]]:
    """Compute one optimal path from ``start`` to a node satisfying ``goal_fn``.

    Args:
        start: Start node.
        successors_fn: Returns ``(neighbor, move_cost)`` pairs for a node.
            Costs must be non-negative.
        heuristic_fn: Lower bound of the remaining cost from a node to a goal.
        goal_fn: Returns True for goal nodes. Evaluated when a node is popped,
            before it is expanded.
        key: Optional key function defining node identity.
        config: Optional configuration overriding ``SEARCH_CONFIG``.

    Returns:
        ``(path, cost)`` where ``path`` runs from ``start`` to the goal node,
        both included, and ``cost`` is its total cost; None if no goal node is
        reachable. A node never appears twice in the path.
    """
    cfg = config or SEARCH_CONFIG
    parents: NodeRegistry[N, Tuple[int, Cost]] = NodeRegistry(key)
    parents.insert(start, (NO_PARENT, 0))
    frontier = Frontier()
    frontier.push(0, 0, START_INDEX)
    expansions = 0

    while frontier:
        _, cost, index = frontier.pop()
        node, (_, best_cost) = parents.get_index(index)
        # A cheaper route to this node was recorded after this entry was queued
        if cost > best_cost:
            continue
        if goal_fn(node):
            path = reverse_path(parents, _parent_of, index)
            logger.debug(
                "A* reached goal at cost %s after %d expansions (%d nodes discovered)",
                cost,
                expansions,
                len(parents),
            )
            return path, cost

        expansions += 1
        if cfg.should_report(expansions):
            logger.debug(
                "A* progress: %d expansions, %d nodes discovered, %d queued",
                expansions,
                len(parents),
                len(frontier),
            )

        for successor, move_cost in successors_fn(node):
            new_cost = cost + move_cost
            n, inserted = parents.insert(successor, (index, new_cost))
            if not inserted:
                if parents.value(n)[1] > new_cost:
                    parents.set_value(n, (index, new_cost))
                else:
                    continue
            frontier.push(new_cost + heuristic_fn(parents.node(n)), new_cost, n)

    logger.debug(
        "A* found no path after %d expansions (%d nodes discovered)",
        expansions,
        len(parents),
    )
    return None


def search_all_optimal(
    start: N,
    successors_fn: WeightedSuccessors,
    heuristic_fn: Heuristic,
    goal_fn: GoalPredicate,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Tuple[AllOptimalPaths[N], Cost]]:
    """Compute all optimal paths from ``start`` to nodes satisfying ``goal_fn``.

    Whereas ``search_single_optimal`` returns a single optimal path, this
    returns every one of them, lazily. Paths may end at different goal nodes
    but all share the same (minimal) cost.

    Each registry entry keeps the set of parent indices reaching it at its
    best known cost. A strictly cheaper route replaces the set; an equally
    cheap one joins it without queuing the node again. Once a goal has been
    popped, the search stops as soon as an entry with a larger estimated cost
    reaches the top of the frontier.

    Args:
        start: Start node.
        successors_fn: Returns ``(neighbor, move_cost)`` pairs for a node.
            Costs must be non-negative.
        heuristic_fn: Lower bound of the remaining cost from a node to a goal.
        goal_fn: Returns True for goal nodes.
        key: Optional key function defining node identity.
        config: Optional configuration overriding ``SEARCH_CONFIG``.

    Returns:
        ``(paths, cost)`` where ``paths`` is an ``AllOptimalPaths`` iterator and
        ``cost`` the common cost of every path it yields; None if no goal node
        is reachable.
    """
    cfg = config or SEARCH_CONFIG
    parents: NodeRegistry[N, Tuple[Set[int], Cost]] = NodeRegistry(key)
    parents.insert(start, (set(), 0))
    frontier = Frontier()
    frontier.push(0, 0, START_INDEX)
    min_cost: Optional[Cost] = None
    sinks: Set[int] = set()
    expansions = 0

    while frontier:
        estimated_cost, cost, index = frontier.pop()
        if min_cost is not None and estimated_cost > min_cost:
            break
        node, (_, best_cost) = parents.get_index(index)
        if cost > best_cost:
            continue
        if goal_fn(node):
            if min_cost is None or cost < min_cost:
                min_cost = cost
                sinks = {index}
            elif cost == min_cost:
                sinks.add(index)

        expansions += 1
        if cfg.should_report(expansions):
            logger.debug(
                "A* (all paths) progress: %d expansions, %d nodes discovered, %d queued",
                expansions,
                len(parents),
                len(frontier),
            )

        for successor, move_cost in successors_fn(node):
            new_cost = cost + move_cost
            n, inserted = parents.insert(successor, ({index}, new_cost))
            if not inserted:
                # The start node is the root of every path and never gets parents
                if n == START_INDEX:
                    continue
                parent_set, recorded = parents.value(n)
                if recorded > new_cost:
                    parents.set_value(n, ({index}, new_cost))
                else:
                    if recorded == new_cost:
                        # Same cost: already queued, only record the extra parent
                        parent_set.add(index)
                    continue
            frontier.push(new_cost + heuristic_fn(parents.node(n)), new_cost, n)

    if min_cost is None:
        logger.debug(
            "A* (all paths) found no path after %d expansions (%d nodes discovered)",
            expansions,
            len(parents),
        )
        return None

    logger.debug(
        "A* (all paths) reached %d goal node(s) at cost %s after %d expansions",
        len(sinks),
        min_cost,
        expansions,
    )
    solution = AllOptimalPaths(
        sinks=list(sinks),
        nodes=parents.nodes(),
        parents=[list(parent_set) for parent_set, _ in parents.values()],
    )
    return solution, min_cost


def search_all_optimal_collect(
    start: N,
    successors_fn: WeightedSuccessors,
    heuristic_fn: Heuristic,
    goal_fn: GoalPredicate,
    key: Optional[KeyFunc] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Tuple[List[List[N]], Cost]]:
    """Like ``search_all_optimal`` but collect every path into a list.

    Warning:
        The number of optimal paths can grow combinatorially with the graph
        size. Prefer iterating over ``search_all_optimal`` results.
    """
    result = search_all_optimal(
        start, successors_fn, heuristic_fn, goal_fn, key=key, config=config
    )
    if result is None:
        return None
    solution, cost = result
    return list(solution), cost


class AllOptimalPaths(Generic[N]):
    """Iterator over every root-to-sink path of a parent DAG.

    Built by ``search_all_optimal``. ``nodes[i]`` is the node registered at index
    ``i`` and ``parents[i]`` the indices of its optimal predecessors. Index 0 is
    the start node. ``sinks`` are the indices of goal nodes reached at the
    optimal cost.

    The iterator keeps a stack of choice lists. Level 0 lists the remaining
    sinks, level ``k`` the remaining parents of the node selected (last element)
    at level ``k - 1``. A path is read off the stack bottom-up once the start
    node is selected. Advancing drops exhausted trailing levels and discards
    the selection of the new top level.

    Paths come out in no particular order, each exactly once. The iterator is
    single-pass and, once exhausted, stays exhausted.
    """

    __slots__ = ("_sinks", "_nodes", "_parents", "_current", "_on_path", "_terminated")

    def __init__(
        self, sinks: List[int], nodes: List[N], parents: List[List[int]]
    ) -> None:
        self._sinks = sinks
        self._nodes = nodes
        self._parents = parents
        self._current: List[List[int]] = []
        # Indices currently selected on the stack, one per level
        self._on_path: Set[int] = set()
        self._terminated = not sinks

    def __iter__(self) -> AllOptimalPaths[N]:
        return self

    def __next__(self) -> List[N]:
        if self._terminated:
            raise StopIteration
        while not self._complete():
            # Dead end: every parent of the top node is already on the path
            self._advance()
            if not self._current:
                self._terminated = True
                raise StopIteration
        path = [self._nodes[choices[-1]] for choices in reversed(self._current)]
        self._advance()
        self._terminated = not self._current
        return path

    def _complete(self) -> bool:
        """Push choice lists until the start node is selected.

        Returns False when a level has no usable choice left.
        """
        while True:
            if not self._current:
                choices = list(self._sinks)
            else:
                last = self._current[-1][-1]
                if last == START_INDEX:
                    return True
                # Zero-cost cycles may link a node back to one already on the path
                choices = [p for p in self._parents[last] if p not in self._on_path]
            if not choices:
                return False
            self._current.append(choices)
            self._on_path.add(choices[-1])

    def _advance(self) -> None:
        while self._current and len(self._current[-1]) == 1:
            self._on_path.discard(self._current.pop()[-1])
        if self._current:
            top = self._current[-1]
            self._on_path.discard(top.pop())
            self._on_path.add(top[-1])

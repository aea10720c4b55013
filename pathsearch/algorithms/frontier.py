"""Priority frontier for heuristic searches."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, NamedTuple, Tuple

from pathsearch.algorithms.base import Cost


class FrontierEntry(NamedTuple):
    """A queued candidate: registry ``index`` reached at ``cost``.

    ``estimated_cost`` is ``cost`` plus the heuristic of the node. An entry is
    stale when the registry records a cost lower than ``cost`` for ``index``.
    """

    estimated_cost: Cost
    cost: Cost
    index: int


class Frontier:
    """Binary min-heap of ``FrontierEntry`` items.

    Entries pop in ascending ``estimated_cost``; among equal estimates the one
    with the larger ``cost`` pops first since it is likely closer to a goal.
    Stale entries are never removed eagerly, the caller discards them on pop.
    """

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        # Stored as (estimated_cost, -cost, index) so that heapq gives the tie-break
        self._heap: List[Tuple[Cost, Cost, int]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, estimated_cost: Cost, cost: Cost, index: int) -> None:
        heappush(self._heap, (estimated_cost, -cost, index))

    def pop(self) -> FrontierEntry:
        """Remove and return the best entry. Raises IndexError when empty."""
        estimated_cost, neg_cost, index = heappop(self._heap)
        return FrontierEntry(estimated_cost, -neg_cost, index)

    def peek(self) -> FrontierEntry:
        """Return the best entry without removing it. Raises IndexError when empty."""
        estimated_cost, neg_cost, index = self._heap[0]
        return FrontierEntry(estimated_cost, -neg_cost, index)

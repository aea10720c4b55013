from __future__ import annotations

from typing import Any, Callable, List

from pathsearch.algorithms.base import NO_PARENT, N
from pathsearch.algorithms.registry import NodeRegistry


def reverse_path(
    registry: NodeRegistry[N, Any],
    parent_of: Callable[[Any], int],
    index: int,
) -> List[N]:
    """
    Rebuild the path ending at registry entry ``index``.

    Follows parent references (extracted from each stored value by ``parent_of``)
    until ``NO_PARENT`` is reached, then reverses the collected nodes.

    Args:
        registry: Registry populated by a search.
        parent_of: Extracts the parent index from a stored value.
        index: Index of the last node of the path.

    Returns:
        Nodes from the root to the node at ``index``, both included.
    """
    path: List[N] = []
    while index != NO_PARENT:
        node, value = registry.get_index(index)
        path.append(node)
        index = parent_of(value)
    path.reverse()
    return path

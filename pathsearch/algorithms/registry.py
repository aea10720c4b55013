"""Insertion-ordered node registry.

A ``NodeRegistry`` is the single data structure every search in this package is
built around. It maps each discovered node to a per-search value (best cost,
parent index, set of parent indices, ...) and assigns each node a stable integer
index in discovery order. Parents are referenced by index rather than by node,
which keeps reconstruction cheap and avoids copying nodes around.

For breadth-first searches the registry doubles as the FIFO queue: entries are
appended in discovery order, so scanning indices in increasing order visits
nodes in non-decreasing depth.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from pathsearch.algorithms.base import KeyFunc, N, resolve_key

V = TypeVar("V")


class NodeRegistry(Generic[N, V]):
    """Append-only mapping from nodes to values, addressable by index.

    The first node registered for a given key wins; later equal nodes never
    replace it, and an index, once assigned, never changes.

    Args:
        key: Optional key function giving node identity. Defaults to the node itself.
    """

    __slots__ = ("_key", "_index", "_nodes", "_values")

    def __init__(self, key: Optional[KeyFunc] = None) -> None:
        self._key = resolve_key(key)
        self._index: Dict[Hashable, int] = {}
        self._nodes: List[N] = []
        self._values: List[V] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return self._key(node) in self._index

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._nodes)})"

    def key_of(self, node: N) -> Hashable:
        """Return the identity key used for ``node``."""
        return self._key(node)

    def index_of(self, node: N) -> Optional[int]:
        """Return the index of ``node``, or None if it was never registered."""
        return self._index.get(self._key(node))

    def insert(self, node: N, value: V) -> Tuple[int, bool]:
        """Register ``node`` with ``value`` unless it is already known.

        Returns:
            ``(index, inserted)``. When the node was already registered, its
            existing index is returned, ``inserted`` is False and the stored
            value is left untouched.
        """
        k = self._key(node)
        index = self._index.get(k)
        if index is not None:
            return index, False
        index = len(self._nodes)
        self._index[k] = index
        self._nodes.append(node)
        self._values.append(value)
        return index, True

    def node(self, index: int) -> N:
        return self._nodes[index]

    def value(self, index: int) -> V:
        return self._values[index]

    def set_value(self, index: int, value: V) -> None:
        self._values[index] = value

    def get_index(self, index: int) -> Tuple[N, V]:
        """Return the ``(node, value)`` pair stored at ``index``."""
        return self._nodes[index], self._values[index]

    def nodes(self) -> List[N]:
        """Return a copy of the registered nodes in index order."""
        return list(self._nodes)

    def values(self) -> List[V]:
        """Return a copy of the stored values in index order."""
        return list(self._values)

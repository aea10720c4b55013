from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Callable, Hashable, Iterable, Optional, Tuple, TypeVar, Union

#: A node of the implicit graph. Only equality and hashing are required
#: (or a key function providing them, see ``KeyFunc``).
N = TypeVar("N")

#: Represents a numeric cost (edge weight, accumulated path cost, heuristic estimate).
#: Must be non-negative for edges. Python ints never overflow; float overflow
#: saturates to ``inf`` and is left to the caller.
Cost = Union[int, float, Fraction, Decimal]

#: Parent reference of a root entry in a node registry. Registry indices are
#: always non-negative, so this value never designates a stored entry.
NO_PARENT = -1

#: Registry index of the start node in the heuristic searches.
START_INDEX = 0

#: Maps a node to the hashable identity used by a node registry. Two nodes with
#: equal keys are the same node as far as the searches are concerned.
KeyFunc = Callable[[N], Hashable]

#: ``node -> iterable of (neighbor, move_cost)``
WeightedSuccessors = Callable[[N], Iterable[Tuple[N, Cost]]]

#: ``node -> iterable of neighbor`` (every move costs one hop)
Successors = Callable[[N], Iterable[N]]

#: ``node -> lower bound of the remaining cost to a goal``
Heuristic = Callable[[N], Cost]

#: ``node -> True if the node is a goal``
GoalPredicate = Callable[[N], bool]


def identity_key(node: N) -> Hashable:
    """Default key: the node is its own identity."""
    return node


def resolve_key(key: Optional[KeyFunc]) -> KeyFunc:
    """Return ``key`` or the identity key when ``key`` is None."""
    return identity_key if key is None else key

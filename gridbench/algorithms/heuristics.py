"""Distance estimators for informed search.

A heuristic is only valid together with the movement cost model it was
chosen for. gridbench charges 1 per move in both neighbor models, so:

- 4-connected: Manhattan distance is admissible and consistent.
- 8-connected: a diagonal step also costs 1, which makes Manhattan an
  overestimate; Chebyshev distance is the matching exact lower bound.

Changing the cost model (octile costs, weighted terrain) requires changing
`heuristic_for` as well.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from .types import NeighborModel

Heuristic = Callable[[Sequence[int], Sequence[int]], int]


def manhattan(a: Sequence[int], b: Sequence[int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev(a: Sequence[int], b: Sequence[int]) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def zero(a: Sequence[int], b: Sequence[int]) -> int:
    return 0


_BY_MODEL: Dict[NeighborModel, Heuristic] = {
    NeighborModel.FOUR: manhattan,
    NeighborModel.EIGHT: chebyshev,
}


def heuristic_for(model: NeighborModel) -> Heuristic:
    return _BY_MODEL[NeighborModel(model)]

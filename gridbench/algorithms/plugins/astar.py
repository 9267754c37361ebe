from __future__ import annotations

from typing import Sequence

from ..heuristics import heuristic_for
from ..types import AlgorithmResult, AlgorithmSpec, Grid, RunOptions
from ._priority import priority_search

ALGORITHM = AlgorithmSpec(
    id="astar",
    name="A*",
    description="A* with Manhattan (4-connected) or Chebyshev (8-connected) heuristic.",
)


def run(grid: Grid, start: Sequence[int], goal: Sequence[int], options: RunOptions) -> AlgorithmResult:
    # The heuristic must match the move set or the first goal pop is no longer optimal.
    h = heuristic_for(options.neighbor_model)
    return priority_search(grid, start, goal, options, h)

from __future__ import annotations

from typing import Sequence

from ..heuristics import zero
from ..types import AlgorithmResult, AlgorithmSpec, Grid, RunOptions
from ._priority import priority_search

ALGORITHM = AlgorithmSpec(
    id="dijkstra",
    name="Dijkstra",
    description="Uniform-cost search (A* with h = 0); same path length as BFS.",
)


def run(grid: Grid, start: Sequence[int], goal: Sequence[int], options: RunOptions) -> AlgorithmResult:
    return priority_search(grid, start, goal, options, zero)

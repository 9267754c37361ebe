from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence

from .plugins import astar, bfs, dfs, dijkstra
from .types import AlgorithmResult, AlgorithmSpec, Grid, RunOptions


class Strategy(str, Enum):
    """The closed set of search strategies, in report order."""

    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"


RunFn = Callable[[Grid, Sequence[int], Sequence[int], RunOptions], AlgorithmResult]


@dataclass(frozen=True)
class LoadedAlgorithm:
    spec: AlgorithmSpec
    run: RunFn


_MODULES = {
    Strategy.BFS: bfs,
    Strategy.DFS: dfs,
    Strategy.ASTAR: astar,
    Strategy.DIJKSTRA: dijkstra,
}


def load_plugins() -> Dict[Strategy, LoadedAlgorithm]:
    """Build the strategy registry.

    Each strategy module must define:
      - ALGORITHM: AlgorithmSpec whose id matches its Strategy value
      - run(grid, start, goal, options) -> AlgorithmResult

    Returns
    -------
    dict mapping Strategy -> LoadedAlgorithm, in Strategy order
    """

    registry: Dict[Strategy, LoadedAlgorithm] = {}
    for strategy in Strategy:
        module = _MODULES[strategy]
        spec = module.ALGORITHM
        if not isinstance(spec, AlgorithmSpec):
            raise TypeError(f"Strategy module {module.__name__} ALGORITHM must be AlgorithmSpec")
        if spec.id != strategy.value:
            raise ValueError(f"Strategy {strategy.name} is bound to algorithm id {spec.id!r}")
        registry[strategy] = LoadedAlgorithm(spec=spec, run=module.run)

    return registry


REGISTRY = load_plugins()


def list_algorithms(registry: Dict[Strategy, LoadedAlgorithm] = REGISTRY) -> List[AlgorithmSpec]:
    return [registry[s].spec for s in Strategy if s in registry]

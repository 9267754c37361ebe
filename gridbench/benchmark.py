"""
Benchmark harness.

Runs every search strategy against the same grid/start/goal and collects
one SearchResult per strategy into a Report:
- SearchResult: outcome, path and measurements of a single run
- Report: results keyed by Strategy, always in BFS, DFS, A*, Dijkstra order
- run_strategy / run_benchmark: the measured entry points
"""

from __future__ import annotations

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeout
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .algorithms.loader import REGISTRY, Strategy
from .algorithms.types import Grid, NeighborModel, Path, Position, RunOptions
from .config import DEFAULT_MAX_VISITED, DEFAULT_PARALLEL, DEFAULT_TIMEOUT_S, MAX_WORKERS, TIMEOUT_GRACE_S
from .errors import InvalidEndpoint, OutOfBounds, SearchTimedOut

logger = logging.getLogger(__name__)

StrategyLike = Union[Strategy, str]


class Outcome(str, Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_ENDPOINT = "invalid_endpoint"
    TIMED_OUT = "timed_out"
    ERROR = "error"


@dataclass(frozen=True)
class SearchResult:
    strategy: Strategy
    outcome: Outcome
    path: Optional[Path]
    nodes_visited: int
    elapsed_s: float
    peak_memory: int
    error: Optional[str] = None
    visited: Tuple[Position, ...] = ()

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND

    @property
    def path_length(self) -> Optional[int]:
        """Cells on the path, or None when there is no path."""
        return len(self.path) if self.path else None

    @property
    def runtime_ms(self) -> float:
        return self.elapsed_s * 1000.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "name": REGISTRY[self.strategy].spec.name,
            "outcome": self.outcome.value,
            "path": [list(p) for p in self.path] if self.path else None,
            "path_length": self.path_length,
            "nodes_visited": self.nodes_visited,
            "elapsed_s": self.elapsed_s,
            "runtime_ms": self.runtime_ms,
            "peak_memory": self.peak_memory,
            "error": self.error,
            "visited": [list(p) for p in self.visited],
        }


@dataclass
class Report:
    results: Dict[Strategy, SearchResult] = field(default_factory=dict)

    def __getitem__(self, strategy: StrategyLike) -> SearchResult:
        return self.results[Strategy(strategy)]

    def __contains__(self, strategy: object) -> bool:
        try:
            return Strategy(strategy) in self.results
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def items(self):
        return self.results.items()

    def values(self):
        return self.results.values()

    def shortest_path_length(self) -> Optional[int]:
        lengths = [r.path_length for r in self.results.values() if r.path_length]
        return min(lengths) if lengths else None

    def to_dict(self) -> Dict[str, Any]:
        return {"results": {s.value: r.to_dict() for s, r in self.results.items()}}


def _select(strategies: Optional[Iterable[StrategyLike]]) -> List[Strategy]:
    if strategies is None:
        return list(Strategy)
    wanted = {Strategy(s) for s in strategies}
    return [s for s in Strategy if s in wanted]


def _failed(strategy: Strategy, outcome: Outcome, error: str, elapsed_s: float) -> SearchResult:
    return SearchResult(
        strategy=strategy,
        outcome=outcome,
        path=None,
        nodes_visited=0,
        elapsed_s=elapsed_s,
        peak_memory=0,
        error=error,
    )


def _measure(
    strategy: Strategy,
    grid: Grid,
    start: Position,
    goal: Position,
    neighbor_model: NeighborModel,
    timeout: Optional[float],
    return_visited: bool,
    max_visited: int,
) -> SearchResult:
    algo = REGISTRY[strategy]

    t0 = time.perf_counter()
    options = RunOptions(
        neighbor_model=neighbor_model,
        return_visited=return_visited,
        max_visited=max_visited,
        deadline=None if timeout is None else t0 + timeout,
        timeout=timeout,
    )
    try:
        result = algo.run(grid, start, goal, options)
    except InvalidEndpoint as e:
        logger.debug(f"{algo.spec.name}: invalid endpoint: {e}")
        return _failed(strategy, Outcome.INVALID_ENDPOINT, str(e), time.perf_counter() - t0)
    except SearchTimedOut as e:
        logger.warning(f"{algo.spec.name} timed out after {timeout}s")
        return _failed(strategy, Outcome.TIMED_OUT, str(e), time.perf_counter() - t0)
    except OutOfBounds:
        raise
    except Exception as e:
        logger.exception(f"{algo.spec.name} crashed")
        return _failed(strategy, Outcome.ERROR, f"{type(e).__name__}: {e}", time.perf_counter() - t0)
    elapsed = time.perf_counter() - t0

    outcome = Outcome.FOUND if result.path else Outcome.NO_PATH
    logger.debug(
        f"{algo.spec.name}: {outcome.value} len={len(result.path)} "
        f"visited={result.expanded} peak={result.peak_memory} time={elapsed * 1000.0:.3f}ms"
    )
    return SearchResult(
        strategy=strategy,
        outcome=outcome,
        path=result.path or None,
        nodes_visited=result.expanded,
        elapsed_s=elapsed,
        peak_memory=result.peak_memory,
        visited=tuple(result.visited) if return_visited else (),
    )


def _run_parallel(
    selected: List[Strategy],
    run: Callable[[Strategy], SearchResult],
    timeout: Optional[float],
) -> Dict[Strategy, SearchResult]:
    workers = max(1, min(MAX_WORKERS, len(selected)))
    # Strategies stop at their own deadline; this bound only covers a worker
    # that never reaches its next deadline check.
    batches = math.ceil(len(selected) / workers)
    backstop = None if timeout is None else time.perf_counter() + (timeout + TIMEOUT_GRACE_S) * batches

    results: Dict[Strategy, SearchResult] = {}
    pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="gridbench")
    try:
        t0 = time.perf_counter()
        futures = {s: pool.submit(run, s) for s in selected}
        for strategy, future in futures.items():
            remaining = None if backstop is None else max(0.0, backstop - time.perf_counter())
            try:
                results[strategy] = future.result(timeout=remaining)
            except FuturesTimeout:
                logger.warning(f"{REGISTRY[strategy].spec.name} did not return from its worker in time")
                results[strategy] = _failed(
                    strategy,
                    Outcome.TIMED_OUT,
                    str(SearchTimedOut(timeout)),
                    time.perf_counter() - t0,
                )
    finally:
        pool.shutdown(wait=False, cancel_futures=True)
    return results


def run_strategy(
    strategy: StrategyLike,
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    neighbor_model: NeighborModel = NeighborModel.FOUR,
    timeout: Optional[float] = DEFAULT_TIMEOUT_S,
    *,
    return_visited: bool = False,
    max_visited: int = DEFAULT_MAX_VISITED,
) -> SearchResult:
    """Measure one strategy. Out-of-bounds endpoints raise; everything else is recorded."""
    start_p = grid.check_bounds(start)
    goal_p = grid.check_bounds(goal)
    _check_timeout(timeout)
    return _measure(
        Strategy(strategy),
        grid,
        start_p,
        goal_p,
        NeighborModel(neighbor_model),
        timeout,
        return_visited,
        max_visited,
    )


def run_benchmark(
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    neighbor_model: NeighborModel = NeighborModel.FOUR,
    timeout: Optional[float] = DEFAULT_TIMEOUT_S,
    *,
    strategies: Optional[Iterable[StrategyLike]] = None,
    parallel: bool = DEFAULT_PARALLEL,
    return_visited: bool = False,
    max_visited: int = DEFAULT_MAX_VISITED,
) -> Report:
    """Run every selected strategy on the same inputs and collect a Report.

    Raises OutOfBounds if start or goal lies outside the grid. Blocked
    endpoints, timeouts and strategy crashes are recorded per strategy
    instead of aborting the run. `timeout` is a per-strategy wall-clock
    budget in seconds; None disables it.
    """
    start_p = grid.check_bounds(start)
    goal_p = grid.check_bounds(goal)
    _check_timeout(timeout)
    selected = _select(strategies)

    run = partial(
        _measure,
        grid=grid,
        start=start_p,
        goal=goal_p,
        neighbor_model=NeighborModel(neighbor_model),
        timeout=timeout,
        return_visited=return_visited,
        max_visited=max_visited,
    )

    if parallel and len(selected) > 1:
        results = _run_parallel(selected, run, timeout)
    else:
        results = {s: run(s) for s in selected}

    report = Report({s: results[s] for s in selected})
    logger.info(
        f"Benchmark {grid.rows}x{grid.cols} {tuple(start_p)}->{tuple(goal_p)}: "
        + ", ".join(f"{s.value}={r.outcome.value}" for s, r in report.items())
    )
    return report


def _check_timeout(timeout: Optional[float]) -> None:
    if timeout is not None and not timeout > 0:
        raise ValueError(f"timeout must be positive or None, got {timeout}")

"""Min-heap frontier search shared by A* and Dijkstra.

Heap entries are (f, seq, position). `seq` increases with every push, so
entries with equal f pop in push order, which is neighbor enumeration order.
Stale duplicates are skipped on pop once their position is closed; with a
consistent heuristic a closed position never needs reopening.
"""

from __future__ import annotations

import heapq
import itertools
from math import inf
from typing import Dict, List, Sequence, Set, Tuple

from ..heuristics import Heuristic
from ..types import AlgorithmResult, Grid, Position, RunOptions, check_endpoints, reconstruct_path


def priority_search(
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    options: RunOptions,
    heuristic: Heuristic,
) -> AlgorithmResult:
    start, goal = check_endpoints(grid, start, goal)
    model = options.neighbor_model

    g: Dict[Position, float] = {start: 0}
    came_from: Dict[Position, Position] = {}
    closed: Set[Position] = set()
    seq = itertools.count()

    pq: List[Tuple[float, int, Position]] = [(heuristic(start, goal), next(seq), start)]

    visited_out: List[Position] = []
    peak = len(pq)

    while pq:
        options.check_deadline()
        _f, _seq, cur = heapq.heappop(pq)
        if cur in closed:
            continue

        closed.add(cur)
        if options.return_visited and len(visited_out) < options.max_visited:
            visited_out.append(cur)

        if cur == goal:
            break

        cur_g = g[cur]
        for nxt in grid.neighbors(cur, model):
            if nxt in closed:
                continue
            ng = cur_g + 1
            if ng < g.get(nxt, inf):
                g[nxt] = ng
                came_from[nxt] = cur
                heapq.heappush(pq, (ng + heuristic(nxt, goal), next(seq), nxt))

        peak = max(peak, len(pq) + len(closed))

    path = reconstruct_path(came_from, start, goal) if goal in closed else ()
    return AlgorithmResult(path=path, visited=visited_out, expanded=len(closed), peak_memory=peak)

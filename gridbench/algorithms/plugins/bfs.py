from __future__ import annotations

from collections import deque
from typing import Dict, List, Sequence

from ..types import AlgorithmResult, AlgorithmSpec, Grid, Position, RunOptions, check_endpoints, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="bfs",
    name="BFS",
    description="Breadth-first search; fewest moves on a uniform-cost grid.",
)


def run(grid: Grid, start: Sequence[int], goal: Sequence[int], options: RunOptions) -> AlgorithmResult:
    start, goal = check_endpoints(grid, start, goal)
    model = options.neighbor_model

    came_from: Dict[Position, Position] = {}
    # Marked on enqueue, so every cell enters the queue at most once.
    visited = {start}
    q = deque([start])

    visited_out: List[Position] = []
    if options.return_visited and options.max_visited > 0:
        visited_out.append(start)
    peak = len(q) + len(visited)

    while q:
        options.check_deadline()
        cur = q.popleft()

        if cur == goal:
            break

        for nxt in grid.neighbors(cur, model):
            if nxt in visited:
                continue
            visited.add(nxt)
            came_from[nxt] = cur
            q.append(nxt)
            if options.return_visited and len(visited_out) < options.max_visited:
                visited_out.append(nxt)

        peak = max(peak, len(q) + len(visited))

    path = reconstruct_path(came_from, start, goal)
    return AlgorithmResult(path=path, visited=visited_out, expanded=len(visited), peak_memory=peak)

from __future__ import annotations

from typing import Dict, List, Sequence

from ..types import AlgorithmResult, AlgorithmSpec, Grid, Position, RunOptions, check_endpoints, reconstruct_path

ALGORITHM = AlgorithmSpec(
    id="dfs",
    name="DFS",
    description="Depth-first search on an explicit stack; first path found, not necessarily shortest.",
)


def run(grid: Grid, start: Sequence[int], goal: Sequence[int], options: RunOptions) -> AlgorithmResult:
    start, goal = check_endpoints(grid, start, goal)
    model = options.neighbor_model

    came_from: Dict[Position, Position] = {}
    visited = {start}
    stack = [start]

    visited_out: List[Position] = []
    if options.return_visited and options.max_visited > 0:
        visited_out.append(start)
    peak = len(stack) + len(visited)

    while stack:
        options.check_deadline()
        cur = stack.pop()

        if cur == goal:
            break

        # neighbors() yields in a fixed order; DFS behavior depends on that order.
        for nxt in grid.neighbors(cur, model):
            if nxt in visited:
                continue
            visited.add(nxt)
            came_from[nxt] = cur
            stack.append(nxt)
            if options.return_visited and len(visited_out) < options.max_visited:
                visited_out.append(nxt)

        peak = max(peak, len(stack) + len(visited))

    path = reconstruct_path(came_from, start, goal)
    return AlgorithmResult(path=path, visited=visited_out, expanded=len(visited), peak_memory=peak)

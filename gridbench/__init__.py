"""
Grid pathfinding benchmark suite.

Runs breadth-first, depth-first, A* and Dijkstra search on the same
obstacle grid and compares elapsed time, path length, nodes visited and
peak frontier/visited memory.
"""

__version__ = "0.1.0"

from .algorithms.loader import Strategy
from .algorithms.types import Grid, GridGenerator, NeighborModel, Path, Position, validate_path
from .benchmark import Outcome, Report, SearchResult, run_benchmark, run_strategy
from .errors import GridBenchError, InvalidEndpoint, OutOfBounds, SearchTimedOut

__all__ = [
    "Grid",
    "GridBenchError",
    "GridGenerator",
    "InvalidEndpoint",
    "NeighborModel",
    "OutOfBounds",
    "Outcome",
    "Path",
    "Position",
    "Report",
    "SearchResult",
    "SearchTimedOut",
    "Strategy",
    "run_benchmark",
    "run_strategy",
    "validate_path",
]

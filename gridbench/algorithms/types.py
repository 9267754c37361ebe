from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional, Protocol, Sequence, Tuple

from ..config import DEFAULT_MAX_VISITED
from ..errors import InvalidEndpoint, OutOfBounds, SearchTimedOut


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for a search strategy."""

    id: str
    name: str
    description: str = ""


class Position(NamedTuple):
    row: int
    col: int


class NeighborModel(IntEnum):
    FOUR = 4
    EIGHT = 8


# (drow, dcol) in enumeration order. Tie-breaking in every strategy follows it.
_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))

DIRECTIONS: Dict[NeighborModel, Tuple[Tuple[int, int], ...]] = {
    NeighborModel.FOUR: _ORTHOGONAL,
    NeighborModel.EIGHT: _ORTHOGONAL + _DIAGONAL,
}

Path = Tuple[Position, ...]


def as_position(pos: Sequence[int]) -> Position:
    row, col = pos
    return Position(int(row), int(col))


@dataclass(frozen=True)
class Grid:
    """A rectangular obstacle map.

    Notes
    -----
    - Cells are addressed as (row, col); `blocked` is stored row-major:
      index = row * cols + col
    - Every move costs 1, diagonal moves included (see heuristics.py).
    - Frozen after construction, so one instance can be lent to any number
      of concurrent searches.
    """

    rows: int
    cols: int
    blocked: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")
        flags = tuple(bool(b) for b in self.blocked)
        if len(flags) != self.rows * self.cols:
            raise ValueError(f"blocked length {len(flags)} != rows*cols {self.rows * self.cols}")
        object.__setattr__(self, "blocked", flags)

    @classmethod
    def open(cls, rows: int, cols: int) -> "Grid":
        return cls(rows, cols, (False,) * (rows * cols))

    @classmethod
    def from_blocked_cells(cls, rows: int, cols: int, cells: Iterable[Sequence[int]]) -> "Grid":
        flags = [False] * (rows * cols)
        for cell in cells:
            r, c = as_position(cell)
            if not (0 <= r < rows and 0 <= c < cols):
                raise OutOfBounds((r, c), (rows, cols))
            flags[r * cols + c] = True
        return cls(rows, cols, tuple(flags))

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from text rows: '#' is blocked, '.' is free."""
        lines = [line.strip() for line in lines if line.strip()]
        if not lines:
            raise ValueError("Grid needs at least one row")
        cols = len(lines[0])
        flags: List[bool] = []
        for r, line in enumerate(lines):
            if len(line) != cols:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {cols}")
            for ch in line:
                if ch not in "#.":
                    raise ValueError(f"Unknown cell character {ch!r} in row {r}")
                flags.append(ch == "#")
        return cls(len(lines), cols, tuple(flags))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, pos: Sequence[int]) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, pos: Sequence[int]) -> Position:
        p = as_position(pos)
        if not self.in_bounds(p):
            raise OutOfBounds(p, self.shape)
        return p

    def is_free(self, pos: Sequence[int]) -> bool:
        row, col = self.check_bounds(pos)
        return not self.blocked[row * self.cols + col]

    def free_count(self) -> int:
        return self.blocked.count(False)

    def neighbors(self, pos: Sequence[int], model: NeighborModel = NeighborModel.FOUR) -> List[Position]:
        """Free in-bounds neighbors in fixed order: up, down, left, right, then diagonals.

        Diagonal moves are allowed to cut between two blocked orthogonal cells.
        """
        row, col = self.check_bounds(pos)
        out: List[Position] = []
        for dr, dc in DIRECTIONS[NeighborModel(model)]:
            r = row + dr
            c = col + dc
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                continue
            if self.blocked[r * self.cols + c]:
                continue
            out.append(Position(r, c))
        return out

    def render(self, path: Iterable[Sequence[int]] = ()) -> str:
        """Text view of the grid, path cells drawn as '*'."""
        on_path = {as_position(p) for p in path}
        lines = []
        for r in range(self.rows):
            row = []
            for c in range(self.cols):
                if (r, c) in on_path:
                    row.append("*")
                elif self.blocked[r * self.cols + c]:
                    row.append("#")
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines)


class GridGenerator(Protocol):
    """Produces a well-formed Grid; obstacle placement policy is up to the implementer."""

    def __call__(self, rows: int, cols: int, density: float) -> Grid: ...


@dataclass
class RunOptions:
    neighbor_model: NeighborModel = NeighborModel.FOUR
    return_visited: bool = False
    max_visited: int = DEFAULT_MAX_VISITED
    # Absolute time.perf_counter() value; None means no budget.
    deadline: Optional[float] = None
    timeout: Optional[float] = None

    def check_deadline(self) -> None:
        if self.deadline is not None and time.perf_counter() > self.deadline:
            raise SearchTimedOut(self.timeout)


@dataclass
class AlgorithmResult:
    path: Path
    visited: List[Position] = field(default_factory=list)
    expanded: int = 0
    # Peak of frontier entries + visited/closed entries held at once.
    peak_memory: int = 0


def check_endpoints(grid: Grid, start: Sequence[int], goal: Sequence[int]) -> Tuple[Position, Position]:
    """Bounds-check both endpoints, then reject blocked ones before any search starts."""
    s = grid.check_bounds(start)
    g = grid.check_bounds(goal)
    if not grid.is_free(s):
        raise InvalidEndpoint(s, "start")
    if not grid.is_free(g):
        raise InvalidEndpoint(g, "goal")
    return s, g


def reconstruct_path(came_from: Dict[Position, Position], start: Position, goal: Position) -> Path:
    if goal != start and goal not in came_from:
        return ()
    out: List[Position] = [goal]
    cur = goal
    while cur != start:
        cur = came_from[cur]
        out.append(cur)
    out.reverse()
    return tuple(out)


def validate_path(
    grid: Grid,
    path: Sequence[Sequence[int]],
    start: Sequence[int],
    goal: Sequence[int],
    model: NeighborModel = NeighborModel.FOUR,
) -> Optional[str]:
    """Return None for a well-formed path, otherwise a short reason."""
    if not path:
        return "empty_path"
    cells = [as_position(p) for p in path]
    if cells[0] != as_position(start):
        return "wrong_start"
    if cells[-1] != as_position(goal):
        return "wrong_goal"
    if len(set(cells)) != len(cells):
        return "repeated_cell"
    for cell in cells:
        if not grid.in_bounds(cell):
            return "out_of_bounds"
        if not grid.is_free(cell):
            return "wall_collision"
    steps = set(DIRECTIONS[NeighborModel(model)])
    for a, b in zip(cells, cells[1:]):
        if (b.row - a.row, b.col - a.col) not in steps:
            return "illegal_move"
    return None


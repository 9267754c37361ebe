from __future__ import annotations

from typing import Optional, Tuple


class GridBenchError(Exception):
    """Base class for every error raised by gridbench."""


class OutOfBounds(GridBenchError, IndexError):
    """A position lies outside the grid. Always a caller bug; never clamped."""

    def __init__(self, position: Tuple[int, int], shape: Tuple[int, int]):
        self.position = tuple(position)
        self.shape = tuple(shape)
        rows, cols = self.shape
        super().__init__(f"Position {self.position} is outside a {rows}x{cols} grid")


class InvalidEndpoint(GridBenchError, ValueError):
    """The start or goal cell is blocked."""

    def __init__(self, position: Tuple[int, int], role: str):
        self.position = tuple(position)
        self.role = role
        super().__init__(f"{role} {self.position} is a blocked cell")


class SearchTimedOut(GridBenchError, TimeoutError):
    """A strategy ran past its execution budget."""

    def __init__(self, timeout: Optional[float]):
        self.timeout = timeout
        super().__init__(f"Search exceeded its {timeout}s budget")

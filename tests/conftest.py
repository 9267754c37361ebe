"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random

import pytest

from gridbench import Grid

MAZE = [
    "..........",
    ".########.",
    ".#......#.",
    ".#.####.#.",
    ".#.#..#.#.",
    ".#.#.##.#.",
    ".#.#....#.",
    ".#.######.",
    "..........",
]


def random_grid(rows: int, cols: int, density: float, seed: int = 0) -> Grid:
    """Seeded obstacle generator; corners are kept free so they can be endpoints."""
    rng = random.Random(seed)
    flags = [rng.random() < density for _ in range(rows * cols)]
    flags[0] = False
    flags[-1] = False
    return Grid(rows, cols, tuple(flags))


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid with no obstacles."""
    return Grid.open(5, 5)


@pytest.fixture
def split_grid() -> Grid:
    """3x3 grid whose middle row is a wall: top and bottom rows are disconnected."""
    return Grid.from_strings(["...", "###", "..."])


@pytest.fixture
def maze_grid() -> Grid:
    """Ringed maze; (4, 4) is only reachable through the gap at (7, 2)."""
    return Grid.from_strings(MAZE)


@pytest.fixture
def random_grids() -> list[Grid]:
    """A handful of seeded random maps of mixed size and density."""
    return [
        random_grid(8, 8, 0.2, seed=1),
        random_grid(12, 15, 0.25, seed=2),
        random_grid(20, 20, 0.3, seed=3),
        random_grid(16, 10, 0.35, seed=4),
        random_grid(25, 25, 0.2, seed=5),
    ]


@pytest.fixture
def grid_generator():
    """The seeded generator, as an external GridGenerator collaborator."""
    return random_grid

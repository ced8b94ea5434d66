"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from genart.geometry.types import Position, Segment
from genart.maze.grid import GridMaze
from genart.paintings.hitomezashi import Hitomezashi


def seg(ax: int, ay: int, bx: int, by: int) -> Segment:
    return Segment(Position(ax, ay), Position(bx, by))


# Unit square drawn corner to corner
SQUARE_LOOP = [seg(0, 0, 1, 0), seg(1, 0, 1, 1), seg(1, 1, 0, 1), seg(0, 1, 0, 0)]

# Straight run of three units, given out of order
SHUFFLED_LINE = [seg(2, 0, 3, 0), seg(0, 0, 1, 0), seg(1, 0, 2, 0)]

# (w, h, seed) combinations covering thin, square and wide grids
MAZE_CASES = [(1, 1, 0), (1, 6, 3), (6, 1, 5), (5, 5, 42), (12, 7, 2024), (20, 20, 99)]


@pytest.fixture
def square_loop() -> list[Segment]:
    return list(SQUARE_LOOP)


@pytest.fixture
def small_maze() -> GridMaze:
    return GridMaze.from_seed(6, 4, 7)


@pytest.fixture
def pattern() -> Hitomezashi:
    return Hitomezashi.with_random(14, 9, np.random.default_rng(3))


@pytest.fixture
def pattern_segments(pattern: Hitomezashi) -> list[Segment]:
    return list(pattern.segments())

"""GridMaze — perfect maze carved on a doubled-resolution cell grid.

A maze of width w and height h is stored as a (2h+1) x (2w+1) raw grid.
Logical cell (x, y) lives at raw (2x+1, 2y+1); raw cells with an even
coordinate are the walls between logical cells or the outer border.

A 3 x 3 maze might carve to::

    # # # # # # #
    #       #   #
    #   # # #   #
    #       #   #
    # # #   #   #
    #           #
    # # # # # # #

Carving is a randomized depth-first search over logical cells driven by an
explicit stack, so every cell is reached exactly once and the floor graph is
a spanning tree. One opening is then carved on the west border and one on
the east border, and ``solution_path`` walks the raw floor cells from one to
the other.

Random draws, in order: start x, start y, one per carving step that has
unvisited neighbours, west entrance row, east exit row.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from genart.geometry.types import Position

logger = logging.getLogger(__name__)


class CellKind(enum.IntEnum):
    WALL = 0
    FLOOR = 1


@dataclass(frozen=True)
class Cell:
    visited: bool = False
    kind: CellKind = CellKind.WALL

    @property
    def is_wall(self) -> bool:
        return self.kind == CellKind.WALL


# Raw-grid neighbour order used by the solver: north, south, east, west.
_SOLVE_STEPS = ((0, -1), (0, 1), (1, 0), (-1, 0))


class GridMaze:
    """Perfect maze with one west entrance and one east exit."""

    def __init__(self, width: int, height: int, rng: np.random.Generator) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._kinds: NDArray[np.int8] = np.full(
            (self.raw_height, self.raw_width), CellKind.WALL, dtype=np.int8
        )
        self._visited: NDArray[np.bool_] = np.zeros((self.raw_height, self.raw_width), dtype=bool)
        self.entrance: Position | None = None
        self.exit: Position | None = None
        self._solution: list[Position] | None = None

        self._carve(rng)
        self._carve_openings(rng)

    @classmethod
    def from_seed(cls, width: int, height: int, seed: int) -> GridMaze:
        return cls(width, height, np.random.default_rng(seed))

    # --- dimensions ---

    @property
    def raw_width(self) -> int:
        return self.width * 2 + 1

    @property
    def raw_height(self) -> int:
        return self.height * 2 + 1

    @property
    def kinds(self) -> NDArray[np.int8]:
        """Copy of the raw cell kinds, indexed [raw_y, raw_x]."""
        return self._kinds.copy()

    def wall_mask(self) -> NDArray[np.bool_]:
        return self._kinds == CellKind.WALL

    # --- cell access ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def in_raw_bounds(self, rx: int, ry: int) -> bool:
        """Inclusive on both ends: raw x in [0, 2w], raw y in [0, 2h]."""
        return 0 <= rx <= self.width * 2 and 0 <= ry <= self.height * 2

    def cell_at(self, x: int, y: int) -> Cell | None:
        if not self.in_bounds(x, y):
            return None
        return self.raw_cell_at(x * 2 + 1, y * 2 + 1)

    def raw_cell_at(self, rx: int, ry: int) -> Cell | None:
        if not self.in_raw_bounds(rx, ry):
            return None
        return Cell(visited=bool(self._visited[ry, rx]), kind=CellKind(int(self._kinds[ry, rx])))

    def _is_floor(self, rx: int, ry: int) -> bool:
        return self.in_raw_bounds(rx, ry) and self._kinds[ry, rx] == CellKind.FLOOR

    def _open_logical(self, cell: Position) -> None:
        rx, ry = cell.x * 2 + 1, cell.y * 2 + 1
        self._visited[ry, rx] = True
        self._kinds[ry, rx] = CellKind.FLOOR

    # --- carving ---

    def _unvisited_neighbours(self, cell: Position) -> list[Position]:
        x, y = cell
        candidates = [Position(x, y + 1), Position(x, y - 1), Position(x + 1, y), Position(x - 1, y)]
        return [
            c for c in candidates
            if self.in_bounds(c.x, c.y) and not self._visited[c.y * 2 + 1, c.x * 2 + 1]
        ]

    def _collapse_wall_between(self, a: Position, b: Position) -> None:
        # Midpoint of the two raw coordinates: (2a+1 + 2b+1) / 2
        self._kinds[a.y + b.y + 1, a.x + b.x + 1] = CellKind.FLOOR

    def _carve(self, rng: np.random.Generator) -> None:
        start = Position(int(rng.integers(self.width)), int(rng.integers(self.height)))
        self._open_logical(start)
        stack = [start]
        removed = 0

        while stack:
            current = stack[-1]
            neighbours = self._unvisited_neighbours(current)
            if not neighbours:
                stack.pop()
                continue
            chosen = neighbours[int(rng.integers(len(neighbours)))]
            self._collapse_wall_between(current, chosen)
            self._open_logical(chosen)
            stack.append(chosen)
            removed += 1

        logger.debug(
            "Carved %dx%d maze from %s: %d walls removed", self.width, self.height, start, removed
        )

    def _carve_openings(self, rng: np.random.Generator) -> None:
        west_row = int(rng.integers(self.height))
        east_row = int(rng.integers(self.height))
        self.entrance = Position(0, west_row * 2 + 1)
        self.exit = Position(self.width * 2, east_row * 2 + 1)
        for pos in (self.entrance, self.exit):
            self._kinds[pos.y, pos.x] = CellKind.FLOOR

    # --- solving ---

    def _west_opening(self) -> Position | None:
        for ry in range(self.raw_height):
            if self._kinds[ry, 0] == CellKind.FLOOR:
                return Position(0, ry)
        return None

    def _next_step(self, cell: Position) -> Position | None:
        for dx, dy in _SOLVE_STEPS:
            nx, ny = cell.x + dx, cell.y + dy
            if self._is_floor(nx, ny) and not self._visited[ny, nx]:
                return Position(nx, ny)
        return None

    def solve(self) -> list[Position]:
        """Depth-first walk from the west opening to any east border cell.

        Not necessarily the shortest route. Returns [] when the west border
        has no opening or the east border cannot be reached.
        """
        self._visited[:, :] = False

        start = self._west_opening()
        if start is None:
            logger.debug("No west opening found; maze has no solution")
            return []

        east = self.raw_width - 1
        self._visited[start.y, start.x] = True
        path = [start]
        while path:
            current = path[-1]
            if current.x == east:
                break
            step = self._next_step(current)
            if step is None:
                path.pop()
                continue
            self._visited[step.y, step.x] = True
            path.append(step)

        logger.debug("Solved %dx%d maze: path of %d raw cells", self.width, self.height, len(path))
        return path

    def solution_path(self) -> list[Position]:
        if self._solution is None:
            self._solution = self.solve()
        return list(self._solution)

    # --- text rendering ---

    def render_text(self, path: list[Position] | None = None) -> str:
        """'#' for walls, ' ' for floors, '.' for cells on ``path``."""
        on_path = set(path or ())
        rows = []
        for ry in range(self.raw_height):
            chars = []
            for rx in range(self.raw_width):
                if (rx, ry) in on_path:
                    chars.append(".")
                elif self._kinds[ry, rx] == CellKind.WALL:
                    chars.append("#")
                else:
                    chars.append(" ")
            rows.append(" ".join(chars))
        return "\n".join(rows) + "\n"

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"GridMaze(width={self.width}, height={self.height})"

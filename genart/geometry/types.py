"""Integer grid primitives shared by the maze engine and the consolidator.

Position  — (x, y) on an integer grid, compared by value
Segment   — straight edge between two positions on the same row or column
Polyline  — ordered chain of positions; closed when first == last
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Position(NamedTuple):
    x: int
    y: int

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Segment:
    """Axis-aligned edge from ``a`` to ``b``.

    Run extraction produces segments spanning several units; the
    consolidator only accepts unit segments (see ``is_unit``).
    """

    a: Position
    b: Position

    @classmethod
    def unit(cls, a: tuple[int, int], b: tuple[int, int]) -> Segment:
        """Build a segment and reject anything that is not one grid unit long."""
        seg = cls(Position(*a), Position(*b))
        if not seg.is_unit:
            raise ValueError(f"Segment {seg.a}-{seg.b} is not a unit segment")
        return seg

    @property
    def length(self) -> int:
        return self.a.manhattan(self.b)

    @property
    def is_axis_aligned(self) -> bool:
        return self.a.x == self.b.x or self.a.y == self.b.y

    @property
    def is_unit(self) -> bool:
        return self.length == 1


@dataclass
class Polyline:
    """Consolidated chain of positions. Closed loops repeat the first point at the end."""

    points: list[Position] = field(default_factory=list)

    @property
    def closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]

    @property
    def first(self) -> Position:
        return self.points[0]

    @property
    def last(self) -> Position:
        return self.points[-1]

    @property
    def edge_count(self) -> int:
        return max(len(self.points) - 1, 0)

    def endpoints(self) -> frozenset[Position]:
        """Unordered pair of free ends (empty for closed loops)."""
        if self.closed:
            return frozenset()
        return frozenset((self.first, self.last))

    def as_array(self) -> NDArray[np.float64]:
        """Nx2 float array of (x, y), the layout used by the geometry helpers."""
        if not self.points:
            return np.empty((0, 2))
        return np.array(self.points, dtype=np.float64)

    def __len__(self) -> int:
        return len(self.points)

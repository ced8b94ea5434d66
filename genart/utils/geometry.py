"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from shapely.geometry import LinearRing, LineString

from genart.geometry.types import Polyline


def to_shapely(polyline: Polyline) -> LineString | LinearRing:
    """LinearRing for closed polylines, LineString otherwise."""
    coords = [(float(p.x), float(p.y)) for p in polyline.points]
    if polyline.closed and len(coords) >= 4:
        return LinearRing(coords)
    return LineString(coords)


def total_length(polylines: list[Polyline]) -> float:
    """Summed drawn length of the polylines, in grid units."""
    return sum(to_shapely(p).length for p in polylines if len(p) > 1)

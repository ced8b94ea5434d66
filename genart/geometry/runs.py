"""Row/column run extraction — turn a wall mask into straight segments.

Every maximal horizontal run of wall cells becomes one segment between the
run's extreme raw positions, then every maximal vertical run does the same.
A run of a single cell has equal extremes and yields nothing; that cell is
still covered by the run crossing it in the other direction, if any.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from genart.geometry.types import Position, Segment


def _runs(line: NDArray[np.bool_]) -> list[tuple[int, int]]:
    """(start, stop) inclusive index pairs of True runs longer than one cell."""
    padded = np.concatenate(([0], line.astype(np.int8), [0]))
    edges = np.flatnonzero(np.diff(padded))
    starts = edges[::2]
    stops = edges[1::2] - 1
    return [(int(s), int(e)) for s, e in zip(starts, stops) if e > s]


def _as_mask(source: Any) -> NDArray[np.bool_]:
    wall_mask = getattr(source, "wall_mask", None)
    mask = wall_mask() if callable(wall_mask) else np.asarray(source, dtype=bool)
    if mask.ndim != 2:
        raise ValueError(f"Wall mask must be 2-D, got shape {mask.shape}")
    return mask


def extract_wall_segments(source: Any) -> list[Segment]:
    """Collapse wall runs into segments, rows first then columns.

    ``source`` is anything exposing ``wall_mask()`` (a ``GridMaze``) or a
    2-D boolean array indexed ``[y, x]``.
    """
    mask = _as_mask(source)
    segments: list[Segment] = []

    for y in range(mask.shape[0]):
        for start, stop in _runs(mask[y, :]):
            segments.append(Segment(Position(start, y), Position(stop, y)))

    for x in range(mask.shape[1]):
        for start, stop in _runs(mask[:, x]):
            segments.append(Segment(Position(x, start), Position(x, stop)))

    return segments


def split_into_units(segments: list[Segment]) -> list[Segment]:
    """Break axis-aligned segments into consecutive unit segments."""
    units: list[Segment] = []
    for seg in segments:
        if not seg.is_axis_aligned:
            raise ValueError(f"Segment {seg.a}-{seg.b} is not axis-aligned")
        dx = int(np.sign(seg.b.x - seg.a.x))
        dy = int(np.sign(seg.b.y - seg.a.y))
        cur = seg.a
        for _ in range(seg.length):
            nxt = Position(cur.x + dx, cur.y + dy)
            units.append(Segment(cur, nxt))
            cur = nxt
    return units

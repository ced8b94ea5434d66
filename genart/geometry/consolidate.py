"""Segment consolidation — merge unit segments into the fewest polylines.

Two phases:
    1. Local merge: each segment extends the first open chain that has a
       matching endpoint, else starts a new chain.
    2. Fixpoint join: fold chains into each other pairwise until a full pass
       performs no merge.

Closed loops (first == last) have no free end and take no part in merges.
A segment that touches a closed loop starts a new chain; the loop is never
extended past its closing point.
Which polylines come out (and whether they are closed) depends only on how
segments share endpoints; the direction of travel inside a polyline depends
on input order.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from genart.geometry.types import Polyline, Position, Segment

logger = logging.getLogger(__name__)


class _Chain:
    """In-progress polyline with cheap growth at both ends."""

    __slots__ = ("points",)

    def __init__(self, segment: Segment) -> None:
        self.points: deque[Position] = deque((segment.a, segment.b))

    @property
    def first(self) -> Position:
        return self.points[0]

    @property
    def last(self) -> Position:
        return self.points[-1]

    @property
    def closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]

    def extend_with(self, segment: Segment) -> bool:
        """Grow by one segment if it touches a free end. Last end is tried first."""
        if self.closed:
            return False
        if segment.a == self.last:
            self.points.append(segment.b)
        elif segment.b == self.last:
            self.points.append(segment.a)
        elif segment.a == self.first:
            self.points.appendleft(segment.b)
        elif segment.b == self.first:
            self.points.appendleft(segment.a)
        else:
            return False
        return True

    def absorb(self, other: _Chain) -> bool:
        """Join ``other`` onto this chain at a shared free end."""
        if self.closed or other.closed:
            return False
        theirs = list(other.points)
        if self.last == other.first:
            self.points.extend(theirs[1:])
        elif self.first == other.last:
            self.points.extendleft(reversed(theirs[:-1]))
        elif self.first == other.first:
            self.points.extendleft(theirs[1:])
        elif self.last == other.last:
            self.points.extend(reversed(theirs[:-1]))
        else:
            return False
        return True

    def to_polyline(self) -> Polyline:
        return Polyline(points=list(self.points))


def _validate(segments: Iterable[Segment]) -> list[Segment]:
    checked = []
    for seg in segments:
        if not seg.is_unit:
            raise ValueError(
                f"Cannot consolidate {seg.a}-{seg.b}: endpoints must be one grid unit apart"
            )
        checked.append(seg)
    return checked


def merge_segments(segments: Iterable[Segment]) -> list[_Chain]:
    """Phase 1: attach every segment to the first chain it touches."""
    chains: list[_Chain] = []
    for seg in segments:
        for chain in chains:
            if chain.extend_with(seg):
                break
        else:
            chains.append(_Chain(seg))
    return chains


def join_chains(chains: list[_Chain]) -> tuple[bool, list[_Chain]]:
    """One fold pass. Returns (did_merge, remaining_chains)."""
    did_merge = False
    folded: list[_Chain] = []
    for chain in chains:
        for target in folded:
            if target.absorb(chain):
                did_merge = True
                break
        else:
            folded.append(chain)
    return did_merge, folded


class SegmentConsolidator:
    """Stateless consolidation with counters from the last run."""

    def __init__(self) -> None:
        self.segments_in = 0
        self.chains_after_merge = 0
        self.passes = 0
        self.polylines_out = 0

    def consolidate(self, segments: Iterable[Segment]) -> list[Polyline]:
        checked = _validate(segments)
        self.segments_in = len(checked)

        chains = merge_segments(checked)
        self.chains_after_merge = len(chains)

        self.passes = 0
        did_merge = True
        while did_merge:
            did_merge, chains = join_chains(chains)
            self.passes += 1

        polylines = [chain.to_polyline() for chain in chains]
        self.polylines_out = len(polylines)

        logger.debug(
            "Consolidated %d segments: %d chains after merge, %d join passes, %d polylines",
            self.segments_in,
            self.chains_after_merge,
            self.passes,
            self.polylines_out,
        )
        return polylines


def consolidate_segments(segments: Iterable[Segment]) -> list[Polyline]:
    """Merge unit segments into polylines. Raises ValueError on non-unit input."""
    return SegmentConsolidator().consolidate(segments)

"""Tests for segment consolidation."""

from __future__ import annotations

import numpy as np
import pytest
from shapely.geometry import MultiLineString
from shapely.ops import linemerge

from genart.geometry.consolidate import (
    SegmentConsolidator,
    consolidate_segments,
    join_chains,
    merge_segments,
)
from genart.geometry.runs import extract_wall_segments, split_into_units
from genart.geometry.types import Position, Segment
from genart.maze.grid import GridMaze
from tests.conftest import SHUFFLED_LINE, seg


def _edge_total(polylines) -> int:
    return sum(p.edge_count for p in polylines)


def _signature(polylines):
    """Shape of the output ignoring point order: loops by point set, lines by endpoints."""
    loops = sorted(sorted(set(p.points)) for p in polylines if p.closed)
    lines = sorted(sorted(p.endpoints()) for p in polylines if not p.closed)
    return len(polylines), loops, lines


def test_square_loop_closes(square_loop):
    lines = consolidate_segments(square_loop)
    assert len(lines) == 1
    loop = lines[0]
    assert loop.closed
    assert loop.edge_count == 4
    assert len(loop.points) == 5
    assert loop.points[0] == loop.points[-1]
    assert loop.endpoints() == frozenset()


def test_shuffled_line_becomes_one_polyline():
    lines = consolidate_segments(SHUFFLED_LINE)
    assert len(lines) == 1
    assert not lines[0].closed
    assert lines[0].endpoints() == {Position(0, 0), Position(3, 0)}
    assert lines[0].edge_count == 3


def test_empty_input():
    assert consolidate_segments([]) == []


def test_single_segment():
    lines = consolidate_segments([seg(4, 4, 4, 5)])
    assert len(lines) == 1
    assert lines[0].points == [Position(4, 4), Position(4, 5)]


def test_disjoint_segments_stay_apart():
    lines = consolidate_segments([seg(0, 0, 1, 0), seg(5, 5, 5, 6)])
    assert len(lines) == 2


def test_first_match_then_fixpoint_join():
    segments = [seg(0, 0, 1, 0), seg(2, 0, 3, 0), seg(1, 0, 2, 0)]
    # The bridging segment extends only the first chain it touches
    chains = merge_segments(segments)
    assert len(chains) == 2
    assert list(chains[0].points) == [Position(0, 0), Position(1, 0), Position(2, 0)]

    did_merge, joined = join_chains(chains)
    assert did_merge
    assert len(joined) == 1
    assert list(joined[0].points) == [Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0)]

    did_merge, again = join_chains(joined)
    assert not did_merge
    assert len(again) == 1


@pytest.mark.parametrize(
    "first,second,expected",
    [
        # last == first: append
        ([seg(0, 0, 1, 0)], [seg(1, 0, 2, 0)], [(0, 0), (1, 0), (2, 0)]),
        # first == last: prepend
        ([seg(1, 0, 2, 0)], [seg(0, 0, 1, 0)], [(0, 0), (1, 0), (2, 0)]),
        # first == first: prepend reversed
        ([seg(1, 0, 2, 0)], [seg(1, 0, 0, 0)], [(0, 0), (1, 0), (2, 0)]),
        # last == last: append reversed
        ([seg(0, 0, 1, 0)], [seg(2, 0, 1, 0)], [(0, 0), (1, 0), (2, 0)]),
    ],
)
def test_absorb_cases(first, second, expected):
    a = merge_segments(first)[0]
    b = merge_segments(second)[0]
    assert a.absorb(b)
    assert [tuple(p) for p in a.points] == expected


def test_two_chains_join_into_loop():
    a = merge_segments([seg(0, 0, 1, 0), seg(1, 0, 1, 1)])[0]
    b = merge_segments([seg(1, 1, 0, 1), seg(0, 1, 0, 0)])[0]
    assert a.absorb(b)
    assert a.closed
    assert len(a.points) == 5


def test_closed_loop_takes_no_more_segments(square_loop):
    tail = seg(-1, 0, 0, 0)
    lines = consolidate_segments(square_loop + [tail])
    assert len(lines) == 2
    assert sorted(p.closed for p in lines) == [False, True]
    assert _edge_total(lines) == 5


def test_non_unit_segment_rejected():
    with pytest.raises(ValueError, match="one grid unit"):
        consolidate_segments([seg(0, 0, 1, 0), seg(0, 0, 2, 0)])


def test_diagonal_segment_rejected():
    with pytest.raises(ValueError):
        consolidate_segments([seg(0, 0, 1, 1)])


def test_conservation_on_pattern(pattern_segments):
    lines = consolidate_segments(pattern_segments)
    assert _edge_total(lines) == len(pattern_segments)


@pytest.mark.parametrize("w,h,seed", [(1, 1, 0), (4, 3, 8), (16, 9, 42)])
def test_conservation_on_maze_walls(w, h, seed):
    units = split_into_units(extract_wall_segments(GridMaze.from_seed(w, h, seed)))
    lines = consolidate_segments(units)
    assert _edge_total(lines) == len(units)
    assert len(lines) <= len(units)


@pytest.mark.parametrize("perm_seed", range(5))
def test_order_independence(pattern_segments, perm_seed):
    reference = _signature(consolidate_segments(pattern_segments))
    order = np.random.default_rng(perm_seed).permutation(len(pattern_segments))
    shuffled = [pattern_segments[i] for i in order]
    assert _signature(consolidate_segments(shuffled)) == reference


def test_reversed_segments_same_signature(pattern_segments):
    flipped = [Segment(s.b, s.a) for s in reversed(pattern_segments)]
    assert _signature(consolidate_segments(flipped)) == _signature(
        consolidate_segments(pattern_segments)
    )


def test_matches_shapely_linemerge(pattern_segments):
    lines = consolidate_segments(pattern_segments)
    merged = linemerge(MultiLineString([[tuple(s.a), tuple(s.b)] for s in pattern_segments]))
    count = len(merged.geoms) if hasattr(merged, "geoms") else 1
    assert len(lines) == count


def test_consolidator_counters(square_loop):
    consolidator = SegmentConsolidator()
    consolidator.consolidate(square_loop + [seg(5, 5, 6, 5)])
    assert consolidator.segments_in == 5
    assert consolidator.polylines_out == 2
    assert consolidator.passes >= 1


def test_unit_constructor():
    assert Segment.unit((0, 0), (0, 1)).is_unit
    with pytest.raises(ValueError):
        Segment.unit((0, 0), (0, 2))

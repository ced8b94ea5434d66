"""maze — perfect maze walls as consolidated paths, with the solution on top.

Wall raw cells are collapsed into row/column runs, split back into unit
segments and consolidated, so the whole wall structure draws as a handful
of long paths instead of thousands of tiny strokes.
"""

from __future__ import annotations

import logging

from genart.engine.context import PaintingContext
from genart.engine.registry import painting
from genart.geometry.consolidate import SegmentConsolidator
from genart.geometry.runs import extract_wall_segments, split_into_units
from genart.geometry.types import Polyline
from genart.maze.grid import GridMaze
from genart.svg.serializer import polyline_to_path_d
from genart.utils.geometry import total_length

logger = logging.getLogger(__name__)


def maze_size(ctx: PaintingContext) -> tuple[int, int]:
    """Logical maze size: fixed by config, else two grid units per cell."""
    if ctx.config.maze_cells is not None:
        return ctx.config.maze_cells
    grid_w, grid_h = ctx.config.grid_size(ctx.canvas_width, ctx.canvas_height)
    return max(grid_w // 2, 1), max(grid_h // 2, 1)


def wall_polylines(maze: GridMaze) -> list[Polyline]:
    consolidator = SegmentConsolidator()
    polylines = consolidator.consolidate(split_into_units(extract_wall_segments(maze)))
    logger.debug(
        "Maze walls: %d unit segments -> %d paths",
        consolidator.segments_in,
        consolidator.polylines_out,
    )
    return polylines


@painting(id="maze", description="Perfect maze with its solution path", tags={"grid", "solver"})
def draw_maze(ctx: PaintingContext) -> None:
    width, height = maze_size(ctx)
    maze = GridMaze(width, height, ctx.rng)
    walls = wall_polylines(maze)
    solution = maze.solution_path()

    # One raw cell per unit, centred inside the bordered canvas
    unit = min(ctx.inner_width / maze.raw_width, ctx.inner_height / maze.raw_height)
    offset = (
        ctx.config.border + (ctx.inner_width - unit * maze.raw_width) / 2 + unit / 2,
        ctx.config.border + (ctx.inner_height - unit * maze.raw_height) / 2 + unit / 2,
    )
    palette = ctx.config.palette
    ctx.background = palette.beige

    for line in walls:
        ctx.elements.append({
            "tag": "path",
            "d": polyline_to_path_d(line, scale=unit, offset=offset),
            "fill": "none",
            "stroke": palette.black,
            "stroke-width": f"{unit * ctx.config.maze_wall_stroke:.3f}",
            "stroke-linecap": "square",
            "stroke-linejoin": "miter",
        })

    if solution:
        ctx.elements.append({
            "tag": "path",
            "d": polyline_to_path_d(Polyline(points=solution), scale=unit, offset=offset),
            "fill": "none",
            "stroke": palette.red,
            "stroke-width": f"{unit * ctx.config.maze_solution_stroke:.3f}",
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
        })

    ctx.polylines.extend(walls)
    ctx.features["maze_size"] = (width, height)
    ctx.features["maze_wall_paths"] = len(walls)
    ctx.features["maze_wall_length"] = total_length(walls)
    ctx.features["maze_solution_length"] = len(solution)
    ctx.features["maze_entrance"] = maze.entrance
    ctx.features["maze_exit"] = maze.exit

"""hitomezashi — Japanese running-stitch pattern.

Each column and each row gets one random bit. Along a row the stitches
alternate on/off, starting on or off depending on the row's bit; columns
work the same way. Every grid point ends up touching at most one horizontal
and one vertical stitch, so the stitches consolidate into clean open curves
and closed loops, each drawn in its own colour.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from genart.engine.context import PaintingContext
from genart.engine.registry import painting
from genart.geometry.consolidate import consolidate_segments
from genart.geometry.types import Position, Segment
from genart.svg.serializer import polyline_to_path_d
from genart.utils.geometry import total_length


@dataclass
class Hitomezashi:
    width: int
    height: int
    # One bit per column (drives vertical stitches)
    horizontal: list[bool]
    # One bit per row (drives horizontal stitches)
    vertical: list[bool]

    @classmethod
    def with_random(cls, width: int, height: int, rng: np.random.Generator) -> Hitomezashi:
        horizontal = [bool(b) for b in rng.integers(2, size=width)]
        vertical = [bool(b) for b in rng.integers(2, size=height)]
        return cls(width=width, height=height, horizontal=horizontal, vertical=vertical)

    def segments(self) -> Iterator[Segment]:
        for x in range(self.width):
            for y in range(self.height):
                if y != 0 and ((not self.vertical[y]) ^ (x % 2 == 0)):
                    yield Segment(Position(x, y), Position(x + 1, y))
                if x != 0 and ((not self.horizontal[x]) ^ (y % 2 == 0)):
                    yield Segment(Position(x, y), Position(x, y + 1))


@painting(id="hitomezashi", description="Random hitomezashi stitch pattern", tags={"grid", "pattern"})
def draw_hitomezashi(ctx: PaintingContext) -> None:
    width, height = ctx.config.grid_size(ctx.canvas_width, ctx.canvas_height)
    pattern = Hitomezashi.with_random(width, height, ctx.rng)
    segments = list(pattern.segments())
    lines = consolidate_segments(segments)

    scale_x = ctx.inner_width / (width + 1)
    scale_y = ctx.inner_height / (height + 1)
    offset = (ctx.config.border + 0.5 * scale_x, ctx.config.border + 0.5 * scale_y)
    stroke = f"{ctx.config.hitomezashi_stroke * min(scale_x, scale_y):.3f}"

    palette = ctx.config.palette
    colors = palette.cycle()
    ctx.background = palette.beige

    for index, line in enumerate(lines):
        ctx.elements.append({
            "tag": "path",
            "d": polyline_to_path_d(line, scale=(scale_x, scale_y), offset=offset),
            "fill": "none",
            "stroke": colors[index % len(colors)],
            "stroke-width": stroke,
            "stroke-linecap": "round",
        })

    ctx.elements.append({
        "tag": "rect",
        "x": f"{offset[0]:.3f}",
        "y": f"{offset[1]:.3f}",
        "width": f"{width * scale_x:.3f}",
        "height": f"{height * scale_y:.3f}",
        "fill": "none",
        "stroke": palette.black,
        "stroke-width": stroke,
    })

    ctx.polylines.extend(lines)
    ctx.features["hitomezashi_size"] = (width, height)
    ctx.features["hitomezashi_segments"] = len(segments)
    ctx.features["hitomezashi_loops"] = sum(1 for line in lines if line.closed)
    ctx.features["hitomezashi_length"] = total_length(lines)

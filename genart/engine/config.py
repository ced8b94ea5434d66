"""Render configuration — sizing and colours shared by all paintings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Palette:
    black: str = "#1b1b1b"
    white: str = "#fdfdf8"
    gray: str = "#7a7a78"
    dark_gray: str = "#444442"
    beige: str = "#fceccb"
    dark_beige: str = "#d9c29a"
    darker_beige: str = "#a88f66"
    red: str = "#c8322b"

    def cycle(self) -> list[str]:
        """Stroke colours rotated across consolidated polylines."""
        return [self.black, self.gray, self.dark_gray, self.dark_beige, self.darker_beige]


@dataclass
class RenderConfig:
    """Controls how paintings map grid units to canvas pixels."""

    # Frame around every drawing, in pixels
    border: float = 40.0
    # Pixels per grid unit; the higher, the less complex the drawing
    to_pixel_ratio: float = 30.0

    # Hitomezashi stroke width in grid units
    hitomezashi_stroke: float = 0.2
    # Maze wall stroke width as a fraction of one raw cell
    maze_wall_stroke: float = 0.35
    # Solution stroke width as a fraction of one raw cell
    maze_solution_stroke: float = 0.25
    # Fixed logical maze size; None derives it from the canvas
    maze_cells: tuple[int, int] | None = None

    palette: Palette = field(default_factory=Palette)

    def grid_size(self, canvas_w: float, canvas_h: float) -> tuple[int, int]:
        """Grid units that fit inside the bordered canvas (at least 1 x 1)."""
        w = int((canvas_w - self.border * 2) / self.to_pixel_ratio)
        h = int((canvas_h - self.border * 2) / self.to_pixel_ratio)
        return max(w, 1), max(h, 1)

"""Write SVG output from painting elements and consolidated polylines."""

from __future__ import annotations

from typing import Any

from genart.geometry.types import Polyline, Position


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _xy(pos: Position, scale: tuple[float, float], offset: tuple[float, float]) -> str:
    return f"{_fmt(pos.x * scale[0] + offset[0])} {_fmt(pos.y * scale[1] + offset[1])}"


def polyline_to_path_d(
    polyline: Polyline,
    scale: float | tuple[float, float] = 1.0,
    offset: tuple[float, float] = (0.0, 0.0),
) -> str:
    """Path data for one polyline. Closed loops end with Z instead of the repeated point.

    ``scale`` is either uniform or a per-axis (sx, sy) pair.
    """
    points = polyline.points
    if not points:
        return ""
    if not isinstance(scale, tuple):
        scale = (scale, scale)
    closed = polyline.closed
    body = points[1:-1] if closed else points[1:]
    parts = [f"M {_xy(points[0], scale, offset)}"]
    parts.extend(f"L {_xy(p, scale, offset)}" for p in body)
    if closed:
        parts.append("Z")
    return " ".join(parts)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 1920.0,
    canvas_h: float = 1080.0,
    title: str = "",
    description: str = "",
    background: str | None = None,
) -> str:
    """Generate SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}"'
        f' width="{_fmt(canvas_w)}" height="{_fmt(canvas_h)}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")
    if description:
        lines.append(f"  <desc>{description}</desc>")

    if background:
        lines.append(
            f'  <rect x="0" y="0" width="{_fmt(canvas_w)}" height="{_fmt(canvas_h)}"'
            f' fill="{background}" />'
        )

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)

"""PaintingContext — the single mutable state object a painting draws into.

Drawable output → PaintingContext.elements (SVG element dicts)
Consolidated geometry → PaintingContext.polylines
Per-painting measurements → PaintingContext.features
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from genart.engine.config import RenderConfig
from genart.geometry.types import Polyline


@dataclass
class PaintingContext:
    """Shared state for one render."""

    canvas_width: float = 1920.0
    canvas_height: float = 1080.0
    seed: int = 42
    # Explicit random source; paintings never touch global random state
    rng: np.random.Generator = field(default_factory=lambda: np.random.default_rng(42))
    config: RenderConfig = field(default_factory=RenderConfig)
    background: str | None = None
    title: str = ""

    # SVG elements in paint order; each dict holds "tag" plus attributes
    elements: list[dict[str, Any]] = field(default_factory=list)
    polylines: list[Polyline] = field(default_factory=list)
    features: dict[str, Any] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ValueError(
                f"Canvas {self.canvas_width:g}x{self.canvas_height:g} leaves no room "
                f"inside a {self.config.border:g}px border"
            )

    @classmethod
    def create(
        cls,
        seed: int,
        canvas_width: float = 1920.0,
        canvas_height: float = 1080.0,
        config: RenderConfig | None = None,
    ) -> PaintingContext:
        return cls(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            seed=seed,
            rng=np.random.default_rng(seed),
            config=config or RenderConfig(),
        )

    @property
    def inner_width(self) -> float:
        return self.canvas_width - self.config.border * 2

    @property
    def inner_height(self) -> float:
        return self.canvas_height - self.config.border * 2

    @property
    def num_elements(self) -> int:
        return len(self.elements)

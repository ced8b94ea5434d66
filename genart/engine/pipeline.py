"""Painting pipeline — builds a seeded context, runs paintings, serializes SVG."""

from __future__ import annotations

import logging
import time

from genart.engine.config import RenderConfig
from genart.engine.context import PaintingContext
from genart.engine.registry import PaintingRegistry, get_registry
from genart.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates painting renders."""

    def __init__(
        self,
        registry: PaintingRegistry | None = None,
        config: RenderConfig | None = None,
        default_seed: int = 42,
        canvas_size: tuple[float, float] = (1920.0, 1080.0),
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or RenderConfig()
        self.default_seed = default_seed
        self.canvas_size = canvas_size

    def new_context(
        self,
        seed: int | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> PaintingContext:
        return PaintingContext.create(
            seed=self.default_seed if seed is None else seed,
            canvas_width=width or self.canvas_size[0],
            canvas_height=height or self.canvas_size[1],
            config=self.config,
        )

    def run(self, ctx: PaintingContext, painting_ids: list[str]) -> PaintingContext:
        """Run the given paintings onto one context, in order.

        Unknown IDs raise KeyError before anything is drawn. A painting that
        raises is recorded in ``ctx.errors`` and the rest still run.
        """
        specs = [self.registry.get(pid) for pid in painting_ids]
        start = time.perf_counter()

        for spec in specs:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Render complete: %d/%d paintings, %d elements, seed=%d in %.0fms",
            len(ctx.completed),
            len(specs),
            ctx.num_elements,
            ctx.seed,
            total,
        )
        return ctx

    def render(
        self,
        painting_id: str,
        seed: int | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> PaintingContext:
        ctx = self.new_context(seed=seed, width=width, height=height)
        ctx.title = painting_id
        return self.run(ctx, [painting_id])

    def render_svg(
        self,
        painting_id: str,
        seed: int | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> str:
        return to_svg(self.render(painting_id, seed=seed, width=width, height=height))


def to_svg(ctx: PaintingContext) -> str:
    return serialize_svg(
        ctx.elements,
        canvas_w=ctx.canvas_width,
        canvas_h=ctx.canvas_height,
        title=ctx.title,
        background=ctx.background,
    )


def create_pipeline(config: RenderConfig | None = None) -> Pipeline:
    """Factory function for a pipeline using the configured defaults."""
    from genart.config import settings

    return Pipeline(
        config=config,
        default_seed=settings.default_seed,
        canvas_size=(settings.canvas_width, settings.canvas_height),
    )

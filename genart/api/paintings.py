"""GET /api/paintings, POST /api/paint — list and render registered paintings."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from genart.config import Settings
from genart.dependencies import get_settings
from genart.engine.pipeline import Pipeline, to_svg
from genart.engine.registry import get_registry
from genart.models.requests import PaintRequest
from genart.models.responses import PaintingInfo, PaintingListResponse, PaintResponse

router = APIRouter()


@router.get("/paintings", response_model=PaintingListResponse)
async def list_paintings(tag: str | None = None) -> PaintingListResponse:
    registry = get_registry()
    specs = registry.all() if tag is None else registry.with_tag(tag)
    return PaintingListResponse(
        paintings=[
            PaintingInfo(id=spec.id, description=spec.description, tags=sorted(spec.tags))
            for spec in specs
        ]
    )


@router.post("/paint", response_model=PaintResponse)
async def paint(req: PaintRequest, settings: Settings = Depends(get_settings)) -> PaintResponse:
    if req.painting not in get_registry():
        raise HTTPException(status_code=404, detail=f"Unknown painting: {req.painting}")

    pipeline = Pipeline(
        default_seed=settings.default_seed,
        canvas_size=(settings.canvas_width, settings.canvas_height),
    )
    start = time.perf_counter()
    try:
        ctx = pipeline.render(req.painting, seed=req.seed, width=req.width, height=req.height)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    svg = to_svg(ctx)
    elapsed = (time.perf_counter() - start) * 1000

    return PaintResponse(
        svg=svg,
        painting=req.painting,
        seed=ctx.seed,
        polylines=len(ctx.polylines),
        closed_polylines=sum(1 for p in ctx.polylines if p.closed),
        processing_time_ms=round(elapsed, 2),
        errors=ctx.errors,
    )

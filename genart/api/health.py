"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from genart.engine.registry import get_registry
from genart.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        paintings_registered=get_registry().count,
    )

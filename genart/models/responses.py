"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    paintings_registered: int = 0


class PaintingInfo(BaseModel):
    id: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class PaintingListResponse(BaseModel):
    paintings: list[PaintingInfo] = Field(default_factory=list)


class PaintResponse(BaseModel):
    svg: str
    painting: str
    seed: int
    polylines: int = 0
    closed_polylines: int = 0
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)


class MazeResponse(BaseModel):
    width: int
    height: int
    seed: int
    entrance: tuple[int, int]
    exit: tuple[int, int]
    solution: list[tuple[int, int]] = Field(default_factory=list)
    text: str = ""

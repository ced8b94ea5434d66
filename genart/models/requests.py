"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PaintRequest(BaseModel):
    painting: str = Field(..., description="Registered painting ID (e.g. 'maze')")
    seed: int | None = Field(default=None, ge=0, description="Random seed; configured default if omitted")
    width: float | None = Field(default=None, gt=0, le=10000, description="Canvas width in pixels")
    height: float | None = Field(default=None, gt=0, le=10000, description="Canvas height in pixels")


class MazeRequest(BaseModel):
    width: int = Field(..., gt=0, le=500, description="Logical maze width in cells")
    height: int = Field(..., gt=0, le=500, description="Logical maze height in cells")
    seed: int = Field(default=42, ge=0, description="Random seed")

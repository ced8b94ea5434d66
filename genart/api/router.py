"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from genart.api import health, maze, paintings

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(paintings.router)
api_router.include_router(maze.router)

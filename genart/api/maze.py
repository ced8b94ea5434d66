"""POST /api/maze — carve and solve a maze, return its raw grid and route."""

from __future__ import annotations

from fastapi import APIRouter

from genart.maze.grid import GridMaze
from genart.models.requests import MazeRequest
from genart.models.responses import MazeResponse

router = APIRouter()


@router.post("/maze", response_model=MazeResponse)
async def maze(req: MazeRequest) -> MazeResponse:
    grid = GridMaze.from_seed(req.width, req.height, req.seed)
    solution = grid.solution_path()
    return MazeResponse(
        width=grid.width,
        height=grid.height,
        seed=req.seed,
        entrance=tuple(grid.entrance),
        exit=tuple(grid.exit),
        solution=[tuple(p) for p in solution],
        text=grid.render_text(solution),
    )

from __future__ import annotations

from fastapi import HTTPException

from .config import MAZE_MAX_SIZE
from .engine_grid import check_grid, check_in_bounds, grid_dimensions
from .engine_types import Coordinate, Maze, MazeInputError
from .logging_utils import log_event
from .models import MazePayload


def _reject(logger, event: str, request_id: str, reason: str, detail: str, **fields) -> HTTPException:
    log_event(logger, "WARN", event, request_id=request_id, reason=reason, detail=detail, **fields)
    return HTTPException(status_code=422, detail=detail)


def validate_generate_size(size: int, logger, request_id: str) -> None:
    if size < 1:
        raise _reject(
            logger,
            "generate.request.rejected",
            request_id,
            "size_below_minimum",
            f"Maze size must be at least 1, got {size}.",
            size=size,
        )
    if size > MAZE_MAX_SIZE:
        raise _reject(
            logger,
            "generate.request.rejected",
            request_id,
            "size_above_maximum",
            f"Maze size must be at most {MAZE_MAX_SIZE}, got {size}.",
            size=size,
            max_size=MAZE_MAX_SIZE,
        )


def maze_from_payload(payload: MazePayload, logger, request_id: str) -> Maze:
    max_rows, max_cols = grid_dimensions(MAZE_MAX_SIZE, MAZE_MAX_SIZE)
    if len(payload.grid) > max_rows or any(len(row) > max_cols for row in payload.grid):
        raise _reject(
            logger,
            "solve.request.rejected",
            request_id,
            "grid_too_large",
            f"Maze grid must fit within {max_rows}x{max_cols} cells.",
            grid_rows=len(payload.grid),
        )

    grid = tuple(tuple(row) for row in payload.grid)
    start = Coordinate(payload.start.row, payload.start.col)
    end = Coordinate(payload.end.row, payload.end.col)
    try:
        height, width = check_grid(grid)
        check_in_bounds("start", start, height, width)
        check_in_bounds("end", end, height, width)
    except MazeInputError as exc:
        raise _reject(logger, "solve.request.rejected", request_id, "malformed_maze", str(exc)) from exc

    return Maze(rows=payload.rows, cols=payload.cols, grid=grid, start=start, end=end)

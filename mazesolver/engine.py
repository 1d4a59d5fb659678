from __future__ import annotations

import random
import time

from fastapi import HTTPException

from .engine_generator import generate
from .engine_results import build_maze_response, build_solve_response
from .engine_solver import solve_with_steps, with_solution
from .engine_validation import maze_from_payload, validate_generate_size
from .logging_utils import log_event
from .models import MazePayload


def _elapsed_us(started_at: float) -> int:
    return int((time.perf_counter() - started_at) * 1_000_000)


def generate_maze_request(size: int, seed: int | None, logger, request_id: str, started_at: float) -> dict:
    validate_generate_size(size, logger, request_id)

    try:
        maze = generate(size, random.Random(seed))
    except Exception as exc:
        log_event(
            logger,
            "ERROR",
            "generate.failed",
            request_id=request_id,
            size=size,
            elapsed_us=_elapsed_us(started_at),
            error=repr(exc),
        )
        raise HTTPException(status_code=500, detail="Internal error while generating maze.") from exc

    log_event(
        logger,
        "DEBUG",
        "generate.grid.stats",
        request_id=request_id,
        open_cells=sum(sum(row) for row in maze.grid),
        total_cells=maze.grid_rows * maze.grid_cols,
    )
    log_event(
        logger,
        "INFO",
        "generate.done",
        request_id=request_id,
        size=size,
        seeded=seed is not None,
        grid_rows=maze.grid_rows,
        grid_cols=maze.grid_cols,
        elapsed_us=_elapsed_us(started_at),
    )
    return build_maze_response(maze)


def solve_maze_request(
    payload: MazePayload,
    logger,
    request_id: str,
    started_at: float,
    include_steps: bool,
) -> dict:
    maze = maze_from_payload(payload, logger, request_id)

    try:
        result = solve_with_steps(maze)
    except Exception as exc:
        log_event(
            logger,
            "ERROR",
            "solve.failed",
            request_id=request_id,
            elapsed_us=_elapsed_us(started_at),
            error=repr(exc),
        )
        raise HTTPException(status_code=500, detail="Internal error while solving maze.") from exc

    log_event(
        logger,
        "DEBUG",
        "solve.grid.stats",
        request_id=request_id,
        grid_rows=maze.grid_rows,
        grid_cols=maze.grid_cols,
        start=maze.start.to_dict(),
        end=maze.end.to_dict(),
    )
    log_event(
        logger,
        "INFO",
        "solve.done",
        request_id=request_id,
        found=result.found,
        path_length=result.path_length,
        visited=len(result.visited_order),
        include_steps=include_steps,
        elapsed_us=_elapsed_us(started_at),
    )
    return build_solve_response(with_solution(maze, result), result, include_steps)

from __future__ import annotations

from .engine_types import Coordinate, Maze, SolveResult


def _cells(points: tuple[Coordinate, ...]) -> list[dict]:
    return [point.to_dict() for point in points]


def build_maze_response(maze: Maze) -> dict:
    return {
        "rows": maze.rows,
        "cols": maze.cols,
        "grid": [list(row) for row in maze.grid],
        "start": maze.start.to_dict(),
        "end": maze.end.to_dict(),
        "solution": _cells(maze.solution) if maze.solution else None,
    }


def build_solve_response(solved: Maze, result: SolveResult, include_steps: bool) -> dict:
    response = {
        "solution": _cells(solved.solution),
        "pathLength": result.path_length,
        "found": result.found,
    }
    if include_steps:
        response["visitedOrder"] = _cells(result.visited_order)
    return response

from __future__ import annotations

import random

from .engine_grid import DIRECTIONS, PATH, WALL, grid_dimensions, is_in_bounds, room_to_cell
from .engine_types import Coordinate, Maze, MazeInputError


def _unvisited_neighbors(
    room: Coordinate,
    rows: int,
    cols: int,
    visited: list[list[bool]],
) -> list[Coordinate]:
    neighbors: list[Coordinate] = []
    for d_row, d_col in DIRECTIONS:
        next_row = room.row + d_row
        next_col = room.col + d_col
        if is_in_bounds(next_row, next_col, rows, cols) and not visited[next_row][next_col]:
            neighbors.append(Coordinate(next_row, next_col))
    return neighbors


def carve_passages(rows: int, cols: int, rng) -> list[list[int]]:
    """
    Randomized backtracking over the logical rooms.

    Each room is pushed once, so the loop ends after ``2 * rows * cols - 1``
    iterations and the opened walls form a spanning tree over the rooms.
    """
    grid_rows, grid_cols = grid_dimensions(rows, cols)
    grid = [[WALL] * grid_cols for _ in range(grid_rows)]
    visited = [[False] * cols for _ in range(rows)]

    stack = [Coordinate(0, 0)]
    visited[0][0] = True

    while stack:
        current = stack[-1]
        cell = room_to_cell(current)
        grid[cell.row][cell.col] = PATH

        neighbors = _unvisited_neighbors(current, rows, cols, visited)
        if not neighbors:
            stack.pop()
            continue

        chosen = neighbors[rng.randrange(len(neighbors))]
        visited[chosen.row][chosen.col] = True
        chosen_cell = room_to_cell(chosen)
        grid[(cell.row + chosen_cell.row) // 2][(cell.col + chosen_cell.col) // 2] = PATH
        stack.append(chosen)

    return grid


def generate(size: int, rng: random.Random | None = None) -> Maze:
    if isinstance(size, bool) or not isinstance(size, int):
        raise MazeInputError(f"Maze size must be an integer, got {size!r}.")
    if size < 1:
        raise MazeInputError(f"Maze size must be at least 1, got {size}.")

    rows = cols = size
    grid = carve_passages(rows, cols, rng if rng is not None else random.Random())
    grid_rows, grid_cols = grid_dimensions(rows, cols)

    # Entrance and exit markers on the border, outside the room graph.
    grid[0][1] = PATH
    grid[grid_rows - 1][grid_cols - 2] = PATH

    return Maze(
        rows=rows,
        cols=cols,
        grid=tuple(tuple(row) for row in grid),
        start=Coordinate(1, 1),
        end=Coordinate(grid_rows - 2, grid_cols - 2),
    )

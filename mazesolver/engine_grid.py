"""Cell encoding and coordinate helpers shared by the generator and the solver."""

from __future__ import annotations

from typing import Sequence

from .engine_types import Coordinate, MazeInputError

WALL = 0
PATH = 1

# up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_wall(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    return grid[r][c] == WALL


def is_path(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    return grid[r][c] == PATH


def is_in_bounds(r: int, c: int, height: int, width: int) -> bool:
    return 0 <= r < height and 0 <= c < width


def grid_dimensions(rows: int, cols: int) -> tuple[int, int]:
    return 2 * rows + 1, 2 * cols + 1


def room_to_cell(room: Coordinate) -> Coordinate:
    """Map a logical room to the full-grid cell at its center."""
    return Coordinate(2 * room.row + 1, 2 * room.col + 1)


def check_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(height, width)`` of a non-empty rectangular wall/path grid."""
    if not grid:
        raise MazeInputError("Maze grid must have at least one row.")
    width = len(grid[0])
    if width == 0:
        raise MazeInputError("Maze grid rows must not be empty.")
    for row_idx, row in enumerate(grid):
        if len(row) != width:
            raise MazeInputError(
                f"Maze grid must be rectangular: row {row_idx} has {len(row)} cells, expected {width}."
            )
        for value in row:
            if type(value) is not int or value not in (WALL, PATH):
                raise MazeInputError(
                    f"Maze grid cells must be {WALL} (wall) or {PATH} (path), got {value!r} in row {row_idx}."
                )
    return len(grid), width


def check_in_bounds(name: str, point: Coordinate, height: int, width: int) -> None:
    if not is_in_bounds(point.row, point.col, height, width):
        raise MazeInputError(
            f"Maze {name} ({point.row}, {point.col}) is outside the {height}x{width} grid."
        )

from __future__ import annotations

from collections import deque
from dataclasses import replace

from .engine_grid import DIRECTIONS, check_grid, check_in_bounds, is_in_bounds, is_path
from .engine_types import Coordinate, Maze, SolveResult

_NO_PARENT = -1


def _reconstruct_path(parent: list[int], start_idx: int, end_idx: int, width: int) -> tuple[Coordinate, ...]:
    path: list[Coordinate] = []
    node = end_idx
    while True:
        path.append(Coordinate(node // width, node % width))
        if node == start_idx:
            break
        node = parent[node]
    path.reverse()
    return tuple(path)


def solve_with_steps(maze: Maze) -> SolveResult:
    """
    Breadth-first search from ``maze.start`` to ``maze.end`` over PATH cells.

    ``visited_order`` lists cells in discovery order and always starts with
    ``start``. When ``end`` is unreachable the result has ``found=False``, an
    empty path, and every cell of the component reachable from ``start``.
    """
    grid = maze.grid
    height, width = check_grid(grid)
    check_in_bounds("start", maze.start, height, width)
    check_in_bounds("end", maze.end, height, width)

    start_idx = maze.start.row * width + maze.start.col
    end_idx = maze.end.row * width + maze.end.col

    visited = bytearray(height * width)
    parent = [_NO_PARENT] * (height * width)
    visited_order = [maze.start]
    visited[start_idx] = 1
    queue = deque([maze.start])

    while queue:
        current = queue.popleft()
        current_idx = current.row * width + current.col
        if current_idx == end_idx:
            return SolveResult(
                path=_reconstruct_path(parent, start_idx, end_idx, width),
                visited_order=tuple(visited_order),
                found=True,
            )

        for d_row, d_col in DIRECTIONS:
            next_row = current.row + d_row
            next_col = current.col + d_col
            if not is_in_bounds(next_row, next_col, height, width):
                continue
            next_idx = next_row * width + next_col
            if visited[next_idx] or not is_path(grid, next_row, next_col):
                continue
            visited[next_idx] = 1
            parent[next_idx] = current_idx
            neighbor = Coordinate(next_row, next_col)
            queue.append(neighbor)
            visited_order.append(neighbor)

    return SolveResult(path=(), visited_order=tuple(visited_order), found=False)


def solve(maze: Maze) -> tuple[Coordinate, ...]:
    return solve_with_steps(maze).path


def with_solution(maze: Maze, result: SolveResult) -> Maze:
    return replace(maze, solution=result.path)

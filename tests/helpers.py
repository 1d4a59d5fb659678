from collections import deque

from mazesolver.engine_grid import PATH
from mazesolver.engine_types import Coordinate, Maze


def build_maze(rows_text: list[str], start: tuple[int, int], end: tuple[int, int]) -> Maze:
    """Build a maze from strings where ``#`` is a wall and ``.`` is a path."""
    grid = tuple(tuple(0 if ch == "#" else 1 for ch in line) for line in rows_text)
    return Maze(
        rows=max(1, len(grid) // 2),
        cols=max(1, len(grid[0]) // 2),
        grid=grid,
        start=Coordinate(*start),
        end=Coordinate(*end),
    )


def bfs_distances(grid, start: Coordinate) -> dict[tuple[int, int], int]:
    height, width = len(grid), len(grid[0])
    distances = {(start.row, start.col): 0}
    queue = deque([(start.row, start.col)])
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < height and 0 <= nc < width and grid[nr][nc] == PATH and (nr, nc) not in distances:
                distances[(nr, nc)] = distances[(r, c)] + 1
                queue.append((nr, nc))
    return distances

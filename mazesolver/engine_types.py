from __future__ import annotations

from dataclasses import dataclass, field

Grid = tuple[tuple[int, ...], ...]


class MazeInputError(ValueError):
    """Raised for a size or maze the algorithms refuse to work on."""


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def to_dict(self) -> dict:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class Maze:
    rows: int
    cols: int
    grid: Grid
    start: Coordinate
    end: Coordinate
    solution: tuple[Coordinate, ...] = field(default_factory=tuple)

    @property
    def grid_rows(self) -> int:
        return len(self.grid)

    @property
    def grid_cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


@dataclass(frozen=True)
class SolveResult:
    path: tuple[Coordinate, ...]
    visited_order: tuple[Coordinate, ...]
    found: bool

    @property
    def path_length(self) -> int:
        return len(self.path)

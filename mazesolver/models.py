from typing import Annotated

from pydantic import BaseModel, Field, StrictInt


CellValue = Annotated[StrictInt, Field(ge=0, le=1)]


class Cell(BaseModel):
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class MazePayload(BaseModel):
    rows: int = Field(..., ge=1)
    cols: int = Field(..., ge=1)
    grid: list[list[CellValue]]
    start: Cell
    end: Cell
    solution: list[Cell] | None = None


class SolveResponse(BaseModel):
    solution: list[Cell]
    pathLength: int
    found: bool


class SolveStepsResponse(SolveResponse):
    visitedOrder: list[Cell]


class HealthResponse(BaseModel):
    status: str

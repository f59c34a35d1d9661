"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..solver.generator import MAX_CLUES, MIN_CLUES, Difficulty


class ConflictCell(BaseModel):
    """A cell that breaks a row, column or box constraint."""

    row: int = Field(ge=0, le=8, description="Row index (0-8)")
    col: int = Field(ge=0, le=8, description="Column index (0-8)")


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": [
                [5, 3, 0, 0, 7, 0, 0, 0, 0],
                [6, 0, 0, 1, 9, 5, 0, 0, 0],
                [0, 9, 8, 0, 0, 0, 0, 6, 0],
                [8, 0, 0, 0, 6, 0, 0, 0, 3],
                [4, 0, 0, 8, 0, 3, 0, 0, 1],
                [7, 0, 0, 0, 2, 0, 0, 0, 6],
                [0, 6, 0, 0, 0, 0, 2, 8, 0],
                [0, 0, 0, 4, 1, 9, 0, 0, 5],
                [0, 0, 0, 0, 8, 0, 0, 7, 9],
            ]
        }


class SolveStatsModel(BaseModel):
    """Instrumentation of one backtracking search."""

    solved: bool = Field(description="Whether the search found a solution")
    backtrack_count: int = Field(ge=0, description="Number of undone placements")
    elapsed_ms: float = Field(ge=0, description="Search wall-clock time in milliseconds")


class ValidateRequest(BaseModel):
    """Request to check a grid for conflicts."""

    grid: SudokuGrid = Field(description="The grid to validate")


class ValidateResponse(BaseModel):
    """Conflicts found in a grid."""

    valid: bool = Field(description="Whether the grid has no conflicts")
    complete: bool = Field(description="Whether every cell is filled")
    solved: bool = Field(description="Whether the grid is a finished solution")
    conflicts: list[ConflictCell] = Field(description="Conflicting cells, row-major")


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")
    force: bool = Field(
        default=False,
        description="Attempt to solve even if the grid has conflicting cells",
    )


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    stats: SolveStatsModel | None = Field(
        default=None, description="Search statistics (if a search ran)"
    )
    conflicts: list[ConflictCell] = Field(
        default_factory=list, description="Conflicting cells in the original grid"
    )
    message: str = Field(description="Status message")


class GenerateRequest(BaseModel):
    """Request to generate a new puzzle."""

    clue_count: int | None = Field(
        default=None,
        ge=MIN_CLUES,
        le=MAX_CLUES,
        description="Number of given cells to keep",
    )
    difficulty: Difficulty | None = Field(
        default=None, description="Difficulty preset, used when clue_count is unset"
    )


class GenerateResponse(BaseModel):
    """A generated puzzle and the solution it was cut from."""

    puzzle: list[list[int]] = Field(description="Puzzle grid (0 for empty cells)")
    solution: list[list[int]] = Field(description="Full solution grid")
    clue_count: int = Field(description="Number of given cells in the puzzle")
    difficulty: Difficulty | None = Field(
        default=None, description="Difficulty preset used, if any"
    )
    stats: SolveStatsModel = Field(description="Stats of the full-solution search")


class SampleResponse(BaseModel):
    """A built-in sample puzzle."""

    grid: list[list[int]] = Field(description="Sample puzzle grid")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    worker_ready: bool = Field(description="Whether the solver worker is running")
    worker_threads: int | None = Field(
        default=None, description="Solver worker thread count"
    )

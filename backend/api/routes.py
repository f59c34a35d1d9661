"""API routes for the Sudoku engine."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from ..models.schemas import (
    ConflictCell,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    SampleResponse,
    SolveRequest,
    SolveResponse,
    SolveStatsModel,
    ValidateRequest,
    ValidateResponse,
)
from ..solver.backtracking import SolveStats
from ..solver.constraints import (
    Conflict,
    is_board_complete,
    is_valid_grid,
    validate_board,
)
from ..solver.generator import MAX_CLUES, MIN_CLUES, clues_for_difficulty
from ..solver.worker import SolverWorker

router = APIRouter()
_WORKER: SolverWorker | None = None
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)

DEFAULT_CLUES = 32

SAMPLE_PUZZLE = [
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


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _default_clue_count() -> int:
    clue_count = _env("SUDOKU_DEFAULT_CLUES", DEFAULT_CLUES)
    if not MIN_CLUES <= clue_count <= MAX_CLUES:
        _LOGGER.warning(
            "SUDOKU_DEFAULT_CLUES=%d outside [%d, %d], using %d",
            clue_count,
            MIN_CLUES,
            MAX_CLUES,
            DEFAULT_CLUES,
        )
        return DEFAULT_CLUES
    return clue_count


def _get_worker() -> SolverWorker:
    global _WORKER

    if _WORKER is None or not _WORKER.is_running:
        _WORKER = SolverWorker(max_workers=_env("SUDOKU_WORKER_THREADS", 2))
        _LOGGER.info("Started solver worker with %d thread(s)", _WORKER.max_workers)
    return _WORKER


def _shutdown_worker() -> None:
    global _WORKER

    if _WORKER is not None:
        _WORKER.shutdown(wait=True)
        _WORKER = None


def _conflict_cells(conflicts: list[Conflict]) -> list[ConflictCell]:
    return [ConflictCell(row=c.row, col=c.col) for c in conflicts]


def _stats_model(stats: SolveStats) -> SolveStatsModel:
    return SolveStatsModel(**asdict(stats))


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    worker = _WORKER

    return HealthResponse(
        status="healthy",
        worker_ready=worker is not None and worker.is_running,
        worker_threads=worker.max_workers if worker else None,
    )


@router.get("/api/v1/sudoku:sample", response_model=SampleResponse, tags=["Sudoku"])
async def sample_puzzle():
    """Return the classic sample puzzle."""
    return SampleResponse(grid=[list(row) for row in SAMPLE_PUZZLE])


@router.post(
    "/api/v1/sudoku:validate", response_model=ValidateResponse, tags=["Sudoku"]
)
async def validate_sudoku(request: ValidateRequest):
    """List the cells of a grid that break the Sudoku rules."""
    grid = request.grid.cells
    if not is_valid_grid(grid):
        raise HTTPException(status_code=400, detail="Invalid Sudoku grid format")

    conflicts = validate_board(grid)
    complete = is_board_complete(grid)
    return ValidateResponse(
        valid=not conflicts,
        complete=complete,
        solved=complete and not conflicts,
        conflicts=_conflict_cells(conflicts),
    )


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        },
        "force": false
    }
    Where each row is a list of 9 integers (0 for empty).

    Grids with conflicting cells are returned unsolved together with the
    conflicts unless ``force`` is set.
    """
    try:
        grid = request.grid.cells

        # Validate grid format
        if not is_valid_grid(grid):
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message="Invalid Sudoku grid format",
            )

        conflicts = validate_board(grid)
        if conflicts and not request.force:
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                conflicts=_conflict_cells(conflicts),
                message=(
                    f"Found {len(conflicts)} conflicting cell(s). The board has "
                    "duplicates in a row, column, or box."
                ),
            )

        solved, stats = await _get_worker().solve(grid)

        if not stats.solved:
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                stats=_stats_model(stats),
                conflicts=_conflict_cells(conflicts),
                message=(
                    "The given cells conflict, so the board cannot be solved"
                    if conflicts
                    else "No solution exists for this configuration"
                ),
            )

        return SolveResponse(
            success=True,
            original=grid,
            solved=solved,
            stats=_stats_model(stats),
            message="Puzzle solved successfully",
        )

    except Exception as e:
        _LOGGER.exception("Solve request failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:generate", response_model=GenerateResponse, tags=["Sudoku"]
)
async def generate_sudoku(request: GenerateRequest):
    """
    Generate a random puzzle.

    ``clue_count`` takes precedence over ``difficulty``; with neither set the
    ``SUDOKU_DEFAULT_CLUES`` setting is used.
    """
    if request.clue_count is not None:
        clue_count = request.clue_count
    elif request.difficulty is not None:
        clue_count = clues_for_difficulty(request.difficulty)
    else:
        clue_count = _default_clue_count()

    try:
        result = await _get_worker().generate(clue_count)
    except Exception as e:
        _LOGGER.exception("Generate request failed")
        raise HTTPException(status_code=500, detail=str(e))

    return GenerateResponse(
        puzzle=result.puzzle,
        solution=result.solution,
        clue_count=result.clue_count,
        difficulty=request.difficulty,
        stats=_stats_model(result.stats),
    )

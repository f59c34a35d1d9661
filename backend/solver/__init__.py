"""Solver module exports."""

from .backtracking import (
    SolveStats,
    SudokuSolver,
    ascending_cube,
    build_candidate_cube,
    solve_board,
    solve_board_with_stats,
)
from .constraints import (
    Conflict,
    clone_board,
    is_board_complete,
    is_board_solved,
    is_valid_placement,
    validate_board,
)
from .generator import (
    Difficulty,
    GeneratedPuzzle,
    generate_full_solution,
    generate_puzzle,
)
from .worker import SolverWorker

__all__ = [
    "Conflict",
    "Difficulty",
    "GeneratedPuzzle",
    "SolveStats",
    "SolverWorker",
    "SudokuSolver",
    "ascending_cube",
    "build_candidate_cube",
    "clone_board",
    "generate_full_solution",
    "generate_puzzle",
    "is_board_complete",
    "is_board_solved",
    "is_valid_placement",
    "solve_board",
    "solve_board_with_stats",
    "validate_board",
]

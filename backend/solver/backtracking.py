"""Sudoku solver using randomized backtracking."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constraints import Board, is_valid_placement, validate_board


CandidateCube = List[List[List[int]]]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveStats:
    """Outcome of one solve attempt."""

    solved: bool
    backtrack_count: int
    elapsed_ms: float


def build_candidate_cube(rng: Optional[random.Random] = None) -> CandidateCube:
    """
    Build an independent random ordering of 1-9 for every cell.

    Args:
        rng: Random source; the module-level generator is used when omitted

    Returns:
        9x9 grid of shuffled digit lists
    """
    shuffle = rng.shuffle if rng is not None else random.shuffle
    cube: CandidateCube = []
    for _ in range(9):
        row = []
        for _ in range(9):
            digits = list(range(1, 10))
            shuffle(digits)
            row.append(digits)
        cube.append(row)
    return cube


def ascending_cube() -> CandidateCube:
    """Candidate cube that tries 1-9 in order, for reproducible solves."""
    return [[list(range(1, 10)) for _ in range(9)] for _ in range(9)]


class SudokuSolver:
    """Solves Sudoku boards in place using depth-first backtracking."""

    def __init__(self, cube: Optional[CandidateCube] = None):
        self.cube = cube if cube is not None else build_candidate_cube()
        self.backtrack_count = 0

    def solve(self, board: Board) -> SolveStats:
        """
        Fill every empty cell of ``board``.

        Args:
            board: 9x9 list of lists with 0 for empty cells, mutated in place

        Returns:
            SolveStats for this attempt. On failure the board is left as given.
        """
        self.backtrack_count = 0
        start = time.perf_counter()
        if validate_board(board):
            solved = False
        else:
            solved = self._solve_recursive(board)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        stats = SolveStats(
            solved=solved,
            backtrack_count=self.backtrack_count,
            elapsed_ms=elapsed_ms,
        )
        _LOGGER.debug(
            "Solve finished: solved=%s backtracks=%d elapsed=%.3fms",
            stats.solved,
            stats.backtrack_count,
            stats.elapsed_ms,
        )
        return stats

    def _solve_recursive(self, board: Board) -> bool:
        """Recursively solve the board using backtracking."""
        empty = self._find_empty_cell(board)
        if not empty:
            return True

        row, col = empty

        for num in self.cube[row][col]:
            if is_valid_placement(board, row, col, num):
                board[row][col] = num

                if self._solve_recursive(board):
                    return True

                board[row][col] = 0
                self.backtrack_count += 1

        return False

    def _find_empty_cell(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Find the next empty cell (contains 0) in row-major order.

        Returns:
            Tuple of (row, col) if empty cell found, None otherwise
        """
        for r in range(9):
            for c in range(9):
                if board[r][c] == 0:
                    return (r, c)
        return None


def solve_board_with_stats(
    board: Board, cube: Optional[CandidateCube] = None
) -> SolveStats:
    """Solve ``board`` in place and report statistics."""
    return SudokuSolver(cube).solve(board)


def solve_board(board: Board) -> bool:
    """Convenience function to solve a board in place with a random search order."""
    return solve_board_with_stats(board).solved

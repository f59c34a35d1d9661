"""Puzzle generation by solving an empty board and removing cells."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .backtracking import SolveStats, build_candidate_cube, solve_board_with_stats
from .constraints import Board, clone_board

_LOGGER = logging.getLogger(__name__)

MIN_CLUES = 17
MAX_CLUES = 81


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


DIFFICULTY_CLUES = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 32,
    Difficulty.HARD: 26,
    Difficulty.EXPERT: 22,
}


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A puzzle together with the full solution it was cut from."""

    puzzle: Board
    solution: Board
    stats: SolveStats

    @property
    def clue_count(self) -> int:
        return sum(1 for row in self.puzzle for cell in row if cell != 0)


def clues_for_difficulty(difficulty: Difficulty | str) -> int:
    """Map a difficulty name to its clue count."""
    try:
        level = Difficulty(difficulty)
    except ValueError:
        choices = ", ".join(d.value for d in Difficulty)
        raise ValueError(
            f"Unknown difficulty '{difficulty}', expected one of: {choices}"
        ) from None
    return DIFFICULTY_CLUES[level]


def generate_full_solution(
    rng: Optional[random.Random] = None,
) -> tuple[Board, SolveStats]:
    """Solve an empty board with a freshly randomized candidate order."""
    board = [[0] * 9 for _ in range(9)]
    stats = solve_board_with_stats(board, build_candidate_cube(rng))
    return board, stats


def generate_puzzle(
    clue_count: int, rng: Optional[random.Random] = None
) -> GeneratedPuzzle:
    """
    Generate a puzzle with ``clue_count`` given cells.

    The remaining cells are picked uniformly at random. The puzzle is not
    checked for a unique solution.

    Args:
        clue_count: Number of non-empty cells to keep
        rng: Random source for both the solution and the removal order

    Returns:
        GeneratedPuzzle with the puzzle, its source solution and solve stats
    """
    solution, stats = generate_full_solution(rng)
    puzzle = clone_board(solution)

    positions = [(r, c) for r in range(9) for c in range(9)]
    if rng is not None:
        rng.shuffle(positions)
    else:
        random.shuffle(positions)

    remove_count = max(0, min(81, 81 - clue_count))
    for r, c in positions[:remove_count]:
        puzzle[r][c] = 0

    _LOGGER.info(
        "Generated puzzle with %d clues (backtracks=%d, elapsed=%.3fms)",
        81 - remove_count,
        stats.backtrack_count,
        stats.elapsed_ms,
    )
    return GeneratedPuzzle(puzzle=puzzle, solution=solution, stats=stats)

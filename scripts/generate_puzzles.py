"""Generate random Sudoku puzzles from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.constraints import Board
from backend.solver.generator import (
    MAX_CLUES,
    MIN_CLUES,
    Difficulty,
    GeneratedPuzzle,
    clues_for_difficulty,
    generate_puzzle,
)

LOGGER = logging.getLogger("generate_puzzles")


def format_board(board: Board) -> str:
    """Render a board as text with box separators ('.' for empty cells)."""
    lines = []
    for r, row in enumerate(board):
        cells = []
        for c, value in enumerate(row):
            cells.append("." if value == 0 else str(value))
            if c in (2, 5):
                cells.append("|")
        lines.append(" ".join(cells))
        if r in (2, 5):
            lines.append("------+-------+------")
    return "\n".join(lines)


def puzzle_to_dict(result: GeneratedPuzzle) -> dict:
    return {
        "puzzle": result.puzzle,
        "solution": result.solution,
        "clue_count": result.clue_count,
        "stats": {
            "solved": result.stats.solved,
            "backtrack_count": result.stats.backtrack_count,
            "elapsed_ms": result.stats.elapsed_ms,
        },
    }


def resolve_clue_count(clues: Optional[int], difficulty: Optional[str]) -> int:
    if clues is not None:
        if not MIN_CLUES <= clues <= MAX_CLUES:
            raise ValueError(f"--clues must be between {MIN_CLUES} and {MAX_CLUES}")
        return clues
    return clues_for_difficulty(difficulty or Difficulty.MEDIUM)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random Sudoku puzzles")
    parser.add_argument("--count", type=int, default=1, help="Number of puzzles")
    parser.add_argument(
        "--clues",
        type=int,
        default=None,
        help=f"Given cells to keep ({MIN_CLUES}-{MAX_CLUES}), overrides --difficulty",
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--json", action="store_true", help="Emit JSON lines")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    try:
        clue_count = resolve_clue_count(args.clues, args.difficulty)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 2

    rng = random.Random(args.seed)
    total_ms = 0.0
    for index in range(max(0, args.count)):
        result = generate_puzzle(clue_count, rng=rng)
        total_ms += result.stats.elapsed_ms
        if args.json:
            print(json.dumps(puzzle_to_dict(result)))
            continue
        print(f"# Puzzle {index + 1} ({result.clue_count} clues)")
        print(format_board(result.puzzle))
        print()

    LOGGER.info("Generated %d puzzle(s) in %.2fms of search", args.count, total_ms)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

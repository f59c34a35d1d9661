"""Run solve and generate jobs off the calling thread."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from .backtracking import CandidateCube, SolveStats, solve_board_with_stats
from .constraints import Board, clone_board
from .generator import GeneratedPuzzle, generate_puzzle

_LOGGER = logging.getLogger(__name__)

_R = TypeVar("_R")


def _solve_job(board: Board, cube: Optional[CandidateCube]) -> tuple[Board, SolveStats]:
    stats = solve_board_with_stats(board, cube)
    return board, stats


class SolverWorker:
    """Thread pool that owns long-running backtracking searches."""

    def __init__(self, max_workers: int = 2):
        self.max_workers = max(1, int(max_workers))
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="sudoku-solver"
        )
        self._closed = False

    @property
    def is_running(self) -> bool:
        return not self._closed

    def submit_solve(
        self,
        board: Board,
        cube: Optional[CandidateCube] = None,
        callback: Optional[Callable[[tuple[Board, SolveStats]], None]] = None,
        error_callback: Optional[Callable[[BaseException], None]] = None,
    ) -> Future:
        """
        Solve a copy of ``board`` in the pool.

        The future resolves to ``(solved_board, stats)``; the caller's board is
        never touched. If the job raises, ``error_callback`` receives the
        exception instead of ``callback``.
        """
        future = self._executor.submit(_solve_job, clone_board(board), cube)
        return self._attach(future, callback, error_callback)

    def submit_generate(
        self,
        clue_count: int,
        callback: Optional[Callable[[GeneratedPuzzle], None]] = None,
        error_callback: Optional[Callable[[BaseException], None]] = None,
    ) -> Future:
        future = self._executor.submit(generate_puzzle, clue_count)
        return self._attach(future, callback, error_callback)

    async def solve(
        self, board: Board, cube: Optional[CandidateCube] = None
    ) -> tuple[Board, SolveStats]:
        return await asyncio.wrap_future(self.submit_solve(board, cube))

    async def generate(self, clue_count: int) -> GeneratedPuzzle:
        return await asyncio.wrap_future(self.submit_generate(clue_count))

    def shutdown(self, wait: bool = True) -> None:
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)

    def _attach(
        self,
        future: Future,
        callback: Optional[Callable[[_R], None]],
        error_callback: Optional[Callable[[BaseException], None]],
    ) -> Future:
        if callback is None and error_callback is None:
            return future

        def _deliver(done: Future) -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                _LOGGER.error("Solver job failed", exc_info=error)
                handler, payload = error_callback, error
            else:
                handler, payload = callback, done.result()
            if handler is None:
                return
            try:
                handler(payload)
            except Exception:
                _LOGGER.exception("Solver completion callback raised")

        future.add_done_callback(_deliver)
        return future

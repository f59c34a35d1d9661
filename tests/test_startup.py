"""Tests for application startup behavior."""

import pytest

from backend import main
from backend.api import routes


@pytest.mark.asyncio
async def test_app_lifespan_starts_and_stops_worker():
    async with main._app_lifespan(main.app):
        assert routes._WORKER is not None
        assert routes._WORKER.is_running is True
        worker = routes._WORKER

    assert routes._WORKER is None
    assert worker.is_running is False


@pytest.mark.asyncio
async def test_app_lifespan_fails_when_worker_cannot_start(monkeypatch):
    def _broken_worker():
        raise RuntimeError("no threads available")

    monkeypatch.setattr(main, "_get_worker", _broken_worker)

    with pytest.raises(RuntimeError, match="no threads available"):
        async with main._app_lifespan(main.app):
            pass


def test_worker_threads_read_from_env(monkeypatch):
    monkeypatch.setenv("SUDOKU_WORKER_THREADS", "3")
    routes._shutdown_worker()
    try:
        assert routes._get_worker().max_workers == 3
    finally:
        routes._shutdown_worker()


def test_env_falls_back_on_invalid_value(monkeypatch):
    monkeypatch.setenv("SUDOKU_DEFAULT_CLUES", "lots")
    assert routes._env("SUDOKU_DEFAULT_CLUES", 32) == 32

    monkeypatch.delenv("SUDOKU_DEFAULT_CLUES")
    assert routes._env("SUDOKU_DEFAULT_CLUES", 32) == 32

"""Main FastAPI application for the Sudoku engine."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _get_worker, _shutdown_worker, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Start the solver worker before serving and stop it on shutdown."""
    _get_worker()
    try:
        yield
    finally:
        _shutdown_worker()


app = FastAPI(
    title="Sudoku Engine API",
    description="API for validating, solving and generating Sudoku puzzles",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Engine API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)

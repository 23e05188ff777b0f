"""Main FastAPI application for Sudoku Solver."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import API_VERSION, router
from .config import configure_logging, load_settings

_LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Validate configuration so misconfiguration fails at startup."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise RuntimeError(f"Invalid configuration at startup: {exc}") from exc
    configure_logging(level=settings.log_level)
    _LOGGER.info(
        "Sudoku Solver API %s starting (cors_origins=%s)",
        API_VERSION,
        ",".join(settings.cors_origins),
    )
    yield


def _cors_origins() -> list[str]:
    try:
        return list(load_settings().cors_origins)
    except ValueError:
        # Reported by the lifespan hook.
        return ["*"]


app = FastAPI(
    title="Sudoku Solver API",
    description="API for solving Sudoku puzzles with a CSP backtracking search",
    version=API_VERSION,
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)

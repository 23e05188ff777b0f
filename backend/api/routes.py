"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from ..config import load_settings
from ..fileio.sudoku_file import format_sudoku, parse_sudoku_text
from ..models.schemas import (
    HealthResponse,
    ParseRequest,
    ParseResponse,
    SolveRequest,
    SolveResponse,
    SolveStats,
)
from ..solver.backtracking import SudokuSolver, count_blanks, is_valid_grid
from ..solver.exceptions import InvalidSudokuFileError

API_VERSION = "1.0.0"

router = APIRouter()
_LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=API_VERSION)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    grid = request.grid.cells

    if not is_valid_grid(grid):
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    try:
        solver = SudokuSolver()
        start = time.perf_counter()
        solved = solver.solve(grid)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
    except Exception as e:
        _LOGGER.exception("Solver failed on a validated grid")
        raise HTTPException(status_code=500, detail=str(e))

    stats = SolveStats(
        blanks=count_blanks(grid),
        assignments=solver.assignments,
        backtracks=solver.backtracks,
        elapsed_ms=elapsed_ms,
    )

    if solved is None:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Puzzle has no solution",
            stats=stats,
        )

    return SolveResponse(
        success=True,
        original=grid,
        solved=solved,
        message="Puzzle solved successfully",
        stats=stats,
    )


@router.post("/api/v1/sudoku:parse", response_model=ParseResponse, tags=["Sudoku"])
def parse_sudoku(request: ParseRequest):
    """Parse Sudoku text (nine comma-separated rows) into a grid."""
    try:
        cells = parse_sudoku_text(request.text)
    except InvalidSudokuFileError as e:
        raise HTTPException(status_code=400, detail=str(e))

    given_cells = sum(1 for row in cells for cell in row if cell != 0)
    try:
        blank = load_settings().blank_marker
    except ValueError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return ParseResponse(
        cells=cells,
        given_cells=given_cells,
        text=format_sudoku(cells, blank=blank),
    )

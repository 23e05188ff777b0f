"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": {
                "cells": [
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
            }
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveStats(BaseModel):
    """Search statistics for a solve."""

    blanks: int = Field(description="Blank cells in the puzzle")
    assignments: int = Field(description="Values tried during the search")
    backtracks: int = Field(description="Assignments undone during the search")
    elapsed_ms: float = Field(description="Solver wall-clock time in milliseconds")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    stats: SolveStats | None = Field(default=None, description="Search statistics")


class ParseRequest(BaseModel):
    """Sudoku text in the 9x9 comma-separated format."""

    text: str = Field(description="Nine rows of nine comma-separated cells")


class ParseResponse(BaseModel):
    """Grid parsed from Sudoku text."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")
    given_cells: int = Field(description="Number of non-blank cells")
    text: str = Field(description="Grid re-rendered with the configured blank marker")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    version: str = Field(description="API version")

"""Solver module exports."""

from .backtracking import SudokuSolver, backtracking_search, is_valid_grid, solve
from .domain import Domain
from .exceptions import (
    CellIndexError,
    InvalidSudokuFileError,
    InvalidSudokuGridError,
    PreconditionViolation,
    RangeError,
    ShapeError,
    SudokuError,
)
from .grid import BLANK, Grid, derive_domain

__all__ = [
    "BLANK",
    "CellIndexError",
    "Domain",
    "Grid",
    "InvalidSudokuFileError",
    "InvalidSudokuGridError",
    "PreconditionViolation",
    "RangeError",
    "ShapeError",
    "SudokuError",
    "SudokuSolver",
    "backtracking_search",
    "derive_domain",
    "is_valid_grid",
    "solve",
]

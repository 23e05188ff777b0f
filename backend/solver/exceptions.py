"""Exceptions raised by the Sudoku solver and its file format."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every error raised by this package."""


class InvalidSudokuGridError(SudokuError, ValueError):
    """A matrix cannot be used to build a grid."""


class ShapeError(InvalidSudokuGridError):
    """The matrix is not 9 rows of 9 columns."""


class RangeError(InvalidSudokuGridError):
    """A cell value is neither blank nor an integer in 1..9."""


class CellIndexError(SudokuError, IndexError):
    """A row or column index falls outside 0..8."""


class PreconditionViolation(SudokuError, RuntimeError):
    """A grid operation was called on a cell in the wrong state."""


class InvalidSudokuFileError(SudokuError, ValueError):
    """Sudoku text does not follow the 9x9 comma-separated format."""

"""Read and write Sudoku grids in the 9x9 comma-separated text format.

Each of the nine rows holds nine comma-separated cells. A cell is a digit
1-9, or ``0`` / ``_`` for a blank. Whitespace around cells is ignored, and
blank lines may follow the last row.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

from ..solver.exceptions import InvalidSudokuFileError
from ..solver.grid import BLANK, Grid, Matrix

_LOGGER = logging.getLogger(__name__)

BLANK_TOKENS = ("0", "_")
ROWS = 9
COLS = 9

PathLike = Union[str, Path]


def _parse_cell(token: str, line_no: int, col: int) -> int:
    cell = token.strip()
    if cell in BLANK_TOKENS:
        return BLANK
    if len(cell) != 1 or cell not in "123456789":
        raise InvalidSudokuFileError(
            f"Line {line_no}, cell {col + 1}: expected a digit 1-9, 0 or _, got {cell!r}"
        )
    return int(cell)


def parse_sudoku_text(text: str) -> Matrix:
    """Parse Sudoku text into a 9x9 matrix with 0 for blank cells."""
    lines = text.splitlines()
    matrix: Matrix = []

    for index, line in enumerate(lines):
        line_no = index + 1
        if len(matrix) == ROWS:
            if line.strip():
                raise InvalidSudokuFileError(
                    f"Line {line_no}: unexpected content after row {ROWS}"
                )
            continue

        if not line.strip():
            raise InvalidSudokuFileError(f"Line {line_no}: empty row")

        tokens = line.split(",")
        if len(tokens) != COLS:
            raise InvalidSudokuFileError(
                f"Line {line_no}: expected {COLS} cells, found {len(tokens)}"
            )
        matrix.append([_parse_cell(token, line_no, col) for col, token in enumerate(tokens)])

    if len(matrix) != ROWS:
        raise InvalidSudokuFileError(f"Expected {ROWS} rows, found {len(matrix)}")

    return matrix


def read_sudoku_file(path: PathLike) -> Matrix:
    """Read a Sudoku file. I/O failures propagate as ``OSError``."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    matrix = parse_sudoku_text(text)
    _LOGGER.debug("Read puzzle from %s", path)
    return matrix


def _as_matrix(grid: Any) -> Matrix:
    if isinstance(grid, Grid):
        return grid.to_matrix()
    return [list(row) for row in grid]


def format_sudoku(grid: Any, blank: str = "0") -> str:
    """Render a grid or matrix as nine comma-separated rows."""
    if blank not in BLANK_TOKENS:
        raise ValueError(f"Blank marker must be one of {BLANK_TOKENS}, got {blank!r}")

    rows = []
    for row in _as_matrix(grid):
        rows.append(",".join(blank if value == BLANK else str(value) for value in row))
    return "\n".join(rows)


def write_sudoku_file(grid: Any, path: PathLike, blank: str = "0") -> None:
    path = Path(path)
    path.write_text(format_sudoku(grid, blank=blank) + "\n", encoding="utf-8")
    _LOGGER.debug("Wrote grid to %s", path)

"""Checks on completed grids."""

from __future__ import annotations

from typing import Any

import numpy as np

_DIGITS = np.arange(1, 10)


def _is_permutation(values: np.ndarray) -> bool:
    return bool(np.array_equal(np.sort(values.ravel()), _DIGITS))


def is_solved_grid(matrix: Any) -> bool:
    """True if every row, column and 3x3 box is a permutation of 1..9."""
    try:
        cells = np.asarray(matrix, dtype=np.int64)
    except (TypeError, ValueError):
        return False
    if cells.shape != (9, 9):
        return False

    for i in range(9):
        if not _is_permutation(cells[i, :]) or not _is_permutation(cells[:, i]):
            return False

    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            if not _is_permutation(cells[box_row:box_row + 3, box_col:box_col + 3]):
                return False

    return True


def preserves_givens(puzzle: Any, solution: Any) -> bool:
    """True if every non-blank cell of ``puzzle`` keeps its value in ``solution``."""
    given = np.asarray(puzzle, dtype=np.int64)
    solved = np.asarray(solution, dtype=np.int64)
    if given.shape != solved.shape:
        return False
    mask = given != 0
    return bool(np.array_equal(given[mask], solved[mask]))

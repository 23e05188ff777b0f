"""Sudoku solver using backtracking search with forward checking."""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional

from .exceptions import InvalidSudokuGridError
from .grid import BLANK, Grid, Matrix

_LOGGER = logging.getLogger(__name__)


class SudokuSolver:
    """Solves Sudoku puzzles as a constraint satisfaction problem.

    Cells are chosen with the minimum-remaining-values heuristic, values are
    tried least-constraining first, and every assignment is followed by a
    forward check of the affected domains.
    """

    def __init__(self):
        self.assignments = 0
        self.backtracks = 0

    def solve(self, matrix: Any) -> Optional[Matrix]:
        """
        Solve a Sudoku puzzle.

        Args:
            matrix: 9x9 list of lists with 0 for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise

        Raises:
            ShapeError, RangeError: if the matrix is not a 9x9 grid of 0..9
        """
        grid = Grid(matrix)
        if not grid.has_consistent_givens():
            _LOGGER.debug("Givens conflict with each other, no search attempted")
            return None

        result = self.search(grid)
        if result is None:
            return None
        return result.to_matrix()

    def search(self, grid: Grid) -> Optional[Grid]:
        """
        Run the backtracking search on ``grid``, mutating it in place.

        Returns:
            The same grid, now complete, or None if no completion exists
        """
        self.assignments = 0
        self.backtracks = 0

        start = time.perf_counter()
        result = self._search_recursive(grid)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        _LOGGER.debug(
            "Search %s: assignments=%d backtracks=%d elapsed=%.2fms",
            "solved" if result is not None else "failed",
            self.assignments,
            self.backtracks,
            elapsed_ms,
        )
        return result

    def _search_recursive(self, grid: Grid) -> Optional[Grid]:
        if grid.is_complete():
            return grid

        row, col = grid.select_unassigned_cell()

        for value in grid.get_ordered_domain_values(row, col):
            grid.assign_cell(row, col, value)
            self.assignments += 1

            # Only recurse while every affected blank cell still has a value.
            if grid.all_dependants_have_legal_domains(row, col):
                result = self._search_recursive(grid)
                if result is not None:
                    return result

            grid.unassign_cell(row, col)
            self.backtracks += 1

        return None


def backtracking_search(grid: Grid) -> Optional[Grid]:
    """Search ``grid`` in place; returns the completed grid or None."""
    return SudokuSolver().search(grid)


def solve(matrix: Any) -> Optional[Matrix]:
    """Convenience function to solve a Sudoku grid."""
    solver = SudokuSolver()
    return solver.solve(matrix)


def is_valid_grid(matrix: Any) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        matrix: 9x9 grid to validate

    Returns:
        True if the grid is 9x9, every cell is 0..9 and no two givens clash
    """
    try:
        grid = Grid(matrix)
    except InvalidSudokuGridError:
        return False
    return grid.has_consistent_givens()


def count_blanks(matrix: List[List[int]]) -> int:
    return sum(1 for row in matrix for cell in row if cell == BLANK)

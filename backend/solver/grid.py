"""Mutable Sudoku state used by the backtracking search.

A :class:`Grid` owns the 9x9 value matrix and, for every cell that was blank
when the grid was built, the set of values that can still be placed there.
Assigning a value prunes it from the domains of the cell's peers (forward
checking); unassigning re-derives the affected domains from the matrix, so a
matched assign/unassign pair leaves every domain as it was.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .domain import MAX_VALUE, MIN_VALUE, Domain
from .exceptions import CellIndexError, PreconditionViolation, RangeError, ShapeError

BLANK = 0
SIZE = 9
BOX = 3
CELL_COUNT = SIZE * SIZE

Matrix = List[List[int]]
Cell = Tuple[int, int]


def _build_peers() -> List[List[Tuple[Cell, ...]]]:
    """Row, column and box neighbours of every cell, each listed once."""
    peers: List[List[Tuple[Cell, ...]]] = []
    for row in range(SIZE):
        peer_row = []
        for col in range(SIZE):
            base_row, base_col = row - row % BOX, col - col % BOX
            seen: List[Cell] = []
            candidates = (
                [(row, c) for c in range(SIZE)]
                + [(r, col) for r in range(SIZE)]
                + [
                    (base_row + r, base_col + c)
                    for r in range(BOX)
                    for c in range(BOX)
                ]
            )
            for cell in candidates:
                if cell != (row, col) and cell not in seen:
                    seen.append(cell)
            peer_row.append(tuple(seen))
        peers.append(peer_row)
    return peers


PEERS = _build_peers()


def derive_domain(matrix: Sequence[Sequence[int]], row: int, col: int) -> Domain:
    """Return the values absent from the row, column and box of ``(row, col)``."""
    used = [0] * (MAX_VALUE + 1)

    for c in range(SIZE):
        used[matrix[row][c]] += 1
    for r in range(SIZE):
        used[matrix[r][col]] += 1

    base_row, base_col = row - row % BOX, col - col % BOX
    for r in range(base_row, base_row + BOX):
        for c in range(base_col, base_col + BOX):
            used[matrix[r][c]] += 1

    return Domain(v for v in range(MIN_VALUE, MAX_VALUE + 1) if used[v] == 0)


def _copy_matrix(matrix: Any) -> Matrix:
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise ShapeError(f"Grid must be 2-dimensional, got {matrix.ndim} dimensions")
        matrix = matrix.tolist()

    try:
        rows = list(matrix)
    except TypeError as exc:
        raise ShapeError("Grid must be a sequence of 9 rows") from exc
    if len(rows) != SIZE:
        raise ShapeError(f"Grid must have 9 rows, got {len(rows)}")

    copied: Matrix = []
    for r, raw_row in enumerate(rows):
        try:
            row = list(raw_row)
        except TypeError as exc:
            raise ShapeError(f"Row {r} is not a sequence") from exc
        if len(row) != SIZE:
            raise ShapeError(f"Row {r} must have 9 columns, got {len(row)}")

        values = []
        for c, value in enumerate(row):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
                raise RangeError(f"Cell ({r}, {c}) is not an integer: {value!r}")
            value = int(value)
            if value != BLANK and not MIN_VALUE <= value <= MAX_VALUE:
                raise RangeError(f"Cell ({r}, {c}) must be blank or in 1..9, got {value}")
            values.append(value)
        copied.append(values)

    return copied


def _check_index(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise CellIndexError(f"Cell ({row}, {col}) is outside the 9x9 grid")


class Grid:
    """A 9x9 Sudoku grid throughout solving: unsolved, partial or solved.

    Cells given in the initial matrix are fixed and carry no domain. Every
    other cell keeps a :class:`Domain` which, while the cell is blank, holds
    exactly the values not yet used in its row, column and box.
    """

    def __init__(self, matrix: Any):
        self._matrix = _copy_matrix(matrix)
        self._domains: List[List[Optional[Domain]]] = [
            [None] * SIZE for _ in range(SIZE)
        ]
        self._assigned = 0

        for row in range(SIZE):
            for col in range(SIZE):
                if self._matrix[row][col] == BLANK:
                    self._domains[row][col] = derive_domain(self._matrix, row, col)
                else:
                    self._assigned += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def assigned_count(self) -> int:
        return self._assigned

    def get_cell(self, row: int, col: int) -> int:
        _check_index(row, col)
        return self._matrix[row][col]

    def is_given(self, row: int, col: int) -> bool:
        """True for cells filled in the initial matrix."""
        _check_index(row, col)
        return self._domains[row][col] is None

    def domain(self, row: int, col: int) -> Optional[Domain]:
        """Copy of the cell's domain, or ``None`` for a given cell."""
        _check_index(row, col)
        domain = self._domains[row][col]
        return domain.copy() if domain is not None else None

    def to_matrix(self) -> Matrix:
        return [list(row) for row in self._matrix]

    def is_complete(self) -> bool:
        """Every cell holds a value. Says nothing about validity."""
        return self._assigned == CELL_COUNT

    def has_consistent_givens(self) -> bool:
        """Check that no two given cells share a value in a row, column or box."""
        for row in range(SIZE):
            for col in range(SIZE):
                if self._domains[row][col] is not None:
                    continue
                value = self._matrix[row][col]
                for peer_row, peer_col in PEERS[row][col]:
                    if (
                        self._domains[peer_row][peer_col] is None
                        and self._matrix[peer_row][peer_col] == value
                    ):
                        return False
        return True

    # ------------------------------------------------------------------
    # CSP heuristics
    # ------------------------------------------------------------------

    def select_unassigned_cell(self) -> Cell:
        """Pick the blank cell with the fewest remaining values (MRV).

        Ties go to the first cell in row-major order.
        """
        if self.is_complete():
            raise PreconditionViolation("Cannot select a cell from a complete grid")

        best: Optional[Cell] = None
        best_size = MAX_VALUE + 1

        for row in range(SIZE):
            for col in range(SIZE):
                if self._matrix[row][col] != BLANK:
                    continue
                size = len(self._domains[row][col])
                if size < best_size:
                    best, best_size = (row, col), size
                    # Nothing later can beat a single candidate.
                    if size == 1:
                        return best

        return best

    def get_ordered_domain_values(self, row: int, col: int) -> List[int]:
        """Candidate values for a blank cell, least constraining first (LCV).

        Each value is ranked by how many blank peers still list it as a
        candidate. Values with equal rank keep ascending order.
        """
        _check_index(row, col)
        if self._matrix[row][col] != BLANK:
            raise PreconditionViolation(f"Cell ({row}, {col}) is already assigned")

        domain = self._domains[row][col]
        return sorted(domain, key=lambda value: self._count_choices_ruled_out(row, col, value))

    def _count_choices_ruled_out(self, row: int, col: int, value: int) -> int:
        count = 0
        for peer_row, peer_col in PEERS[row][col]:
            if (
                self._matrix[peer_row][peer_col] == BLANK
                and value in self._domains[peer_row][peer_col]
            ):
                count += 1
        return count

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def assign_cell(self, row: int, col: int, value: int) -> None:
        """Place ``value`` in a blank cell and prune it from the peers' domains."""
        _check_index(row, col)
        if isinstance(value, bool) or not isinstance(value, int) or not (
            MIN_VALUE <= value <= MAX_VALUE
        ):
            raise RangeError(f"Value must be in 1..9, got {value!r}")
        if self._matrix[row][col] != BLANK:
            raise PreconditionViolation(
                f"Only a blank cell may be assigned; ({row}, {col}) holds "
                f"{self._matrix[row][col]}"
            )
        if value not in self._domains[row][col]:
            raise PreconditionViolation(
                f"Value {value} is not a candidate for cell ({row}, {col})"
            )

        self._matrix[row][col] = value
        self._assigned += 1

        for peer_row, peer_col in PEERS[row][col]:
            if self._matrix[peer_row][peer_col] == BLANK:
                self._domains[peer_row][peer_col].remove(value)

    def unassign_cell(self, row: int, col: int) -> None:
        """Blank an assigned cell and rebuild the domains it affects."""
        _check_index(row, col)
        if self._matrix[row][col] == BLANK:
            raise PreconditionViolation(f"Cell ({row}, {col}) is already blank")
        if self._domains[row][col] is None:
            raise PreconditionViolation(
                f"Cell ({row}, {col}) is a given and cannot be unassigned"
            )

        self._matrix[row][col] = BLANK
        self._assigned -= 1

        self._domains[row][col] = derive_domain(self._matrix, row, col)
        for peer_row, peer_col in PEERS[row][col]:
            if self._domains[peer_row][peer_col] is not None:
                self._domains[peer_row][peer_col] = derive_domain(
                    self._matrix, peer_row, peer_col
                )

    def all_dependants_have_legal_domains(self, row: int, col: int) -> bool:
        """False if any blank peer of ``(row, col)`` has run out of values."""
        _check_index(row, col)
        for peer_row, peer_col in PEERS[row][col]:
            if (
                self._matrix[peer_row][peer_col] == BLANK
                and self._domains[peer_row][peer_col].is_empty()
            ):
                return False
        return True

    def __repr__(self) -> str:
        return f"Grid(assigned={self._assigned}/{CELL_COUNT})"

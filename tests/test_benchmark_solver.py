"""Tests for the solver benchmark script."""

import pytest

from backend.solver.backtracking import SudokuSolver
from backend.solver.grid import Grid
from conftest import CLASSIC_PUZZLE, CLASSIC_SOLUTION, DEAD_END_PUZZLE
from scripts.benchmark_solver import BaselineSolver, check_solution, run_benchmark


def test_baseline_solver_finds_same_solution():
    result = BaselineSolver().search(Grid(CLASSIC_PUZZLE))

    assert result is not None
    assert result.to_matrix() == CLASSIC_SOLUTION


def test_run_benchmark_reports_work():
    puzzles = {"classic": CLASSIC_PUZZLE}

    elapsed, avg, assignments = run_benchmark(SudokuSolver(), puzzles, rounds=2)

    assert elapsed >= 0.0
    assert avg == pytest.approx(elapsed / 2)
    assert assignments >= sum(row.count(0) for row in CLASSIC_PUZZLE)


def test_run_benchmark_rejects_unsolvable_puzzle():
    with pytest.raises(ValueError, match="no solution"):
        run_benchmark(SudokuSolver(), {"dead_end": DEAD_END_PUZZLE}, rounds=1)


def test_check_solution_rejects_changed_givens():
    grid = Grid(CLASSIC_SOLUTION)
    puzzle = [row[:] for row in CLASSIC_PUZZLE]
    puzzle[0][0] = 3

    with pytest.raises(ValueError, match="invalid solution"):
        check_solution("tampered", puzzle, grid)

    check_solution("classic", CLASSIC_PUZZLE, grid)

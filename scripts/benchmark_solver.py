"""Benchmark the CSP search against a heuristic-free baseline."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.fileio.sudoku_file import read_sudoku_file
from backend.solver.backtracking import SudokuSolver
from backend.solver.grid import BLANK, Grid
from backend.solver.validation import is_solved_grid, preserves_givens
from scripts._paths import resolve_puzzle_path


class BaselineSolver(SudokuSolver):
    """Plain backtracking: first blank cell, values in ascending order, no forward check."""

    def _search_recursive(self, grid: Grid) -> Optional[Grid]:
        if grid.is_complete():
            return grid

        row, col = next(
            (r, c) for r in range(9) for c in range(9) if grid.get_cell(r, c) == BLANK
        )

        for value in grid.domain(row, col):
            grid.assign_cell(row, col, value)
            self.assignments += 1

            result = self._search_recursive(grid)
            if result is not None:
                return result

            grid.unassign_cell(row, col)
            self.backtracks += 1

        return None


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        nargs="+",
        required=True,
        help="Puzzle files to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of rounds for each implementation",
    )
    return parser.parse_args()


def check_solution(name: str, puzzle, result: Optional[Grid]) -> None:
    """Raise ``ValueError`` unless ``result`` is a valid completion of ``puzzle``."""
    if result is None:
        raise ValueError(f"Benchmark puzzle has no solution: {name}")
    solved = result.to_matrix()
    if not is_solved_grid(solved) or not preserves_givens(puzzle, solved):
        raise ValueError(f"Solver returned an invalid solution: {name}")


def run_benchmark(solver: SudokuSolver, puzzles, rounds: int):
    elapsed = 0.0
    assignments = 0

    for _ in range(rounds):
        for name, matrix in puzzles.items():
            grid = Grid(matrix)
            start = time.perf_counter()
            result = solver.search(grid)
            elapsed += time.perf_counter() - start

            check_solution(name, matrix, result)
            assignments += solver.assignments

    avg_per_puzzle = elapsed / (rounds * len(puzzles))
    return elapsed, avg_per_puzzle, assignments // rounds


def main() -> int:
    args = parse_args()

    puzzle_paths = [resolve_puzzle_path(puzzle) for puzzle in args.puzzles]
    puzzles = {str(path): read_sudoku_file(path) for path in puzzle_paths}

    baseline_total, baseline_avg, baseline_nodes = run_benchmark(
        BaselineSolver(), puzzles, args.rounds
    )
    csp_total, csp_avg, csp_nodes = run_benchmark(SudokuSolver(), puzzles, args.rounds)

    speedup = baseline_avg / csp_avg if csp_avg else float("inf")

    print("Solver benchmark results")
    print(f"puzzles={len(puzzle_paths)} rounds={args.rounds}")
    print(
        f"baseline_total={baseline_total:.3f}s baseline_avg_per_puzzle={baseline_avg:.4f}s "
        f"baseline_assignments={baseline_nodes}"
    )
    print(
        f"csp_total={csp_total:.3f}s csp_avg_per_puzzle={csp_avg:.4f}s "
        f"csp_assignments={csp_nodes}"
    )
    print(f"speedup={speedup:.2f}x")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

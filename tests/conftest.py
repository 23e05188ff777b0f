"""Shared puzzles for the test suite."""

import copy

import pytest

# Unique-solution puzzle and its solution.
CLASSIC_PUZZLE = [
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

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Givens never clash, but r1c3 must be 4 in the only completion.
DEAD_END_PUZZLE = copy.deepcopy(CLASSIC_PUZZLE)
DEAD_END_PUZZLE[0][2] = 2

SCANNED_PUZZLE = [
    [6, 0, 8, 0, 0, 3, 0, 2, 4],
    [4, 3, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 5, 0, 0, 8, 0],
    [8, 6, 0, 4, 7, 0, 0, 3, 0],
    [0, 7, 4, 1, 6, 2, 8, 9, 5],
    [1, 0, 0, 5, 0, 0, 0, 0, 7],
    [2, 0, 6, 0, 4, 0, 1, 0, 0],
    [0, 4, 3, 8, 0, 0, 6, 0, 0],
    [0, 8, 0, 7, 2, 6, 9, 0, 0],
]


def to_text(matrix, blank="0"):
    return "\n".join(
        ",".join(blank if v == 0 else str(v) for v in row) for row in matrix
    )


@pytest.fixture
def classic_puzzle():
    return copy.deepcopy(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return copy.deepcopy(CLASSIC_SOLUTION)


@pytest.fixture
def dead_end_puzzle():
    return copy.deepcopy(DEAD_END_PUZZLE)


@pytest.fixture
def empty_matrix():
    return [[0] * 9 for _ in range(9)]

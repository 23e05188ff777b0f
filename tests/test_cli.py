"""Tests for the command line front-end."""

import pytest

from backend import cli
from conftest import CLASSIC_PUZZLE, CLASSIC_SOLUTION, DEAD_END_PUZZLE, to_text


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.delenv("SUDOKU_BLANK_MARKER", raising=False)
    monkeypatch.delenv("SUDOKU_LOG_LEVEL", raising=False)


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(to_text(CLASSIC_PUZZLE) + "\n", encoding="utf-8")
    return path


def test_prints_solution(puzzle_file, capsys):
    assert cli.main([str(puzzle_file)]) == cli.RETCODE_OK

    assert capsys.readouterr().out == to_text(CLASSIC_SOLUTION) + "\n"


def test_writes_solution_file(puzzle_file, tmp_path, capsys):
    out_path = tmp_path / "solution.txt"

    assert cli.main([str(puzzle_file), str(out_path)]) == cli.RETCODE_OK

    assert out_path.read_text(encoding="utf-8") == to_text(CLASSIC_SOLUTION) + "\n"
    assert capsys.readouterr().out == ""


def test_help_returns_ok(capsys):
    assert cli.main(["--help"]) == cli.RETCODE_OK

    assert "infile" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt", "c.txt"], ["--bogus", "a.txt"]])
def test_bad_arguments(argv, capsys):
    assert cli.main(argv) == cli.RETCODE_ARGPARSE

    assert cli.SUGGEST_HELP in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,message",
    [
        ([], "Input Sudoku file not specified."),
        (["a.txt", "b.txt", "c.txt"], "Too many arguments."),
    ],
)
def test_argument_error_messages(argv, message, capsys):
    assert cli.main(argv) == cli.RETCODE_ARGPARSE

    assert capsys.readouterr().out.splitlines()[0] == message


def test_missing_input_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"

    assert cli.main([str(missing)]) == cli.RETCODE_FILEIO
    assert "Could not find input file" in capsys.readouterr().out


def test_malformed_input_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1,2,3\n", encoding="utf-8")

    assert cli.main([str(path)]) == cli.RETCODE_FILEIO
    assert "Invalid Sudoku file" in capsys.readouterr().out


def test_unsolvable_puzzle(tmp_path, capsys):
    path = tmp_path / "dead_end.txt"
    path.write_text(to_text(DEAD_END_PUZZLE), encoding="utf-8")

    assert cli.main([str(path)]) == cli.RETCODE_UNSOLVED
    assert capsys.readouterr().out.strip() == cli.NO_SOLUTION


def test_conflicting_givens_unsolvable(tmp_path, capsys):
    matrix = [row[:] for row in CLASSIC_PUZZLE]
    matrix[0][2] = 5
    path = tmp_path / "conflict.txt"
    path.write_text(to_text(matrix), encoding="utf-8")

    assert cli.main([str(path)]) == cli.RETCODE_UNSOLVED
    assert cli.NO_SOLUTION in capsys.readouterr().out


def test_invalid_configuration(puzzle_file, monkeypatch, capsys):
    monkeypatch.setenv("SUDOKU_LOG_LEVEL", "loud")

    assert cli.main([str(puzzle_file)]) == cli.RETCODE_ARGPARSE
    assert "SUDOKU_LOG_LEVEL" in capsys.readouterr().out

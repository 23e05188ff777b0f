"""Command line front-end: solve the Sudoku in a file."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import configure_logging, load_settings
from .fileio.sudoku_file import format_sudoku, read_sudoku_file, write_sudoku_file
from .solver.backtracking import SudokuSolver
from .solver.exceptions import InvalidSudokuFileError, InvalidSudokuGridError
from .solver.grid import Grid

LOGGER = logging.getLogger(__name__)

RETCODE_OK = 0
RETCODE_ARGPARSE = 1
RETCODE_FILEIO = 2
RETCODE_UNSOLVED = 3

SUGGEST_HELP = "Run with --help to display usage information."
NO_SOLUTION = "A solution to this Sudoku does not exist."

_DESCRIPTION = (
    "Solves the Sudoku in infile and saves the solution to outfile. If the "
    "output file is omitted, the solution is printed to the command line. "
    "Sudoku files are read and written in plain text 9x9 comma-separated "
    "values format."
)


class ArgumentParseError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class ParserExit(Exception):
    """Raised instead of exiting after ``--help`` has been printed."""

    def __init__(self, status: int):
        super().__init__(status)
        self.status = status


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        if message.startswith("the following arguments are required"):
            message = "Input Sudoku file not specified."
        elif message.startswith("unrecognized arguments") and not any(
            extra.startswith("-") for extra in message.split(":", 1)[1].split()
        ):
            message = "Too many arguments."
        raise ArgumentParseError(message)

    def exit(self, status: int = 0, message: Optional[str] = None):
        if message:
            print(message, end="")
        raise ParserExit(status)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sudoku-solve",
        description=_DESCRIPTION,
    )
    parser.add_argument("infile", type=Path, help="Sudoku puzzle to solve")
    parser.add_argument(
        "outfile",
        type=Path,
        nargs="?",
        default=None,
        help="Where to save the solution (printed when omitted)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _check_paths(infile: Path, outfile: Optional[Path]) -> Optional[str]:
    if not infile.exists():
        return f"Could not find input file: {infile}."
    if not infile.is_file() or not os.access(infile, os.R_OK):
        return f"Cannot read input file: {infile}."
    if outfile is not None and outfile.exists() and not os.access(outfile, os.W_OK):
        return f"Cannot write to existing output file: {outfile}."
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ParserExit as exc:
        return RETCODE_OK if exc.status == 0 else RETCODE_ARGPARSE
    except ArgumentParseError as exc:
        print(exc)
        print(SUGGEST_HELP)
        return RETCODE_ARGPARSE

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        return RETCODE_ARGPARSE
    configure_logging(args.debug, settings.log_level)

    problem = _check_paths(args.infile, args.outfile)
    if problem is not None:
        print(problem)
        return RETCODE_FILEIO

    try:
        grid = Grid(read_sudoku_file(args.infile))
    except (InvalidSudokuFileError, InvalidSudokuGridError) as exc:
        print(f"Invalid Sudoku file {args.infile}: {exc}")
        return RETCODE_FILEIO
    except OSError as exc:
        print(f"Cannot read input file: {exc}")
        return RETCODE_FILEIO

    LOGGER.debug("Loaded %s with %d given cells", args.infile, grid.assigned_count)

    result = None
    if grid.has_consistent_givens():
        result = SudokuSolver().search(grid)
    else:
        LOGGER.debug("Given cells conflict; skipping search")

    if result is None:
        print(NO_SOLUTION)
        return RETCODE_UNSOLVED

    if args.outfile is None:
        print(format_sudoku(result))
        return RETCODE_OK

    try:
        write_sudoku_file(result, args.outfile)
    except OSError as exc:
        print(f"Output file error: {exc}")
        return RETCODE_FILEIO

    LOGGER.info("Solution written to %s", args.outfile)
    return RETCODE_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

"""Sudoku file format exports."""

from .sudoku_file import format_sudoku, parse_sudoku_text, read_sudoku_file, write_sudoku_file

__all__ = ["format_sudoku", "parse_sudoku_text", "read_sudoku_file", "write_sudoku_file"]

"""Check the rows and columns of a Sudoku board stored as comma-separated text."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

DELIMITER = ","
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class BoardFormatError(ValueError):
    """Raised when a board file cannot be read."""


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _tokens(line: str) -> list[str]:
    return [token for token in line.split(DELIMITER) if token]


def parse_board(lines: Iterable[str]) -> list[list[int]]:
    """Parse a board: a size line followed by that many rows of values."""
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise BoardFormatError("error reading the input file.")
    header = _tokens(first)
    if not header:
        raise BoardFormatError("error reading the input file.")
    size = max(_atoi(header[0]), 0)

    board = []
    for row_index in range(size):
        line = next(it, None)
        if line is None:
            raise BoardFormatError(
                f"error while reading line {row_index + 2} of the file."
            )
        tokens = _tokens(line)
        if len(tokens) < size:
            raise BoardFormatError(
                f"line {row_index + 2} holds fewer than {size} values."
            )
        board.append([_atoi(token) for token in tokens[:size]])
    return board


def read_board(path: str | Path) -> list[list[int]]:
    """Read and parse the board stored at *path*."""
    with open(path, encoding="utf-8") as fh:
        return parse_board(fh)


def _group_valid(values: Iterable[int], size: int) -> bool:
    seen: set[int] = set()
    for value in values:
        if value == 0:
            continue
        if not 1 <= value <= size or value in seen:
            return False
        seen.add(value)
    return True


def valid_board(board: Sequence[Sequence[int]]) -> bool:
    """Return True if every row and column holds only blanks (0) or distinct 1..size."""
    size = len(board)
    rows_ok = all(_group_valid(row, size) for row in board)
    return rows_ok and all(_group_valid(column, size) for column in zip(*board))


def main(argv: list[str] | None = None) -> int:
    """Print ``valid`` or ``invalid`` for the board file named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: ./check_board <input_filename>")
        return 1
    try:
        board = read_board(args[0])
    except BoardFormatError as exc:
        print(exc)
        return 1
    except OSError:
        print("can't open file for reading.")
        return 1
    print("valid" if valid_board(board) else "invalid")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
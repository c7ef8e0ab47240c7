"""Generate odd-order magic squares with the Siamese method."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

_SCAN_INT = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


class MagicSquareSizeError(ValueError):
    """Raised for a size that cannot be read or is not an odd number >= 3."""


@dataclass
class MagicSquare:
    """A square grid of integers."""

    size: int
    cells: list[list[int]]

    def to_csv(self) -> str:
        """Return the rows as comma-separated lines, each ending in a newline."""
        return "".join(",".join(str(v) for v in row) + "\n" for row in self.cells)

    def is_magic(self) -> bool:
        """Return True if the grid holds 1..n² with equal row, column and diagonal sums."""
        n = self.size
        values = sorted(v for row in self.cells for v in row)
        if values != list(range(1, n * n + 1)):
            return False
        target = n * (n * n + 1) // 2
        lines = [*self.cells, *(list(col) for col in zip(*self.cells))]
        lines.append([self.cells[i][i] for i in range(n)])
        lines.append([self.cells[i][n - 1 - i] for i in range(n)])
        return all(sum(line) == target for line in lines)


def check_size(size: int) -> int:
    """Return *size* if it is odd and at least 3, else raise MagicSquareSizeError."""
    if size % 2 == 0:
        raise MagicSquareSizeError("Magic square size must be odd.")
    if size < 3:
        raise MagicSquareSizeError("Magic square size must be >= 3.")
    return size


def read_size(stream: TextIO) -> int:
    """Read one integer (decimal, 0x-hex or 0-octal) from *stream*."""
    for line in stream:
        text = line.lstrip()
        if not text:
            continue
        match = _SCAN_INT.match(text)
        if match is None:
            break
        sign, digits = match.groups()
        if digits[:2].lower() == "0x":
            value = int(digits, 16)
        elif digits.startswith("0"):
            value = int(digits, 8)
        else:
            value = int(digits)
        return -value if sign == "-" else value
    raise MagicSquareSizeError("scan error.")


def generate_magic_square(n: int) -> MagicSquare:
    """Fill an n×n grid with 1..n² moving up-right, dropping a row on collision."""
    if n < 1:
        raise MagicSquareSizeError("Magic square size must be positive.")
    cells = [[0] * n for _ in range(n)]
    row_offset = 0
    col_offset = n * n
    start_col = (n - 1) // 2
    for i in range(n * n):
        row = (row_offset - i) % n
        col = (start_col + i + col_offset) % n
        if cells[row][col]:
            row_offset += 2
            col_offset -= 1
            row = (row_offset - i) % n
            col = (start_col + i + col_offset) % n
        cells[row][col] = i + 1
    return MagicSquare(n, cells)


def write_magic_square(square: MagicSquare, filename: str | Path) -> None:
    """Write the square to *filename* in comma-separated form, replacing it."""
    with open(filename, "w", encoding="utf-8") as fh:
        fh.write(square.to_csv())


def main(argv: list[str] | None = None) -> int:
    """Ask for a size on standard input and write the square to the named file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: ./myMagicSquare <output_filename>")
        return 1
    print("Enter magic square's size (odd integer >=3)")
    try:
        size = check_size(read_size(sys.stdin))
    except MagicSquareSizeError as exc:
        print(exc)
        return 1
    try:
        write_magic_square(generate_magic_square(size), args[0])
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
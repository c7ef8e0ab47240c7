"""Divide pairs of integers read interactively until a division by zero."""

from __future__ import annotations

import sys
from typing import TextIO

_LINE_LIMIT = 99
_DIGITS = "0123456789"
_IGNORED = "\n\0"


def parse_integer(text: str) -> int:
    """Return the non-negative integer in *text*, or 0 if it holds anything but digits."""
    if any(ch not in _DIGITS and ch not in _IGNORED for ch in text):
        return 0
    digits = ""
    for ch in text:
        if ch not in _DIGITS:
            break
        digits += ch
    return int(digits) if digits else 0


def _print_total(out: TextIO, count: int) -> None:
    out.write(f"Total number of operations completed successfully: {count}\n")
    out.write("The program will be terminated.\n")
    out.flush()


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Prompt for pairs of integers and print each quotient and remainder.

    Stops at a division by zero or an interrupt and returns the number of
    divisions completed.
    """
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    count = 0
    try:
        while True:
            out.write("Enter first integer: ")
            out.flush()
            first = parse_integer(inp.readline(_LINE_LIMIT))
            out.write("Enter second integer: ")
            out.flush()
            second = parse_integer(inp.readline(_LINE_LIMIT))
            try:
                quotient, remainder = divmod(first, second)
            except ZeroDivisionError:
                out.write("Error: a division by 0 operation was attempted.\n")
                _print_total(out, count)
                return count
            out.write(
                f"{first} / {second} is {quotient} with a remainder of {remainder}\n"
            )
            count += 1
    except KeyboardInterrupt:
        out.write("\n")
        _print_total(out, count)
        return count


def main(argv: list[str] | None = None) -> int:
    """Run the interactive divider on standard input and output."""
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
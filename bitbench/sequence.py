"""Print a short comma-separated counting sequence."""

from __future__ import annotations

import sys


def simple_sequence(stop: int = 10) -> str:
    """Return the integers 1..stop joined by commas."""
    return ",".join(str(i) for i in range(1, stop + 1))


def main(argv: list[str] | None = None) -> int:
    """Write the sequence 1 to 10 to standard output."""
    line = simple_sequence()
    sys.stdout.write(f"{line}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
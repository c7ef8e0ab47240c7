"""Simulate an LRU set-associative cache by replaying a memory trace.

Each load (L) or store (S) is one access. A modify (M) is a load followed by a
store to the same address. Instruction fetches (I) are ignored.
"""

from __future__ import annotations

import getopt
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

RESULTS_FILE = ".csim_results"
_ADDR_MASK = (1 << 64) - 1
_ADDRESS = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)(?:,\s*(\d+))?")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_PROG = "csim"

_USAGE_LINES = (
    "Usage: {prog} [-hv] -s <num> -E <num> -b <num> -t <file>",
    "Options:",
    "  -h         Print this help message.",
    "  -v         Optional verbose flag.",
    "  -s <num>   Number of s bits for set index.",
    "  -E <num>   Number of lines per set.",
    "  -b <num>   Number of b bits for block offsets.",
    "  -t <file>  Trace file.",
    "",
    "Examples:",
    "  linux>  {prog} -s 4 -E 1 -b 4 -t traces/yi.trace",
    "  linux>  {prog} -v -s 8 -E 2 -b 4 -t traces/yi.trace",
)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class CacheStats:
    """Counts of hits, misses and evictions."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0


@dataclass
class _Line:
    valid: bool = False
    tag: int = 0
    last_used: int = 0


@dataclass
class Cache:
    """A cache of 2**s sets, E lines per set and 2**b-byte blocks, with LRU replacement."""

    s: int
    E: int
    b: int
    stats: CacheStats = field(default_factory=CacheStats, init=False)
    _sets: list[list[_Line]] = field(default_factory=list, init=False, repr=False)
    _clock: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.s < 0 or self.b < 0:
            raise ValueError("set and block bits must not be negative")
        if self.E < 1:
            raise ValueError("lines per set must be positive")
        self._sets = [[_Line() for _ in range(self.E)] for _ in range(self.num_sets)]

    @property
    def num_sets(self) -> int:
        return 1 << self.s

    @property
    def block_size(self) -> int:
        return 1 << self.b

    def access(self, addr: int) -> str:
        """Access *addr*; return ``"hit"``, ``"miss"`` or ``"miss eviction"``."""
        self._clock += 1
        addr &= _ADDR_MASK
        set_index = (addr >> self.b) & (self.num_sets - 1)
        tag = addr >> (self.s + self.b)
        lines = self._sets[set_index]

        for line in lines:
            if line.valid and line.tag == tag:
                self.stats.hits += 1
                line.last_used = self._clock
                return "hit"

        self.stats.misses += 1
        empty = next((line for line in lines if not line.valid), None)
        if empty is not None:
            empty.valid = True
            empty.tag = tag
            empty.last_used = self._clock
            return "miss"

        self.stats.evictions += 1
        victim = min(lines, key=lambda line: line.last_used)
        victim.tag = tag
        victim.last_used = self._clock
        return "miss eviction"

    def replay(
        self,
        lines: Iterable[str],
        verbose: bool = False,
        out: TextIO | None = None,
    ) -> CacheStats:
        """Replay trace *lines* against the cache and return the statistics."""
        sink = sys.stdout if out is None else out
        for raw in lines:
            entry = parse_trace_line(raw)
            if entry is None:
                continue
            op, addr, size = entry
            if verbose:
                sink.write(f"{op} {addr:x},{size} ")
            for _ in range(2 if op == "M" else 1):
                self.access(addr)
            if verbose:
                sink.write("\n")
        return self.stats


def parse_trace_line(line: str) -> tuple[str, int, int] | None:
    """Return ``(op, address, size)`` for an L, S or M line, or None for anything else."""
    if len(line) < 2 or line[1] not in "LSM":
        return None
    match = _ADDRESS.match(line[3:])
    if match is None:
        return None
    addr = int(match.group(1), 16) & _ADDR_MASK
    size = int(match.group(2)) if match.group(2) else 0
    return line[1], addr, size


def write_summary(stats: CacheStats, path: str | Path = RESULTS_FILE) -> None:
    """Write the statistics as ``hits misses evictions`` to *path*."""
    Path(path).write_text(
        f"{stats.hits} {stats.misses} {stats.evictions}\n", encoding="utf-8"
    )


def _usage(prog: str) -> str:
    """Return the usage text for *prog*."""
    return "\n".join(line.format(prog=prog) for line in _USAGE_LINES)


def main(argv: list[str] | None = None) -> int:
    """Run the simulator from command-line options."""
    args = sys.argv[1:] if argv is None else argv
    try:
        opts, _ = getopt.gnu_getopt(args, "s:E:b:t:vh")
    except getopt.GetoptError as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        print(_usage(_PROG))
        return 0

    s = lines_per_set = b = 0
    trace_file: str | None = None
    verbose = False
    for option, value in opts:
        if option == "-h":
            print(_usage(_PROG))
            return 0
        if option == "-s":
            s = _atoi(value)
        elif option == "-E":
            lines_per_set = _atoi(value)
        elif option == "-b":
            b = _atoi(value)
        elif option == "-t":
            trace_file = value
        elif option == "-v":
            verbose = True

    if s == 0 or lines_per_set == 0 or b == 0 or trace_file is None:
        print(f"{_PROG}: Missing required command line argument")
        print(_usage(_PROG))
        return 0

    try:
        cache = Cache(s, lines_per_set, b)
    except ValueError as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1

    try:
        with open(trace_file, encoding="utf-8", errors="replace") as fh:
            stats = cache.replay(fh, verbose=verbose)
    except OSError as exc:
        print(f"{trace_file}: {exc.strerror}", file=sys.stderr)
        return 1

    print(f"hits:{stats.hits} misses:{stats.misses} evictions:{stats.evictions}")
    write_summary(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
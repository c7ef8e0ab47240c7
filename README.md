# bitbench

A handful of small systems-programming exercises, each usable as a library
module and as a command. It needs nothing beyond the standard library; the
signal commands need a POSIX system.

## Install

    pip install .
    pip install ".[test]"   # with pytest, to run the test suite

## Commands

| Command | What it does |
| --- | --- |
| `bitbench-decode` | Reads the first line of `cipher.txt` in the current directory, asks for a login on standard input and decodes the line with a Caesar shift derived from that login. |
| `bitbench-sequence` | Prints `1,2,3,4,5,6,7,8,9,10`. |
| `bitbench-check-board FILE` | Prints `valid` or `invalid` for a Sudoku board file (first line is the size, then comma-separated rows, `0` for blanks). Only rows and columns are checked. |
| `bitbench-magic-square FILE` | Asks for an odd size of at least 3 (decimal, `0x` hex or leading-`0` octal) and writes a magic square of that size to `FILE` as comma-separated rows. |
| `bitbench-csim [-hv] -s N -E N -b N -t TRACE` | Replays a Valgrind memory trace through an LRU cache and prints `hits:… misses:… evictions:…`; the same numbers are written to `.csim_results`. `-v` echoes each replayed trace entry. |
| `bitbench-division` | Repeatedly asks for two integers and prints quotient and remainder; input holding anything but digits counts as 0. Stops on division by zero or Ctrl-C, reporting how many divisions succeeded. |
| `bitbench-sighandler` | Prints its PID and the time every 4 seconds, counts `SIGUSR1` and reports the count on `SIGINT`. |
| `bitbench-sendsig -u\|-i PID` | Sends `SIGUSR1` (`-u`) or `SIGINT` (`-i`) to a process. |

## Library use

```python
from bitbench.caesar import decode
from bitbench.magic_square import generate_magic_square
from bitbench.heap import Heap
from bitbench.cachesim import Cache

print(decode("uryyb", "someone"))

square = generate_magic_square(5)
assert square.is_magic()
print(square.to_csv())

heap = Heap(4096)
ptr = heap.balloc(8)
heap.write_int(ptr, 42)
heap.bfree(ptr)
heap.coalesce()
heap.disp_heap()

cache = Cache(s=4, E=1, b=4)
print(cache.access(0x10))   # "hit", "miss" or "miss eviction"
print(cache.stats)
```

Other entry points: `bitbench.sudoku.parse_board`, `read_board` and
`valid_board`; `bitbench.cachesim.parse_trace_line`, `Cache.replay` and
`write_summary`; `bitbench.division.parse_integer` and `run`;
`bitbench.sendsig.signal_for_option` and `send_signal`;
`bitbench.sighandler.SignalMonitor`.

## The heap model

`Heap` models a best-fit allocator over a simulated byte region whose
addresses are plain integers. Block headers carry the size together with
allocated and previous-allocated bits, free blocks have footers, and
`coalesce` merges neighbouring free blocks only when it is called. `balloc`
returns an 8-byte-aligned payload address, or `None` when no block fits.
`blocks()` walks the heap as `Block` records, and `disp_heap` prints them as
a table. A bad argument to `bfree` raises `InvalidFreeError`; out-of-range
reads and writes raise `HeapError`.

## What it does not do

The heap is a model only: it manages no real process memory and has no
command of its own.
"""Small systems-programming exercises: a Caesar decoder, a Sudoku checker, magic squares, a simulated heap allocator, an LRU cache simulator and signal tools."""

__version__ = "0.1.0"
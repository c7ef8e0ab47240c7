"""A simulated heap allocator with best-fit placement and explicit coalescing.

The heap lives in a byte buffer addressed like real memory. Every block starts
with a 4-byte header holding its size (a multiple of 8) and two status bits:
bit 0 is set when the block is allocated, and bit 1 is set when the block
before it is allocated. A free block also ends with a 4-byte footer holding
its size. A header value of 1 marks the end of the heap.
"""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

_INT = struct.Struct("<i")
_ALLOC_BIT = 1
_PREV_ALLOC_BIT = 2
_STATUS_MASK = _ALLOC_BIT | _PREV_ALLOC_BIT
_END_MARK = 1
_HEADER_SIZE = 4
_ALIGNMENT = 8


class HeapError(Exception):
    """Raised when the heap cannot be set up or is accessed out of range."""


class InvalidFreeError(HeapError):
    """Raised when a pointer cannot be freed."""


@dataclass(frozen=True)
class Block:
    """One block as found while walking the heap."""

    address: int
    size: int
    allocated: bool
    prev_allocated: bool

    @property
    def end(self) -> int:
        """Address of the block's last byte."""
        return self.address + self.size - 1

    @property
    def payload(self) -> int:
        """Address of the first byte after the header."""
        return self.address + _HEADER_SIZE


class Heap:
    """A fixed-size region of memory managed by best-fit allocation."""

    def __init__(self, size_of_region: int, page_size: int = 4096) -> None:
        if size_of_region <= 0:
            raise HeapError("Requested block size is not positive")
        if page_size <= 0 or page_size % _ALIGNMENT:
            raise HeapError("Page size must be a positive multiple of 8")

        padding = (page_size - size_of_region % page_size) % page_size
        region_size = size_of_region + padding
        self.base = page_size * 16
        self._memory = bytearray(region_size)

        # Skip 4 bytes so payloads land on 8-byte boundaries, and keep
        # room for the end mark.
        self.alloc_size = region_size - 8
        self.heap_start = self.base + _HEADER_SIZE

        self._set(self.heap_start + self.alloc_size, _END_MARK)
        self._set(self.heap_start, self.alloc_size | _PREV_ALLOC_BIT)
        self._set(self.heap_start + self.alloc_size - 4, self.alloc_size)

    def _offset(self, address: int) -> int:
        offset = address - self.base
        if offset < 0 or offset + _INT.size > len(self._memory):
            raise HeapError(f"address 0x{address:08x} is outside the heap")
        return offset

    def _get(self, address: int) -> int:
        return _INT.unpack_from(self._memory, self._offset(address))[0]

    def _set(self, address: int, value: int) -> None:
        _INT.pack_into(self._memory, self._offset(address), value)

    def read_int(self, address: int) -> int:
        """Return the 32-bit signed integer stored at *address*."""
        return self._get(address)

    def write_int(self, address: int, value: int) -> None:
        """Store *value* as a 32-bit signed integer at *address*."""
        try:
            self._set(address, value)
        except struct.error as exc:
            raise HeapError(f"value {value} does not fit in 32 bits") from exc

    def balloc(self, size: int) -> int | None:
        """Allocate *size* bytes and return the payload address, or None if no block fits."""
        if size < 1:
            return None
        needed = -(-(size + _HEADER_SIZE) // _ALIGNMENT) * _ALIGNMENT

        best: int | None = None
        best_diff = self.alloc_size
        address = self.heap_start
        while (status := self._get(address)) != _END_MARK:
            block_size = status & ~_STATUS_MASK
            if not status & _ALLOC_BIT:
                if block_size == needed:
                    best = address
                    break
                if block_size > needed and best_diff > block_size - needed:
                    best_diff = block_size - needed
                    best = address
            address += block_size

        if best is None:
            return None

        status = self._get(best)
        prev_bit = status & _PREV_ALLOC_BIT
        block_size = status & ~_STATUS_MASK
        remainder = block_size - needed
        if remainder >= _ALIGNMENT:
            self._set(best + needed, remainder | _PREV_ALLOC_BIT)
            self._set(best + block_size - 4, remainder)
            self._set(best, needed | prev_bit | _ALLOC_BIT)
        else:
            following = best + block_size
            following_status = self._get(following)
            if following_status != _END_MARK:
                self._set(following, following_status | _PREV_ALLOC_BIT)
            self._set(best, status | _ALLOC_BIT)
        return best + _HEADER_SIZE

    def bfree(self, ptr: int | None) -> None:
        """Free the block whose payload starts at *ptr*.

        Raises InvalidFreeError for None, a misaligned or out-of-range
        pointer, or a block that is already free.
        """
        if ptr is None:
            raise InvalidFreeError("cannot free a null pointer")
        if ptr % _ALIGNMENT:
            raise InvalidFreeError(f"pointer 0x{ptr:08x} is not 8-byte aligned")
        if ptr < self.heap_start + 4 or ptr > self.heap_start + self.alloc_size - 4:
            raise InvalidFreeError(f"pointer 0x{ptr:08x} is outside the heap")

        header = ptr - _HEADER_SIZE
        status = self._get(header)
        if not status & _ALLOC_BIT:
            raise InvalidFreeError(f"block at 0x{header:08x} is already free")
        block_size = status & ~_STATUS_MASK
        following = header + block_size
        if block_size <= 0 or following > self.heap_start + self.alloc_size:
            raise InvalidFreeError(f"pointer 0x{ptr:08x} is not a block payload")

        self._set(header, block_size | (status & _PREV_ALLOC_BIT))
        self._set(following - 4, block_size)
        following_status = self._get(following)
        if following_status != _END_MARK:
            self._set(following, following_status & ~_PREV_ALLOC_BIT)

    def coalesce(self) -> bool:
        """Merge adjacent free blocks; return True if any were merged."""
        merged = False
        address = self.heap_start
        while (status := self._get(address)) != _END_MARK:
            size = status & ~_STATUS_MASK
            if not status & _ALLOC_BIT:
                following_status = self._get(address + size)
                if not following_status & _ALLOC_BIT:
                    following_size = following_status & ~_STATUS_MASK
                    self._set(address, status + following_size)
                    size += following_size
                    self._set(address + size - 4, size)
                    merged = True
                if not status & _PREV_ALLOC_BIT:
                    prev_size = self._get(address - 4)
                    prev = address - prev_size
                    self._set(prev, self._get(prev) + size)
                    self._set(address + size - 4, size + prev_size)
                    merged = True
            address += size
        return merged

    def blocks(self) -> Iterator[Block]:
        """Yield every block from the lowest address to the end mark."""
        address = self.heap_start
        while (status := self._get(address)) != _END_MARK:
            size = status & ~_STATUS_MASK
            yield Block(
                address=address,
                size=size,
                allocated=bool(status & _ALLOC_BIT),
                prev_allocated=bool(status & _PREV_ALLOC_BIT),
            )
            address += size

    def disp_heap(self, file: TextIO | None = None) -> None:
        """Print a table of all blocks and the used and free totals."""
        out = sys.stdout if file is None else file
        used_size = 0
        free_size = 0
        print(
            "*********************************** HEAP: Block List "
            "****************************",
            file=out,
        )
        print("No.\tStatus\tPrev\tt_Begin\t\tt_End\t\tt_Size", file=out)
        print("-" * 81, file=out)
        for number, block in enumerate(self.blocks(), start=1):
            status = "alloc" if block.allocated else "FREE "
            prev_status = "alloc" if block.prev_allocated else "FREE "
            if block.allocated:
                used_size += block.size
            else:
                free_size += block.size
            print(
                f"{number}\t{status}\t{prev_status}\t0x{block.address:08x}"
                f"\t0x{block.end:08x}\t{block.size:4d}",
                file=out,
            )
        print("-" * 81, file=out)
        print("*" * 81, file=out)
        print(f"Total used size = {used_size:4d}", file=out)
        print(f"Total free size = {free_size:4d}", file=out)
        print(f"Total size      = {used_size + free_size:4d}", file=out)
        print("*" * 81, file=out)
        out.flush()
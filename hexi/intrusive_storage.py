"""Fixed-size storage block with read and write cursors, linkable into a list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hexi.shared import BufferSeek


@dataclass(eq=False)
class IntrusiveNode:
    """Links of a doubly linked list of storage blocks."""

    next: Optional["IntrusiveNode"] = None
    prev: Optional["IntrusiveNode"] = None


class IntrusiveStorage:
    """A block of ``block_size`` bytes with independent read and write offsets.

    Reads, writes and skips are capped at what the block can satisfy and
    return how many bytes they handled.
    """

    def __init__(self, block_size: int) -> None:
        if block_size <= 0:
            raise ValueError(f"block size must be positive: {block_size}")
        self.block_size = block_size
        self.read_offset = 0
        self.write_offset = 0
        self.node = IntrusiveNode()
        self.storage = bytearray(block_size)

    def clear(self) -> None:
        """Reset both offsets; the contents should be treated as erased."""
        self.read_offset = 0
        self.write_offset = 0

    def write(self, data: bytes) -> int:
        """Write as much of ``data`` as fits and return the number of bytes written."""
        view = memoryview(data).cast("B")
        write_len = min(self.block_size - self.write_offset, len(view))
        end = self.write_offset + write_len
        self.storage[self.write_offset:end] = view[:write_len]
        self.write_offset = end
        return write_len

    def copy(self, length: int) -> bytes:
        """Return up to ``length`` bytes without advancing the read offset."""
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        read_len = min(self.block_size - self.read_offset, length)
        return bytes(self.storage[self.read_offset:self.read_offset + read_len])

    def read(self, length: int, allow_optimise: bool = False) -> bytes:
        """Return up to ``length`` bytes and advance the read offset past them."""
        data = self.copy(length)
        self.read_offset += len(data)
        if allow_optimise and self.read_offset == self.write_offset:
            self.clear()
        return data

    def skip(self, length: int, allow_optimise: bool = False) -> int:
        """Advance the read offset by up to ``length`` bytes; return the amount."""
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        skip_len = min(self.block_size - self.read_offset, length)
        self.read_offset += skip_len
        if allow_optimise and self.read_offset == self.write_offset:
            self.clear()
        return skip_len

    def size(self) -> int:
        """Number of bytes available to read."""
        return self.write_offset - self.read_offset

    def free(self) -> int:
        """Number of bytes that can still be written."""
        return self.block_size - self.write_offset

    def write_seek(self, direction: BufferSeek, offset: int) -> None:
        """Move the write offset absolutely or relative to its position."""
        direction = BufferSeek(direction)
        if direction is BufferSeek.ABSOLUTE:
            target = offset
        elif direction is BufferSeek.BACKWARD:
            target = self.write_offset - offset
        else:
            target = self.write_offset + offset
        if not 0 <= target <= self.block_size:
            raise ValueError(f"write offset {target} outside block of {self.block_size} bytes")
        self.write_offset = target

    def advance_write(self, size: int) -> int:
        """Advance the write offset by up to ``size`` bytes; return the amount."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        size = min(size, self.free())
        self.write_offset += size
        return size

    def read_data(self) -> memoryview:
        """View of the readable portion of the block."""
        return memoryview(self.storage)[self.read_offset:self.write_offset]

    def write_data(self) -> memoryview:
        """View of the writeable portion of the block."""
        return memoryview(self.storage)[self.write_offset:]

    def __getitem__(self, index: int) -> int:
        return self.storage[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.storage[index] = value
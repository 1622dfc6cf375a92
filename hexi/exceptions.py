"""Exceptions raised by buffers and streams."""

from __future__ import annotations


class HexiError(RuntimeError):
    """Base class for every error raised by this package."""


class BufferUnderrun(HexiError):
    """A read asked for more bytes than the buffer holds."""

    def __init__(self, read_size: int, total_read: int, buff_size: int) -> None:
        super().__init__(
            f"Buffer underrun: {read_size} byte read requested, buffer contains "
            f"{buff_size} bytes and total bytes read was {total_read}"
        )
        self.read_size = read_size
        self.total_read = total_read
        self.buff_size = buff_size


class BufferOverflow(HexiError):
    """A write asked for more space than the buffer has free."""

    def __init__(self, write_size: int, total_write: int, free: int) -> None:
        super().__init__(
            f"Buffer overflow: {write_size} byte write requested, free space is "
            f"{free} bytes and total bytes written was {total_write}"
        )
        self.write_size = write_size
        self.total_write = total_write
        self.free = free


class StreamReadLimit(HexiError):
    """A read would cross the read limit set on a stream."""

    def __init__(self, read_size: int, total_read: int, read_limit: int) -> None:
        super().__init__(
            f"Read boundary exceeded: {read_size} byte read requested, read limit "
            f"was {read_limit} bytes and total bytes read was {total_read}"
        )
        self.read_size = read_size
        self.total_read = total_read
        self.read_limit = read_limit
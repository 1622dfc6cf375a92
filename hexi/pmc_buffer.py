"""Polymorphic read interfaces and a read adaptor over a contiguous byte container."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from hexi.exceptions import BufferUnderrun


class BufferBase(ABC):
    """Common base of buffers, holding the read and write positions."""

    def __init__(self) -> None:
        self._read = 0
        self._write = 0

    @abstractmethod
    def size(self) -> int:
        """Number of bytes available to read."""

    @abstractmethod
    def empty(self) -> bool:
        """Whether there is no data left to read."""


class BufferRead(BufferBase):
    """Interface of buffers that can be read from."""

    NPOS = -1

    @abstractmethod
    def read(self, length: int) -> bytes:
        """Read ``length`` bytes and advance the read position."""

    @abstractmethod
    def copy(self, length: int) -> bytes:
        """Return ``length`` bytes without advancing the read position."""

    @abstractmethod
    def skip(self, length: int) -> None:
        """Advance the read position by ``length`` bytes."""

    @abstractmethod
    def __getitem__(self, index: int) -> int:
        """Byte at ``index`` relative to the read position."""

    @abstractmethod
    def find_first_of(self, value: int) -> int:
        """Position of ``value`` relative to the read position, or ``NPOS``."""


class BufferReadAdaptor(BufferRead):
    """Reads from a contiguous byte container such as ``bytes`` or ``bytearray``.

    The container's current contents are readable unless ``init_empty`` is
    set, in which case the adaptor starts with nothing to read.
    """

    def __init__(self, buffer: Any, init_empty: bool = False) -> None:
        super().__init__()
        self._buffer = buffer
        if not init_empty:
            self._write = len(buffer)

    def _fetch(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        if length > self.size():
            raise BufferUnderrun(length, self._read, self.size())
        return bytes(self._buffer[self._read:self._read + length])

    def read(self, length: int) -> bytes:
        data = self._fetch(length)
        self._read += length
        return data

    def copy(self, length: int) -> bytes:
        return self._fetch(length)

    def skip(self, length: int) -> None:
        self._read += length

    def size(self) -> int:
        return self._write - self._read

    def empty(self) -> bool:
        return self._read == self._write

    def __getitem__(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"index must not be negative: {index}")
        return self._buffer[self._read + index]

    def read_offset(self) -> int:
        """The current read position within the container."""
        return self._read

    def find_first_of(self, value: int) -> int:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value must fit in a byte: {value}")
        data = bytes(self._buffer[self._read:self._write])
        return data.find(bytes((value,)))

    def clear(self) -> None:
        """Reset the read position and clear the container if it can be cleared.

        The write position belongs to the writing side and is left alone.
        """
        self._read = 0
        clear = getattr(self._buffer, "clear", None)
        if callable(clear):
            clear()
"""A buffer that reads from and appends to a file on disk."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

from hexi.exceptions import BufferUnderrun, HexiError

PathLike = Union[str, "os.PathLike[str]"]


class FileBuffer:
    """Buffer over a file opened for reading and appending.

    Reads start at the beginning of the file; writes always go to its end.
    Once an operation fails, the buffer is in an error state: it tests false
    and further reads and writes are refused.
    """

    NPOS = -1

    def __init__(self, path: PathLike) -> None:
        self._file: Optional[BinaryIO] = open(path, "a+b")
        self._read = 0
        self._error = False
        try:
            self._write = self._file.seek(0, os.SEEK_END)
        except OSError:
            self._error = True
            self.close()
            raise

    def close(self) -> None:
        """Close the underlying file. Calling it again does nothing."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def _handle(self) -> BinaryIO:
        if self._error:
            raise HexiError("file buffer is in an error state")
        if self._file is None:
            raise HexiError("file buffer is closed")
        return self._file

    def _fail(self, exc: Exception) -> Exception:
        self._error = True
        return exc

    def _fetch(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        handle = self._handle()
        if length > self.size():
            raise self._fail(BufferUnderrun(length, self._read, self.size()))
        try:
            handle.seek(self._read)
            data = handle.read(length)
        except OSError as exc:
            raise self._fail(exc) from exc
        if len(data) != length:
            raise self._fail(BufferUnderrun(length, self._read, len(data)))
        return data

    def flush(self) -> None:
        """Flush data that has not yet been written to disk."""
        if self._file is not None:
            self._file.flush()

    def read(self, length: int) -> bytes:
        """Read ``length`` bytes and advance the read position."""
        data = self._fetch(length)
        self._read += length
        return data

    def copy(self, length: int) -> bytes:
        """Return ``length`` bytes without advancing the read position."""
        return self._fetch(length)

    def find_first_of(self, value: int) -> int:
        """Position of ``value`` relative to the read position, or ``NPOS``."""
        if self._error or self._file is None:
            return self.NPOS
        try:
            self._file.seek(self._read)
            data = self._file.read(max(self.size(), 0))
        except OSError:
            self._error = True
            return self.NPOS
        if len(data) != max(self.size(), 0):
            self._error = True
            return self.NPOS
        return data.find(bytes((value & 0xFF,)))

    def skip(self, length: int) -> None:
        """Advance the read position by ``length`` bytes."""
        self._read += length

    def empty(self) -> bool:
        """Whether there is no data left to read."""
        return self._write == self._read

    def can_write_seek(self) -> bool:
        """File buffers do not support write seeking."""
        return False

    def write(self, data: bytes) -> None:
        """Append ``data`` to the file."""
        handle = self._handle()
        data = bytes(data)
        try:
            handle.seek(self._write)
            written = handle.write(data)
        except OSError as exc:
            raise self._fail(exc) from exc
        if written != len(data):
            raise self._fail(HexiError(f"short write: {written} of {len(data)} bytes"))
        self._write += len(data)

    def size(self) -> int:
        """Number of bytes available to read."""
        return self._write - self._read

    def __bool__(self) -> bool:
        return not self._error

    def __enter__(self) -> "FileBuffer":
        return self

    def __exit__(self, *args) -> None:
        self.close()